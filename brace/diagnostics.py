import enum
import sys


class Diagnostic(enum.Enum):
    empty_body = "empty-body"
    repeated_iterator_name = "repeated-iterator-name"

    @property
    def message(self) -> str:
        return _diagnostic_messages[self]

    def __call__(self, *args, **kwargs) -> None:
        warn(self, *args, **kwargs)


def warn(type: Diagnostic, *args, **kwargs) -> None:
    if type not in enabled_diagnostics:
        return

    if args or kwargs:
        assert bool(args) ^ bool(kwargs)

    diagnostic_message = type.message % (args or kwargs)
    print(f"WARN({type.value}): {diagnostic_message}", file=sys.stderr)


enabled_diagnostics = {
    Diagnostic.empty_body,
}


_diagnostic_messages = {
    Diagnostic.empty_body: "'%s' rendered with an empty body",
    Diagnostic.repeated_iterator_name: "Single-letter iterator names exhausted, using '%s'",
}
