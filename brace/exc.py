class BraceError(Exception):
    pass


class BraceTypeError(BraceError, TypeError):
    def __init__(self, what: str, expected: str, value: object):
        super().__init__(
            f"{what} must be {expected}, got {type(value).__name__}"
        )
        self.value = value
