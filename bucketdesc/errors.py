import enum

class NameErrorKind(str, enum.Enum):
    NULL = "null"
    LENGTH_OUT_OF_RANGE = "length_out_of_range"
    CONTAINS_DOT = "contains_dot"
    PATTERN_MISMATCH = "pattern_mismatch"

class DateErrorKind(str, enum.Enum):
    UNPARSEABLE = "unparseable"

class BucketError(ValueError):
    """Base class for caller-supplied bad input. Never retryable."""

class BucketNameError(BucketError):
    def __init__(self, kind: NameErrorKind, name: str, message: str):
        super().__init__(f"{name}: {message}")
        self.kind = kind
        self.name = name
        self.message = message

class DateFormatError(BucketError):
    def __init__(self, text, message: str, kind: DateErrorKind = DateErrorKind.UNPARSEABLE):
        super().__init__(f"{text!r}: {message}")
        self.kind = kind
        self.text = text
        self.message = message

class BucketXMLError(BucketError):
    pass
