# ----- errors.py -----

class RecoveryError(ValueError):
    """Base class for every failure while recovering a secret."""


class InputUnreadable(RecoveryError):
    def __init__(self, path, reason):
        super().__init__(f"failed to read file {path}: {reason}")
        self.path = path


class MalformedDocument(RecoveryError):
    pass


class MalformedControlRecord(RecoveryError):
    pass


class InvalidCoordinate(RecoveryError):
    def __init__(self, key):
        super().__init__(f"invalid x value (key): {key!r}")
        self.key = key


class InvalidBase(RecoveryError):
    def __init__(self, x, base):
        super().__init__(f"invalid base for x={x}: {base!r}")
        self.x = x
        self.base = base


class InvalidEncodedValue(RecoveryError):
    def __init__(self, x, reason):
        super().__init__(f"failed to decode y value for x={x}: {reason}")
        self.x = x


class InsufficientPoints(RecoveryError):
    def __init__(self, found, required):
        super().__init__(f"not enough points in file: found {found}, need {required}")
        self.found = found
        self.required = required


class EmptyInput(RecoveryError):
    def __init__(self):
        super().__init__("cannot interpolate with zero points")


class DuplicateCoordinate(RecoveryError):
    def __init__(self, x):
        super().__init__(
            f"interpolation failed: duplicate x-value {x} detected leading to division by zero"
        )
        self.x = x


class InexactDivision(RecoveryError):
    """Points do not lie on one integer polynomial, so the value at zero is fractional."""

    def __init__(self, value):
        super().__init__(f"interpolation failed: value at x=0 is {value}, not an integer")
        self.value = value


class CommitmentMismatch(RecoveryError):
    def __init__(self, expected, actual):
        super().__init__(f"commitment mismatch: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual
