"""
Error codes and the Result outcome type shared by every mahler operation.

Operations never raise on bad input; they hand back a Result whose ``error``
field names what went wrong.  ``Result.ok`` is the only reliable success test:
a failed chord build still carries an (empty) chord value.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any


class MahlerError(Enum):
    NONE = 0
    INVALID_RANGE = 1
    INVALID_NONTERTIAN_SIZE = 2
    INVALID_INVERSION = 3
    INVALID_FOLD_LEVEL = 4
    INVALID_INTERVAL = 5
    INVALID_NOTE = 6
    INVALID_ACCIDENTAL = 7
    OCTAVE_OVERFLOW = 8
    INVALID_DURATION = 9
    INVALID_TUPLET = 10
    INVALID_TIME_SIG = 11
    INVALID_MEASURE_DURATION = 12


_ERROR_MESSAGES: dict[MahlerError, str] = {
    MahlerError.NONE:                     "no error",
    MahlerError.INVALID_RANGE:            "missing or out-of-range argument",
    MahlerError.INVALID_NONTERTIAN_SIZE:  "nontertian chord size must be between 2 and 5",
    MahlerError.INVALID_INVERSION:        "inversion must be between 0 and chord size - 1",
    MahlerError.INVALID_FOLD_LEVEL:       "fold level must be between 0 and chord size - 1",
    MahlerError.INVALID_INTERVAL:         "invalid interval",
    MahlerError.INVALID_NOTE:             "invalid note",
    MahlerError.INVALID_ACCIDENTAL:       "accidental outside double-flat..double-sharp",
    MahlerError.OCTAVE_OVERFLOW:          "octave outside the representable range",
    MahlerError.INVALID_DURATION:         "invalid duration",
    MahlerError.INVALID_TUPLET:           "invalid tuplet",
    MahlerError.INVALID_TIME_SIG:         "invalid time signature",
    MahlerError.INVALID_MEASURE_DURATION: "measure duration does not match time signature",
}


def get_error(err: MahlerError) -> str:
    """Return a human-readable message for an error code."""
    return _ERROR_MESSAGES.get(err, "unknown error")


class MahlerException(ValueError):
    """Raised by Result.unwrap() when the result carries an error."""

    def __init__(self, error: MahlerError):
        super().__init__(f"{error.name}: {get_error(error)}")
        self.error = error


@dataclass(frozen=True)
class Result:
    value: Any = None
    error: MahlerError = MahlerError.NONE

    @property
    def ok(self) -> bool:
        return self.error is MahlerError.NONE

    def unwrap(self):
        if not self.ok:
            raise MahlerException(self.error)
        return self.value


def fail(error: MahlerError, value: Any = None) -> Result:
    return Result(value=value, error=error)
