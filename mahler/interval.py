"""
Pitch arithmetic: move a Pitch up by a diatonic interval.

The heavy lifting (letter stepping and enharmonic spelling) is delegated to
music21, e.g. Bb4 + P4 = Eb5 rather than D#5.
"""
from dataclasses import dataclass
from enum import Enum

import music21

from .constants import MAX_ACCIDENTAL, MAX_OCTAVE, MIN_ACCIDENTAL, MIN_OCTAVE
from .errors import MahlerError, Result, fail
from .note import Pitch


class Quality(Enum):
    PERFECT = "P"
    MAJOR = "M"
    MINOR = "m"
    AUGMENTED = "A"
    DIMINISHED = "d"


_PERFECT_STEPS = {1, 4, 5, 8}
_IMPERFECT_STEPS = {2, 3, 6, 7}


@dataclass(frozen=True)
class Interval:
    steps: int
    quality: Quality = Quality.PERFECT

    @property
    def is_valid(self) -> bool:
        if not isinstance(self.quality, Quality) or not 1 <= self.steps <= 8:
            return False
        if self.quality is Quality.PERFECT:
            return self.steps in _PERFECT_STEPS
        if self.quality in (Quality.MAJOR, Quality.MINOR):
            return self.steps in _IMPERFECT_STEPS
        # augmented / diminished: anything but a diminished unison
        return not (self.quality is Quality.DIMINISHED and self.steps == 1)

    @property
    def name(self) -> str:
        return f"{self.quality.value}{self.steps}"

    def to_music21(self) -> music21.interval.Interval:
        return music21.interval.Interval(self.name)


PERFECT_FOURTH = Interval(4, Quality.PERFECT)
PERFECT_FIFTH = Interval(5, Quality.PERFECT)


def _bounds_error(pitch: Pitch):
    if not MIN_ACCIDENTAL <= pitch.accidental <= MAX_ACCIDENTAL:
        return MahlerError.INVALID_ACCIDENTAL
    if not MIN_OCTAVE <= pitch.octave <= MAX_OCTAVE:
        return MahlerError.OCTAVE_OVERFLOW
    return None


def apply_interval(pitch: Pitch, interval: Interval) -> Result:
    """
    Return ``pitch`` raised by ``interval`` as a Result[Pitch].

    Errors:
        INVALID_RANGE       pitch or interval missing
        INVALID_NOTE        pitch is a rest
        INVALID_INTERVAL    quality does not fit the interval size
        INVALID_ACCIDENTAL  source or result needs more than a double accidental
        OCTAVE_OVERFLOW     source or result octave outside MIN_OCTAVE..MAX_OCTAVE
    """
    if pitch is None or interval is None:
        return fail(MahlerError.INVALID_RANGE)
    if pitch.is_rest:
        return fail(MahlerError.INVALID_NOTE)
    if not interval.is_valid:
        return fail(MahlerError.INVALID_INTERVAL)

    err = _bounds_error(pitch)
    if err is not None:
        return fail(err)

    moved = Pitch.from_music21(pitch.to_music21().transpose(interval.to_music21()))

    err = _bounds_error(moved)
    if err is not None:
        return fail(err)
    return Result(moved)
