"""
Note durations, tuplets and measure validation.

Durations are exact fractions of a whole note; ticks use TICKS_PER_WHOLE
(1920) so every standard value down to a 128th is a whole number of ticks.
"""
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import Optional

from .constants import BEAT_TICKS, TICKS_PER_WHOLE
from .errors import MahlerError, Result, fail
from .note import Tone


class Duration(Enum):
    DOTTED_WHOLE = "dotted_whole"
    WHOLE = "whole"
    DOTTED_HALF = "dotted_half"
    HALF = "half"
    DOTTED_QUARTER = "dotted_quarter"
    QUARTER = "quarter"
    DOTTED_EIGHTH = "dotted_eighth"
    EIGHTH = "eighth"
    DOTTED_SIXTEENTH = "dotted_sixteenth"
    SIXTEENTH = "sixteenth"
    DOTTED_THIRTYSECOND = "dotted_thirtysecond"
    THIRTYSECOND = "thirtysecond"
    SIXTYFOURTH = "sixtyfourth"
    ONETWENTYEIGHTH = "onetwentyeighth"
    TUPLET = "tuplet"


# Fraction of a whole note for every non-tuplet duration
_DURATION_FRACTIONS: dict[Duration, Fraction] = {
    Duration.DOTTED_WHOLE:        Fraction(3, 2),
    Duration.WHOLE:               Fraction(1, 1),
    Duration.DOTTED_HALF:         Fraction(3, 4),
    Duration.HALF:                Fraction(1, 2),
    Duration.DOTTED_QUARTER:      Fraction(3, 8),
    Duration.QUARTER:             Fraction(1, 4),
    Duration.DOTTED_EIGHTH:       Fraction(3, 16),
    Duration.EIGHTH:              Fraction(1, 8),
    Duration.DOTTED_SIXTEENTH:    Fraction(3, 32),
    Duration.SIXTEENTH:           Fraction(1, 16),
    Duration.DOTTED_THIRTYSECOND: Fraction(3, 64),
    Duration.THIRTYSECOND:        Fraction(1, 32),
    Duration.SIXTYFOURTH:         Fraction(1, 64),
    Duration.ONETWENTYEIGHTH:     Fraction(1, 128),
}


@dataclass(frozen=True)
class Tuplet:
    """``n`` notes of ``base`` value played in the time of ``m``."""
    n: int
    m: int
    base: Duration = Duration.QUARTER


@dataclass(frozen=True)
class TimedNote:
    tone: Tone
    accidental: int = 0
    octave: int = 4
    duration: Duration = Duration.QUARTER
    tuplet: Optional[Tuplet] = None


@dataclass(frozen=True)
class TimeSignature:
    numerator: int
    denominator: int


def rest(duration: Duration, tuplet: Optional[Tuplet] = None) -> TimedNote:
    return TimedNote(Tone.REST, 0, 0, duration, tuplet)


def create_tuplet(n: int, m: int, base: Duration = Duration.QUARTER) -> Result:
    """Result[Tuplet]; INVALID_TUPLET for non-positive counts or a tuplet base."""
    if n <= 0 or m <= 0 or base is Duration.TUPLET or base not in _DURATION_FRACTIONS:
        return fail(MahlerError.INVALID_TUPLET)
    return Result(Tuplet(n, m, base))


def get_duration_fraction(note: TimedNote) -> Result:
    """
    Length of ``note`` as a Fraction of a whole note.

    A tuplet note lasts base * m / n, so an eighth-note triplet
    (n=3, m=2, base=EIGHTH) is 1/12.
    """
    if note is None:
        return fail(MahlerError.INVALID_DURATION)

    if note.duration is Duration.TUPLET:
        tup = note.tuplet
        if tup is None or tup.n <= 0 or tup.m <= 0 or tup.base not in _DURATION_FRACTIONS:
            return fail(MahlerError.INVALID_TUPLET)
        return Result(_DURATION_FRACTIONS[tup.base] * tup.m / tup.n)

    frac = _DURATION_FRACTIONS.get(note.duration)
    if frac is None:
        return fail(MahlerError.INVALID_DURATION)
    return Result(frac)


def get_duration_ticks(note: TimedNote) -> Result:
    """Result[int]: duration in ticks, truncated toward zero."""
    res = get_duration_fraction(note)
    if not res.ok:
        return res
    frac = res.value
    return Result(TICKS_PER_WHOLE * frac.numerator // frac.denominator)


def compare_durations(a: TimedNote, b: TimedNote) -> Result:
    """Result[int]: -1, 0 or 1 as ``a`` is shorter, equal to, or longer than ``b``."""
    if a is None or b is None:
        return fail(MahlerError.INVALID_DURATION)
    ra = get_duration_ticks(a)
    if not ra.ok:
        return ra
    rb = get_duration_ticks(b)
    if not rb.ok:
        return rb
    return Result((ra.value > rb.value) - (ra.value < rb.value))


def validate_measure(notes, time_sig: TimeSignature) -> Result:
    """
    Check that ``notes`` exactly fill one measure of ``time_sig``.

    Result[int] carrying the measure length in ticks on success.

    Errors:
        INVALID_MEASURE_DURATION  no notes, or total length differs from the bar
        INVALID_TIME_SIG          non-positive parts or unsupported denominator
        (duration errors)         propagated from the first bad note
    """
    if not notes:
        return fail(MahlerError.INVALID_MEASURE_DURATION)
    if time_sig is None or time_sig.numerator <= 0 or time_sig.denominator <= 0:
        return fail(MahlerError.INVALID_TIME_SIG)

    beat_ticks = BEAT_TICKS.get(time_sig.denominator)
    if beat_ticks is None:
        return fail(MahlerError.INVALID_TIME_SIG)
    expected = time_sig.numerator * beat_ticks

    total = 0
    for note in notes:
        res = get_duration_ticks(note)
        if not res.ok:
            return res
        total += res.value

    if total != expected:
        return fail(MahlerError.INVALID_MEASURE_DURATION)
    return Result(expected)
