"""
Quartal and quintal (nontertian) chords: construction, inversion, folding.

A chord carries two voicings of the same length:

    base: the stack exactly as built from the root; never changes.
    current: the voicing after the latest inversion and any folds.

Inversion always starts over from ``base``, so asking for "2nd inversion"
gives the same answer no matter what was done to the chord before.  Folding
works on ``current`` as it stands and is not remembered anywhere else.

"Highest" voice is decided by octave number only; two voices in the same
octave rank equal whatever their letter.  The inversion results below depend
on that rule.
"""
import operator
from dataclasses import dataclass, field
from enum import Enum

from .constants import MAX_CHORD_SIZE, MIN_CHORD_SIZE
from .errors import MahlerError, Result, fail
from .interval import PERFECT_FIFTH, PERFECT_FOURTH, apply_interval
from .note import Pitch


class IntervalUnit(Enum):
    PERFECT_FOURTH = 4
    PERFECT_FIFTH = 5


class InversionMode(Enum):
    STANDARD = "standard"   # lowest voice up one octave
    FULL = "full"           # lowest voice up until it is strictly the top


_UNIT_INTERVALS = {
    IntervalUnit.PERFECT_FOURTH: PERFECT_FOURTH,
    IntervalUnit.PERFECT_FIFTH: PERFECT_FIFTH,
}


@dataclass
class NontertianChord:
    size: int = 0
    interval_unit: IntervalUnit = IntervalUnit.PERFECT_FOURTH
    inversion: int = 0
    inversion_mode: InversionMode = InversionMode.STANDARD
    base: tuple = ()
    current: list = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.size == 0


def _as_count(value):
    """Plain int for int-like counts (numpy integers included); None for bools and non-integers."""
    if isinstance(value, bool):
        return None
    try:
        return operator.index(value)
    except TypeError:
        return None


def highest_octave(voices) -> int:
    """Octave of the highest voice, comparing octave numbers only."""
    return max(p.octave for p in voices)


# ── Construction ──────────────────────────────────────────────────────────────

def build_nontertian_chord(root: Pitch, size: int, interval_unit: IntervalUnit) -> Result:
    """
    Stack ``size - 1`` copies of one perfect interval above ``root``.

    Each new voice is stacked on the voice just below it, not on the root,
    so a 5-note quartal chord on C4 spans C4-F4-Bb4-Eb5-Ab5.

    Returns Result[NontertianChord].  On failure the value is an empty chord
    (size 0); check ``result.ok`` rather than the chord.

    Errors:
        INVALID_NONTERTIAN_SIZE  size outside MIN_CHORD_SIZE..MAX_CHORD_SIZE
        INVALID_RANGE            root missing
        INVALID_INTERVAL         interval_unit is not an IntervalUnit
        (pitch arithmetic)       propagated unchanged, e.g. OCTAVE_OVERFLOW
    """
    empty = NontertianChord()
    size = _as_count(size)
    if size is None or not MIN_CHORD_SIZE <= size <= MAX_CHORD_SIZE:
        return fail(MahlerError.INVALID_NONTERTIAN_SIZE, empty)
    if root is None:
        return fail(MahlerError.INVALID_RANGE, empty)
    if not isinstance(interval_unit, IntervalUnit):
        return fail(MahlerError.INVALID_INTERVAL, empty)

    step = _UNIT_INTERVALS[interval_unit]
    voices = [root]
    for _ in range(1, size):
        res = apply_interval(voices[-1], step)
        if not res.ok:
            return fail(res.error, empty)
        voices.append(res.value)

    return Result(NontertianChord(
        size=size,
        interval_unit=interval_unit,
        inversion=0,
        inversion_mode=InversionMode.STANDARD,
        base=tuple(voices),
        current=list(voices),
    ))


def get_quartal_chord(root: Pitch, size: int) -> Result:
    """Chord of stacked perfect fourths, e.g. C4-F4-Bb4-Eb5."""
    return build_nontertian_chord(root, size, IntervalUnit.PERFECT_FOURTH)


def get_quintal_chord(root: Pitch, size: int) -> Result:
    """Chord of stacked perfect fifths, e.g. C4-G4-D5-A5."""
    return build_nontertian_chord(root, size, IntervalUnit.PERFECT_FIFTH)


# ── Re-voicing ────────────────────────────────────────────────────────────────

def _check_built(chord):
    if chord is None or chord.size < MIN_CHORD_SIZE or len(chord.current) != chord.size:
        return fail(MahlerError.INVALID_RANGE)
    return None


def invert_chord(chord: NontertianChord, inversion: int,
                 mode: InversionMode = InversionMode.STANDARD) -> Result:
    """
    Set ``chord.current`` to the requested inversion of ``chord.base``.

    ``current`` is first reset to ``base``; then, ``inversion`` times, the
    lowest voice is raised and rotated to the top:

        STANDARD  raised exactly one octave
        FULL      raised until its octave is above every other voice's,
                  re-measured against the voicing as it stands at that step

    C4-F4-Bb4-Eb5, inversion 1:  STANDARD -> F4-Bb4-Eb5-C5
                                 FULL     -> F4-Bb4-Eb5-C6

    The chord is left untouched when validation fails.

    Errors:
        INVALID_RANGE      chord missing or never built
        INVALID_INVERSION  inversion outside 0..size-1, or unknown mode
    """
    err = _check_built(chord)
    if err is not None:
        return err
    inversion = _as_count(inversion)
    if inversion is None or not 0 <= inversion < chord.size:
        return fail(MahlerError.INVALID_INVERSION)
    if not isinstance(mode, InversionMode):
        return fail(MahlerError.INVALID_INVERSION)

    notes = chord.current
    notes[:] = chord.base

    for _ in range(inversion):
        lowest = notes[0]
        octave = lowest.octave
        if mode is InversionMode.STANDARD:
            octave += 1
        else:
            ceiling = highest_octave(notes[1:])
            while octave <= ceiling:
                octave += 1
        notes[:-1] = notes[1:]
        notes[-1] = lowest.with_octave(octave)

    chord.inversion = inversion
    chord.inversion_mode = mode
    return Result(chord)


def fold_chord(chord: NontertianChord, levels: int) -> Result:
    """
    Drop the top ``levels`` slots of ``chord.current`` by one octave each.

    Slots are picked by index (the last ``levels`` positions), not by pitch,
    and each call applies on top of the previous one: folding by 1 twice
    lowers the last voice two octaves.  ``base`` and the recorded inversion
    are not touched.

    Errors:
        INVALID_RANGE       chord missing or never built
        INVALID_FOLD_LEVEL  levels outside 0..size-1
    """
    err = _check_built(chord)
    if err is not None:
        return err
    levels = _as_count(levels)
    if levels is None or not 0 <= levels < chord.size:
        return fail(MahlerError.INVALID_FOLD_LEVEL)

    notes = chord.current
    for i in range(levels):
        idx = chord.size - 1 - i
        notes[idx] = notes[idx].with_octave(notes[idx].octave - 1)
    return Result(chord)
