"""
Semitone helpers shared across the library: letter/semitone conversion,
enharmonic re-spelling and 12-slot semitone tables.
"""
import numpy as np

from .constants import SIZE_CHROMATIC, TONE_SEMITONES, _SEMITONE_TO_TONE
from .note import Pitch, Tone


def constrain_semitone(semi: int) -> int:
    """Wrap any semitone count into 0-11."""
    return semi % SIZE_CHROMATIC


def to_semitone(tone: Tone) -> int:
    return TONE_SEMITONES[tone]


def to_semitone_adj(pitch: Pitch) -> int:
    """Pitch class (0-11) of a pitch, accidental included: Cb -> 11, B# -> 0."""
    return constrain_semitone(to_semitone(pitch.tone) + pitch.accidental)


def from_semitone(semi: int, octave: int = 4) -> Pitch:
    """Build a Pitch from a pitch class using sharp spelling (1 -> C#)."""
    tone, acc = _SEMITONE_TO_TONE[constrain_semitone(semi)]
    return Pitch(Tone(tone), acc, octave)


def get_enharmonic(pitch: Pitch) -> Pitch:
    """
    Return the alternative spelling of an altered pitch (C#4 -> Db4,
    B#3 -> C4).  Naturals and rests come back unchanged.
    """
    if pitch.is_rest or pitch.accidental == 0:
        return pitch
    return Pitch.from_music21(pitch.to_music21().getEnharmonic())


def semitone_table(pitches) -> np.ndarray:
    """12-element boolean vector marking which pitch classes occur in ``pitches``."""
    table = np.zeros(SIZE_CHROMATIC, dtype=bool)
    for p in pitches:
        if not p.is_rest:
            table[to_semitone_adj(p)] = True
    return table


def has_shifted_matches(pitches, table: np.ndarray, shift: int) -> bool:
    """True if every pitch, transposed by ``shift`` semitones, is marked in ``table``."""
    return all(
        table[constrain_semitone(to_semitone_adj(p) + shift)]
        for p in pitches
        if not p.is_rest
    )
