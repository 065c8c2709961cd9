"""
Pitch representation: diatonic tone + accidental + octave.

Octave numbering follows scientific pitch notation (C4 = middle C) so a
Pitch converts losslessly to and from ``music21.pitch.Pitch``.
"""
from dataclasses import dataclass, replace
from enum import IntEnum

import music21

from .constants import TONE_LETTERS


class Tone(IntEnum):
    REST = -1
    C = 0
    D = 1
    E = 2
    F = 3
    G = 4
    A = 5
    B = 6


class Accidental(IntEnum):
    DOUBLE_FLAT = -2
    FLAT = -1
    NATURAL = 0
    SHARP = 1
    DOUBLE_SHARP = 2


@dataclass(frozen=True)
class Pitch:
    tone: Tone
    accidental: int = Accidental.NATURAL
    octave: int = 4

    @property
    def is_rest(self) -> bool:
        return self.tone == Tone.REST

    def with_octave(self, octave: int) -> "Pitch":
        return replace(self, octave=octave)

    def to_music21(self) -> music21.pitch.Pitch:
        """music21 spells flats with '-' (B-4) and sharps with '#'."""
        acc = self.accidental
        suffix = "#" * acc if acc > 0 else "-" * -acc
        return music21.pitch.Pitch(f"{TONE_LETTERS[self.tone]}{suffix}{self.octave}")

    @classmethod
    def from_music21(cls, p: music21.pitch.Pitch) -> "Pitch":
        alter = p.accidental.alter if p.accidental is not None else 0
        octave = p.octave if p.octave is not None else p.implicitOctave
        return cls(Tone(TONE_LETTERS.index(p.step)), int(alter), int(octave))


REST = Pitch(Tone.REST, Accidental.NATURAL, 0)
