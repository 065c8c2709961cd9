"""Human-readable note names: C4, Bb4, F#5, Ebb3 (rests print as 'r')."""
import re

from .constants import _ACCIDENTAL_SUFFIX, MAX_ACCIDENTAL, MIN_ACCIDENTAL, TONE_LETTERS
from .errors import MahlerError, Result, fail
from .note import REST, Pitch, Tone

_REST_NAME = "r"
_NOTE_RE = re.compile(r"^([A-Ga-g])(bb|b|##|#)?(-?\d+)$")
_SUFFIX_TO_ACCIDENTAL = {v: k for k, v in _ACCIDENTAL_SUFFIX.items()}


def write_note(pitch: Pitch) -> str:
    if pitch.is_rest:
        return _REST_NAME
    if not MIN_ACCIDENTAL <= pitch.accidental <= MAX_ACCIDENTAL:
        return f"{TONE_LETTERS[pitch.tone]}?{pitch.octave}"
    return f"{TONE_LETTERS[pitch.tone]}{_ACCIDENTAL_SUFFIX[pitch.accidental]}{pitch.octave}"


def parse_note(text: str) -> Result:
    """Parse a name produced by write_note back into a Result[Pitch]."""
    if not text:
        return fail(MahlerError.INVALID_NOTE)
    text = text.strip()
    if text.lower() == _REST_NAME:
        return Result(REST)
    m = _NOTE_RE.match(text)
    if not m:
        return fail(MahlerError.INVALID_NOTE)
    letter, suffix, octave = m.groups()
    tone = Tone(TONE_LETTERS.index(letter.upper()))
    return Result(Pitch(tone, _SUFFIX_TO_ACCIDENTAL[suffix or ""], int(octave)))


def format_chord(chord, sep: str = "-") -> str:
    """Join the current voicing of a chord, lowest index first."""
    return sep.join(write_note(p) for p in chord.current)


def print_chord(chord, label: str) -> None:
    notes = "-".join(f"{write_note(p):<4}" for p in chord.current)
    print(f"{label:<30}: {notes}")
