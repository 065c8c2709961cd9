# ── Chord size bounds ─────────────────────────────────────────────────────────

MIN_CHORD_SIZE: int = 2
# Also the fixed capacity of a chord's base/current voicings.
MAX_CHORD_SIZE: int = 5

# ── Pitch bounds ──────────────────────────────────────────────────────────────

MIN_OCTAVE: int = 0
MAX_OCTAVE: int = 8
MIN_ACCIDENTAL: int = -2
MAX_ACCIDENTAL: int = 2

SIZE_CHROMATIC: int = 12

# Semitone offset of each diatonic letter above C (index = Tone value).
TONE_SEMITONES: list[int] = [0, 2, 4, 5, 7, 9, 11]
TONE_LETTERS: list[str] = ["C", "D", "E", "F", "G", "A", "B"]

# Sharp-preferred spelling used when rebuilding a note from a semitone.
# Entries are (tone index, accidental).
_SEMITONE_TO_TONE: list[tuple[int, int]] = [
    (0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (3, 0),
    (3, 1), (4, 0), (4, 1), (5, 0), (5, 1), (6, 0),
]

# Accidental → display suffix
_ACCIDENTAL_SUFFIX: dict[int, str] = {
    -2: "bb", -1: "b", 0: "", 1: "#", 2: "##",
}

# ── Rhythm ────────────────────────────────────────────────────────────────────

# MIDI-style resolution: ticks per whole note.
TICKS_PER_WHOLE: int = 1920
# Time-signature denominator → ticks per beat
BEAT_TICKS: dict[int, int] = {
    1: 1920, 2: 960, 4: 480, 8: 240, 16: 120, 32: 60, 64: 30,
}
