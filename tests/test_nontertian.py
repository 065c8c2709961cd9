import unittest
import numpy as np
from mahler.errors import MahlerError
from mahler.display import format_chord, write_note
from mahler.note import REST, Pitch, Tone
from mahler.nontertian import (
    InversionMode,
    IntervalUnit,
    NontertianChord,
    build_nontertian_chord,
    fold_chord,
    get_quartal_chord,
    get_quintal_chord,
    highest_octave,
    invert_chord,
)

C4 = Pitch(Tone.C, 0, 4)


def names(pitches):
    return "-".join(write_note(p) for p in pitches)


class TestBuild(unittest.TestCase):
    def test_quartal_on_c4(self):
        res = get_quartal_chord(C4, 4)
        self.assertTrue(res.ok)
        chord = res.value
        self.assertEqual(chord.size, 4)
        self.assertEqual(format_chord(chord), "C4-F4-Bb4-Eb5")
        self.assertEqual(names(chord.base), "C4-F4-Bb4-Eb5")
        self.assertEqual(chord.inversion, 0)
        self.assertEqual(chord.inversion_mode, InversionMode.STANDARD)
        self.assertEqual(chord.interval_unit, IntervalUnit.PERFECT_FOURTH)

    def test_quintal_on_c4(self):
        chord = get_quintal_chord(C4, 5).unwrap()
        self.assertEqual(format_chord(chord), "C4-G4-D5-A5-E6")

    def test_each_voice_stacks_on_its_predecessor(self):
        # five fourths span more than an octave and a half: C4 .. Ab5
        chord = get_quartal_chord(C4, 5).unwrap()
        self.assertEqual(format_chord(chord), "C4-F4-Bb4-Eb5-Ab5")

    def test_sharp_root(self):
        chord = get_quintal_chord(Pitch(Tone.F, 1, 4), 4).unwrap()
        self.assertEqual(format_chord(chord), "F#4-C#5-G#5-D#6")

    def test_current_equals_base_after_build(self):
        for unit in IntervalUnit:
            for size in range(2, 6):
                for root in (C4, Pitch(Tone.E, -1, 3), Pitch(Tone.B, 0, 2)):
                    chord = build_nontertian_chord(root, size, unit).unwrap()
                    self.assertEqual(list(chord.base), chord.current)
                    self.assertEqual(len(chord.current), size)

    def test_current_is_independent_of_base(self):
        chord = get_quartal_chord(C4, 3).unwrap()
        self.assertIsInstance(chord.base, tuple)
        self.assertIsNot(chord.current, chord.base)

    def test_invalid_sizes(self):
        for size in (1, 6, 0, -1):
            res = get_quartal_chord(C4, size)
            self.assertFalse(res.ok)
            self.assertEqual(res.error, MahlerError.INVALID_NONTERTIAN_SIZE)
            self.assertEqual(res.value.size, 0)
            self.assertTrue(res.value.is_empty)

    def test_numpy_size_accepted_bool_rejected(self):
        chord = get_quartal_chord(C4, np.int64(3)).unwrap()
        self.assertEqual(chord.size, 3)
        self.assertIs(type(chord.size), int)
        for bad in (True, 3.0, "3"):
            self.assertEqual(get_quartal_chord(C4, bad).error, MahlerError.INVALID_NONTERTIAN_SIZE)

    def test_missing_root(self):
        res = get_quartal_chord(None, 3)
        self.assertEqual(res.error, MahlerError.INVALID_RANGE)
        self.assertTrue(res.value.is_empty)

    def test_bad_interval_unit(self):
        res = build_nontertian_chord(C4, 3, 4)
        self.assertEqual(res.error, MahlerError.INVALID_INTERVAL)

    def test_octave_overflow_is_propagated(self):
        res = get_quartal_chord(Pitch(Tone.C, 0, 8), 4)
        self.assertEqual(res.error, MahlerError.OCTAVE_OVERFLOW)
        self.assertTrue(res.value.is_empty)

    def test_accidental_overflow_is_propagated(self):
        # Fbb + P4 would need a triple flat
        res = get_quartal_chord(Pitch(Tone.F, -2, 4), 2)
        self.assertEqual(res.error, MahlerError.INVALID_ACCIDENTAL)

    def test_rest_root(self):
        res = get_quintal_chord(REST, 3)
        self.assertEqual(res.error, MahlerError.INVALID_NOTE)


class TestInvert(unittest.TestCase):
    def setUp(self):
        self.chord = get_quartal_chord(C4, 4).unwrap()

    def test_standard_first_inversion(self):
        res = invert_chord(self.chord, 1, InversionMode.STANDARD)
        self.assertTrue(res.ok)
        self.assertIs(res.value, self.chord)
        self.assertEqual(format_chord(self.chord), "F4-Bb4-Eb5-C5")
        self.assertEqual(self.chord.inversion, 1)
        self.assertEqual(self.chord.inversion_mode, InversionMode.STANDARD)

    def test_standard_second_inversion_from_base(self):
        invert_chord(self.chord, 1)
        invert_chord(self.chord, 2, InversionMode.STANDARD)
        self.assertEqual(format_chord(self.chord), "Bb4-Eb5-C5-F5")

    def test_full_first_inversion(self):
        invert_chord(self.chord, 1, InversionMode.FULL)
        self.assertEqual(format_chord(self.chord), "F4-Bb4-Eb5-C6")
        self.assertEqual(self.chord.inversion_mode, InversionMode.FULL)

    def test_full_inversion_can_jump_several_octaves(self):
        chord = get_quartal_chord(C4, 5).unwrap()
        invert_chord(chord, 1, InversionMode.FULL)
        # top voice is Ab5, so C4 has to climb to C6
        self.assertEqual(format_chord(chord), "F4-Bb4-Eb5-Ab5-C6")

    def test_full_inversion_remeasures_each_step(self):
        invert_chord(self.chord, 2, InversionMode.FULL)
        self.assertEqual(format_chord(self.chord), "Bb4-Eb5-C6-F7")
        invert_chord(self.chord, 3, InversionMode.FULL)
        self.assertEqual(format_chord(self.chord), "Eb5-C6-F7-Bb8")

    def test_full_vs_standard_quintal(self):
        chord = get_quintal_chord(C4, 4).unwrap()
        invert_chord(chord, 2, InversionMode.STANDARD)
        self.assertEqual(format_chord(chord), "D5-A5-C5-G5")
        invert_chord(chord, 2, InversionMode.FULL)
        self.assertEqual(format_chord(chord), "D5-A5-C6-G7")

    def test_three_note_inversions(self):
        quartal = get_quartal_chord(C4, 3).unwrap()
        quintal = get_quintal_chord(C4, 3).unwrap()
        invert_chord(quartal, 2)
        invert_chord(quintal, 2)
        self.assertEqual(format_chord(quartal), "Bb4-C5-F5")
        self.assertEqual(format_chord(quintal), "D5-C5-G5")

    def test_idempotent(self):
        for mode in InversionMode:
            for inv in range(4):
                invert_chord(self.chord, inv, mode)
                first = list(self.chord.current)
                invert_chord(self.chord, inv, mode)
                self.assertEqual(self.chord.current, first)

    def test_inversion_zero_resets_to_base(self):
        invert_chord(self.chord, 3, InversionMode.FULL)
        fold_chord(self.chord, 2)
        invert_chord(self.chord, 0, InversionMode.FULL)
        self.assertEqual(self.chord.current, list(self.chord.base))
        self.assertEqual(self.chord.inversion, 0)

    def test_inversion_ignores_previous_fold(self):
        fold_chord(self.chord, 3)
        invert_chord(self.chord, 1, InversionMode.STANDARD)
        self.assertEqual(format_chord(self.chord), "F4-Bb4-Eb5-C5")

    def test_base_never_changes(self):
        base = self.chord.base
        invert_chord(self.chord, 3, InversionMode.FULL)
        fold_chord(self.chord, 3)
        self.assertIs(self.chord.base, base)
        self.assertEqual(names(self.chord.base), "C4-F4-Bb4-Eb5")

    def test_out_of_range_leaves_chord_unchanged(self):
        invert_chord(self.chord, 1, InversionMode.FULL)
        before = list(self.chord.current)
        for bad in (4, -1):
            res = invert_chord(self.chord, bad, InversionMode.STANDARD)
            self.assertEqual(res.error, MahlerError.INVALID_INVERSION)
        self.assertEqual(self.chord.current, before)
        self.assertEqual(self.chord.inversion, 1)
        self.assertEqual(self.chord.inversion_mode, InversionMode.FULL)

    def test_numpy_count_accepted_bool_rejected(self):
        res = invert_chord(self.chord, np.int32(1), InversionMode.STANDARD)
        self.assertTrue(res.ok)
        self.assertEqual(format_chord(self.chord), "F4-Bb4-Eb5-C5")
        self.assertIs(type(self.chord.inversion), int)
        for bad in (True, False, 1.0):
            res = invert_chord(self.chord, bad, InversionMode.FULL)
            self.assertEqual(res.error, MahlerError.INVALID_INVERSION)
        self.assertEqual(format_chord(self.chord), "F4-Bb4-Eb5-C5")

    def test_unknown_mode(self):
        res = invert_chord(self.chord, 1, "sideways")
        self.assertEqual(res.error, MahlerError.INVALID_INVERSION)
        self.assertEqual(self.chord.current, list(self.chord.base))

    def test_missing_or_empty_chord(self):
        self.assertEqual(invert_chord(None, 0).error, MahlerError.INVALID_RANGE)
        empty = get_quartal_chord(C4, 9).value
        self.assertEqual(invert_chord(empty, 0).error, MahlerError.INVALID_RANGE)


class TestFold(unittest.TestCase):
    def setUp(self):
        self.chord = get_quartal_chord(C4, 4).unwrap()
        invert_chord(self.chord, 1, InversionMode.FULL)

    def test_fold_one_level(self):
        res = fold_chord(self.chord, 1)
        self.assertTrue(res.ok)
        self.assertEqual(format_chord(self.chord), "F4-Bb4-Eb5-C5")

    def test_repeated_fold_accumulates_on_last_voice(self):
        fold_chord(self.chord, 1)
        fold_chord(self.chord, 1)
        self.assertEqual(format_chord(self.chord), "F4-Bb4-Eb5-C4")

    def test_fold_several_levels(self):
        fold_chord(self.chord, 3)
        self.assertEqual(format_chord(self.chord), "F4-Bb3-Eb4-C5")

    def test_fold_keeps_inversion_state(self):
        fold_chord(self.chord, 2)
        self.assertEqual(self.chord.inversion, 1)
        self.assertEqual(self.chord.inversion_mode, InversionMode.FULL)
        self.assertEqual(names(self.chord.base), "C4-F4-Bb4-Eb5")

    def test_fold_zero_is_noop(self):
        before = list(self.chord.current)
        res = fold_chord(self.chord, 0)
        self.assertTrue(res.ok)
        self.assertEqual(self.chord.current, before)

    def test_out_of_range_leaves_chord_unchanged(self):
        before = list(self.chord.current)
        for bad in (4, -1):
            res = fold_chord(self.chord, bad)
            self.assertEqual(res.error, MahlerError.INVALID_FOLD_LEVEL)
        self.assertEqual(self.chord.current, before)

    def test_numpy_levels_accepted_bool_rejected(self):
        self.assertTrue(fold_chord(self.chord, np.int64(1)).ok)
        self.assertEqual(format_chord(self.chord), "F4-Bb4-Eb5-C5")
        for bad in (True, 1.0):
            self.assertEqual(fold_chord(self.chord, bad).error, MahlerError.INVALID_FOLD_LEVEL)
        self.assertEqual(format_chord(self.chord), "F4-Bb4-Eb5-C5")

    def test_missing_chord(self):
        self.assertEqual(fold_chord(None, 1).error, MahlerError.INVALID_RANGE)
        self.assertEqual(fold_chord(NontertianChord(), 0).error, MahlerError.INVALID_RANGE)


class TestHighestOctave(unittest.TestCase):
    def test_octave_only(self):
        voices = [Pitch(Tone.B, 0, 4), Pitch(Tone.C, 0, 5), Pitch(Tone.A, 0, 4)]
        self.assertEqual(highest_octave(voices), 5)

    def test_same_octave_ties(self):
        # letters are not compared: B4 and C4 rank the same
        voices = [Pitch(Tone.B, 0, 4), Pitch(Tone.C, 0, 4)]
        self.assertEqual(highest_octave(voices), 4)


if __name__ == "__main__":
    unittest.main()
