import unittest
import warnings

from singing_bowl.calculator import PYTHAGOREAN_COMMA, SingingBowlCalculator
from singing_bowl.design import DISPLAY_TOLERANCE_HZ, BowlDesign, find_octave
from singing_bowl.materials import Metal
from singing_bowl.profiles import Profile


class BowlDesignTests(unittest.TestCase):
    def test_defaults_match_calculator(self):
        design = BowlDesign()
        self.assertEqual(design.metal, Metal.IRON.material)
        self.assertEqual(design.thickness_ratio, PYTHAGOREAN_COMMA)
        self.assertIs(design.profile, Profile.HEMISPHERE)
        self.assertEqual(design.parameters(), SingingBowlCalculator().compute_bowl_parameters())

    def test_invalid_ratio_rejected(self):
        for ratio in (0.0, -2.0, float("inf")):
            with self.assertRaises(ValueError):
                BowlDesign(thickness_ratio=ratio)
        with self.assertRaises(ValueError):
            BowlDesign().with_thickness_ratio(0.0)

    def test_changes_return_new_designs(self):
        design = BowlDesign(metal="copper")
        updated = design.with_thickness_ratio(1.5)
        self.assertIsNot(design, updated)
        self.assertEqual(design.thickness_ratio, PYTHAGOREAN_COMMA)
        self.assertEqual(updated.thickness_ratio, 1.5)
        self.assertEqual(updated.with_profile("parabolic").profile, Profile.PARABOLIC)

    def test_with_frequency_selects_available_octave(self):
        design = BowlDesign(metal="brass")
        octaves = design.parameters().available_octaves
        chosen = design.with_frequency(octaves[-1])
        self.assertEqual(chosen.parameters().selected_frequency, octaves[-1])
        self.assertIsNone(chosen.with_frequency(None).selected_frequency)

    def test_with_frequency_rejects_unavailable(self):
        design = BowlDesign(metal="iron")
        with self.assertRaises(ValueError):
            design.with_frequency(design.parameters().normalized_frequency * 3.0)

    def test_with_octave_index(self):
        design = BowlDesign(metal="titanium")
        octaves = design.parameters().available_octaves
        self.assertEqual(design.with_octave_index(0).selected_frequency, octaves[0])
        self.assertEqual(design.with_octave_index(-1).selected_frequency, octaves[-1])
        with self.assertRaises(ValueError):
            design.with_octave_index(len(octaves))

    def test_metal_change_resets_unavailable_selection(self):
        iron = BowlDesign(metal="iron")
        iron = iron.with_frequency(iron.parameters().available_octaves[2])
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            copper = iron.with_metal(Metal.COPPER)
        self.assertEqual(len(caught), 1)
        self.assertTrue(issubclass(caught[0].category, UserWarning))
        copper_params = copper.parameters()
        self.assertEqual(copper.selected_frequency, copper_params.normalized_frequency)
        self.assertEqual(copper_params.metal, "Copper")

    def test_metal_change_without_selection_keeps_default(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            brass = BowlDesign().with_metal("brass")
        self.assertIsNone(brass.selected_frequency)
        self.assertEqual(brass.parameters().selected_frequency, brass.parameters().normalized_frequency)

    def test_metal_change_keeps_shared_octave(self):
        iron = BowlDesign(metal="iron")
        freq = iron.parameters().available_octaves[3]
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            again = iron.with_frequency(freq).with_metal("iron")
        self.assertEqual(again.selected_frequency, freq)


def test_find_octave_tolerance():
    octaves = (100.0, 200.0, 400.0)
    assert find_octave(200.0 * (1 + 1e-12), octaves) == 200.0
    assert find_octave(300.0, octaves) is None


def test_find_octave_accepts_rounded_input_with_tolerance():
    octaves = (525.9388, 1051.8776, 2103.7552)
    assert find_octave(1051.88, octaves) is None
    assert find_octave(1051.88, octaves, abs_tol=DISPLAY_TOLERANCE_HZ) == 1051.8776
    assert find_octave(1051.9, octaves, abs_tol=DISPLAY_TOLERANCE_HZ) is None


def test_with_frequency_matches_displayed_value():
    design = BowlDesign(metal="iron")
    octave = design.parameters().available_octaves[5]
    chosen = design.with_frequency(round(octave, 2), abs_tol=DISPLAY_TOLERANCE_HZ)
    assert chosen.selected_frequency == octave
