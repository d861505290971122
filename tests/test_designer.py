import unittest
import warnings

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt

from plotting.designer import BowlDesigner, Column
from singing_bowl.calculator import PYTHAGOREAN_COMMA
from singing_bowl.design import BowlDesign
from singing_bowl.formatting import format_frequency
from singing_bowl.profiles import Profile


class BowlDesignerTests(unittest.TestCase):
    def setUp(self):
        self.app = BowlDesigner(fig=plt.figure())

    def tearDown(self):
        plt.close(self.app.fig)

    def test_initial_state_matches_default_design(self):
        params = BowlDesign().parameters()
        self.assertEqual(self.app.design, BowlDesign())
        self.assertEqual(self.app._octaves, params.available_octaves)
        self.assertEqual(len(self.app.preview_ax.collections), 2)

    def test_octave_selection_updates_design(self):
        target = self.app._octaves[0]
        self.app.on_octave(format_frequency(target))
        self.assertEqual(self.app.design.selected_frequency, target)
        self.assertEqual(self.app.design.parameters().selected_frequency, target)

    def test_metal_change_reports_reset(self):
        self.app.on_octave(format_frequency(self.app._octaves[1]))
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            self.app.on_metal("Copper")
        self.assertEqual(self.app.design.metal.name, "Copper")
        self.assertIn("not available", self.app.status)
        self.assertEqual(self.app._octaves, self.app.design.parameters().available_octaves)

    def test_ratio_update_and_rejection(self):
        self.app.num_box.set_val("3")
        self.app.den_box.set_val("2")
        self.app.on_ratio()
        self.assertEqual(self.app.design.thickness_ratio, 1.5)

        self.app.den_box.set_val("0")
        self.app.on_ratio()
        self.assertEqual(self.app.design.thickness_ratio, 1.5)
        self.assertIn("Denominator", self.app.status)

    def test_profile_switch(self):
        self.app.on_profile("Parabolic")
        self.assertIs(self.app.design.profile, Profile.PARABOLIC)
        self.assertEqual(self.app.design.thickness_ratio, PYTHAGOREAN_COMMA)


def test_column_stacks_downwards():
    col = Column(x=0.5, top=1.0, w=0.4, gap=0.1)
    first = col.next(0.2)
    second = col.next(0.3)
    assert first == (0.5, 0.8, 0.4, 0.2)
    assert abs(second[1] - 0.4) < 1e-12
