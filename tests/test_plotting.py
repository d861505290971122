import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt

from plotting.bowl import plot_bowl_preview, plot_wall_section
from plotting.svg import BowlSectionSvg
from singing_bowl.calculator import SingingBowlCalculator
from singing_bowl.profiles import Profile


def _dimensions():
    return SingingBowlCalculator("copper").compute_bowl_parameters().dimensions


def test_plot_bowl_preview_draws_two_walls():
    fig = plt.figure()
    ax = fig.add_subplot(111, projection="3d")
    returned = plot_bowl_preview(_dimensions(), Profile.HEMISPHERE, ax=ax, segments=16, steps=10, show=False)
    assert returned is ax
    assert len(ax.collections) == 2
    xmin, xmax = ax.get_xlim3d()
    zmin, zmax = ax.get_zlim3d()
    assert abs((xmax - xmin) - (zmax - zmin)) < 1e-9
    plt.close(fig)


def test_plot_wall_section_mirrors_profiles():
    fig, ax = plt.subplots()
    plot_wall_section(_dimensions(), "parabolic", ax=ax, steps=10)
    assert len(ax.lines) == 4
    plt.close(fig)


def test_svg_section_written(tmp_path):
    renderer = BowlSectionSvg(filename="copper.svg", output_dir=str(tmp_path / "svg"))
    path = renderer.draw(_dimensions(), Profile.HEMISPHERE, label="Copper")
    text = (tmp_path / "svg" / "copper.svg").read_text()
    assert path.endswith("copper.svg")
    assert text.count("<polyline") == 2
    assert "Copper" in text
