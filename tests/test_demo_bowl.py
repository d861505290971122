import argparse
import importlib.util
from pathlib import Path

import pytest

from singing_bowl.design import BowlDesign

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "demo_bowl.py"


def _load_demo():
    spec = importlib.util.spec_from_file_location("demo_bowl", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _namespace(**overrides):
    values = {"metal": "iron", "ratio": "531441/524288", "profile": "hemisphere", "octave": None, "frequency": None}
    values.update(overrides)
    return argparse.Namespace(**values)


def test_listed_frequency_is_accepted():
    demo = _load_demo()
    octaves = BowlDesign(metal="iron").parameters().available_octaves
    for octave in octaves:
        design = demo.build_design(_namespace(frequency=round(octave, 2)))
        assert design.selected_frequency == octave


def test_unlisted_frequency_is_rejected():
    demo = _load_demo()
    with pytest.raises(SystemExit, match="not an available octave"):
        demo.main(["--metal", "iron", "--frequency", "1000", "--no-plot"])


def test_main_prints_selected_octave(capsys):
    demo = _load_demo()
    assert demo.main(["--metal", "iron", "--frequency", "1051.88", "--list-octaves", "--no-plot"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Iron @ 1051.88 Hz")
    assert "1051.88 Hz *" in out
