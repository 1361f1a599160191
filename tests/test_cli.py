import json

import pytest

from theme_palette_generator.cli import main
from theme_palette_generator.palette import generate


def test_json_output(capsys):
    main(["--mode", "monochrome", "--seed-color", "#3B82F6", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data["mode"] == "monochrome"
    assert data["seed"] == "#3b82f6"
    assert set(data) == {"light", "dark", "seed", "baseHue", "mode", "score"}
    assert data["light"] == generate("monochrome", "#3B82F6").light.as_dict()
    assert "textOnColor" in data["dark"]


def test_palette_listing(capsys):
    main(["-m", "triadic", "--seed", "cli", "--format", "oklch", "--scale"])
    out = capsys.readouterr().out
    assert "THEME TOKENS (LIGHT THEME)" in out
    assert "THEME TOKENS (DARK THEME)" in out
    assert "READABILITY REPORT" in out
    assert "Mode:     triadic" in out
    assert "oklch(" in out
    assert "Primary scale:" in out


def test_best_of_is_reproducible(capsys):
    main(["--seed", "b", "--best-of", "3", "--json"])
    first = capsys.readouterr().out
    main(["--seed", "b", "--best-of", "3", "--json"])
    assert capsys.readouterr().out == first


def test_from_palette_derives_opposite_mode(tmp_path, capsys):
    result = generate("analogous", "#e11d48")
    path = tmp_path / "light.json"
    path.write_text(json.dumps(result.light.as_dict()))

    main(["--from-palette", str(path), "--json"])
    out = capsys.readouterr().out
    data = json.loads(out[out.index("{"):])
    assert data["light"] == result.light.as_dict()
    assert data["dark"] == result.dark.as_dict()


def test_from_palette_missing_file(tmp_path):
    with pytest.raises(SystemExit):
        main(["--from-palette", str(tmp_path / "nope.json")])


@pytest.mark.parametrize(
    "argv",
    [
        ["--seed-color", "#123456", "--image", "x.png"],
        ["--seed-color", "blue"],
        ["--saturation", "6"],
        ["--best-of", "0"],
        ["--override", "#ff0000,,"],
        ["--override", "#ff0000,nope,,,"],
        ["--mode", "sepia"],
    ],
)
def test_invalid_arguments(argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == 2
