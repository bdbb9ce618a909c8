import json

import pytest

from theme_palette_generator.cli import main

OUTPUTS = ("brand.css", "brand-preview.html", "brand-tokens.json", "readability_report.txt")


def test_generates_all_outputs(tmp_path, capsys):
    main(["#8b5cf6", "--harmony", "triadic", "--name", "brand", "-o", str(tmp_path)])

    for name in OUTPUTS:
        assert (tmp_path / name).exists()

    out = capsys.readouterr().out
    assert "Generating theme from: #8b5cf6" in out
    assert "Harmony: triadic" in out
    assert "READABILITY REPORT" in out

    data = json.loads((tmp_path / "brand-tokens.json").read_text())
    assert data["_source"] == "#8b5cf6"
    assert data["_harmony"] == "triadic"
    assert data["_background_strategy"] == "neutral"


def test_secondary_and_radius(tmp_path):
    main([
        "#3b82f6",
        "--secondary", "#f59e0b",
        "--radius", "0.5",
        "--background-strategy", "primary",
        "-o", str(tmp_path),
    ])

    css = (tmp_path / "theme.css").read_text()
    assert "--radius: 0.5rem;" in css
    data = json.loads((tmp_path / "theme-tokens.json").read_text())
    assert data["_source"] == "#3b82f6 + #f59e0b"
    assert "_harmony" not in data
    assert data["_background_strategy"] == "primary"


def test_from_tokens_revalidates(tmp_path, capsys):
    first = tmp_path / "first"
    second = tmp_path / "second"
    main(["#16a34a", "--name", "brand", "-o", str(first)])

    main(["--from-tokens", str(first / "brand-tokens.json"), "--name", "brand", "-o", str(second)])

    assert "Loading tokens" in capsys.readouterr().out
    for name in OUTPUTS:
        assert (second / name).exists()
    original = (first / "brand.css").read_text()
    assert (second / "brand.css").read_text() == original


@pytest.mark.parametrize(
    "argv",
    [
        ["not-a-color"],
        [],
        ["#8b5cf6", "--from-tokens", "tokens.json"],
        ["#8b5cf6", "--radius", "1.5"],
        ["#8b5cf6", "--harmony", "zigzag"],
    ],
)
def test_invalid_arguments_exit(argv, tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(argv + ["-o", str(tmp_path)])
    assert excinfo.value.code == 2
    assert not (tmp_path / "theme.css").exists()
