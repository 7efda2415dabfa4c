"""Unit tests for the command-line interface."""

import json

import pytest

from factories import line_stroke
from unistroke_lib.cli import main, read_stroke_file
from unistroke_lib.domain.geometry import Point


def write_stroke(path, points):
    path.write_text("".join(f"{p.x} {p.y}\n" for p in points))
    return path


class TestReadStrokeFile:

    def test_separators_comments_and_blanks(self, tmp_path):
        """Spaces and commas both separate; comments and blanks are skipped."""
        path = tmp_path / "stroke.txt"
        path.write_text("# pen down\n1 2\n\n3,4\n 5 ,  6 \n")
        assert read_stroke_file(path) == [Point(1, 2), Point(3, 4), Point(5, 6)]

    def test_bad_line(self, tmp_path):
        """A line without two fields names its line number."""
        path = tmp_path / "stroke.txt"
        path.write_text("1 2\n3\n")
        with pytest.raises(ValueError, match=":2:"):
            read_stroke_file(path)

    def test_non_integer(self, tmp_path):
        """Fractional coordinates are rejected."""
        path = tmp_path / "stroke.txt"
        path.write_text("1.5 2\n")
        with pytest.raises(ValueError):
            read_stroke_file(path)


def test_prints_digit(tmp_path, template_file, capsys):
    """The recognized digit is printed alone."""
    stroke = write_stroke(tmp_path / "stroke.txt", line_stroke(120))
    assert main(["--stroke", str(stroke), "--templates", str(template_file)]) == 0
    assert capsys.readouterr().out.strip() == "6"


def test_json_output(tmp_path, template_file, capsys):
    """--json prints digit, score and all ten scores."""
    stroke = write_stroke(tmp_path / "stroke.txt", line_stroke(20))
    code = main(["--stroke", str(stroke), "--templates", str(template_file), "--json"])
    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["digit"] == 1
    assert payload["score"] == 0
    assert len(payload["scores"]) == 10


def test_accumulation_once(tmp_path, template_file, capsys):
    """--accumulation once is accepted and recognizes the stroke."""
    stroke = write_stroke(tmp_path / "stroke.txt", line_stroke(180))
    code = main(["--stroke", str(stroke), "--templates", str(template_file),
                 "--accumulation", "once"])
    assert code == 0
    assert capsys.readouterr().out.strip() == "9"


def test_extra_points_are_dropped(tmp_path, template_file, capsys):
    """Points past 150 are ignored."""
    points = line_stroke(60) + [Point(500, 500)] * 5
    stroke = write_stroke(tmp_path / "stroke.txt", points)
    assert main(["--stroke", str(stroke), "--templates", str(template_file)]) == 0
    assert capsys.readouterr().out.strip() == "3"


def test_missing_templates(tmp_path):
    """A missing reference file exits with 1."""
    stroke = write_stroke(tmp_path / "stroke.txt", line_stroke(0))
    assert main(["--stroke", str(stroke), "--templates", str(tmp_path / "none.txt")]) == 1


def test_missing_stroke_file(tmp_path, template_file):
    """A missing stroke file exits with 1."""
    assert main(["--stroke", str(tmp_path / "none.txt"), "--templates", str(template_file)]) == 1


def test_single_point_stroke(tmp_path, template_file):
    """A one-point stroke exits with 1."""
    stroke = write_stroke(tmp_path / "stroke.txt", [Point(4, 4)])
    assert main(["--stroke", str(stroke), "--templates", str(template_file)]) == 1


def test_empty_stroke(tmp_path, template_file):
    """A stroke file with no points exits with 1."""
    stroke = tmp_path / "stroke.txt"
    stroke.write_text("# nothing\n")
    assert main(["--stroke", str(stroke), "--templates", str(template_file)]) == 1


def test_bad_accumulation_is_usage_error(tmp_path, template_file):
    """An unknown accumulation mode is an argparse error."""
    with pytest.raises(SystemExit) as exc:
        main(["--stroke", "x", "--templates", str(template_file), "--accumulation", "round"])
    assert exc.value.code == 2


def test_render_writes_png(tmp_path, template_file, capsys):
    """--render saves a PNG next to the printed digit."""
    stroke = write_stroke(tmp_path / "stroke.txt", [Point(0, 0), Point(40, 250)])
    out = tmp_path / "match.png"
    code = main(["--stroke", str(stroke), "--templates", str(template_file),
                 "--render", str(out)])
    assert code == 0
    assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
    assert capsys.readouterr().out.strip().isdigit()
