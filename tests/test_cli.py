import os

import pytest

from DocShot import __version__
from DocShot.cli import main


def _pngs(directory):
    return sorted(name for name in os.listdir(directory) if name.endswith(".png"))


def test_convert_default_options(make_doc, tmp_path, capsys):
    doc = make_doc(250)
    out = tmp_path / "out"

    code = main(["convert", str(doc), "--output", str(out), "--no-progress"])

    captured = capsys.readouterr()
    assert code == 0
    assert "Traceback" not in captured.err
    assert "Reading documentation from:" in captured.out
    assert "Lines: 250" in captured.out
    assert "Success!" in captured.out
    assert _pngs(out) == ["page_001.png", "page_002.png", "page_003.png", "page_004.png"]


@pytest.mark.parametrize("density, expected_pages", [("high", 3), ("medium", 4), ("low", 5), ("LOW", 5)])
def test_convert_density_presets(make_doc, tmp_path, density, expected_pages):
    out = tmp_path / "out"

    code = main(["convert", str(make_doc(250)), "-o", str(out), "-d", density, "--no-progress"])

    assert code == 0
    assert len(_pngs(out)) == expected_pages


def test_convert_custom_options(make_doc, tmp_path, capsys):
    out = tmp_path / "out"

    code = main([
        "convert", str(make_doc(250)), "-o", str(out),
        "--lines", "30", "--font-size", "10", "--width", "600",
        "--title", "Guide", "--theme", "light", "--no-progress",
    ])

    captured = capsys.readouterr()
    assert code == 0
    assert _pngs(out) == [f"page_{i:03d}.png" for i in range(1, 10)]
    assert "Lines per image: 30" in captured.out
    assert "Font size: 10pt" in captured.out
    assert "Image width: 600px" in captured.out


def test_convert_with_progress_bar(make_doc, tmp_path, capsys):
    out = tmp_path / "out"

    assert main(["convert", str(make_doc(100)), "-o", str(out), "--lines", "20"]) == 0
    assert "Progress" in capsys.readouterr().out
    assert len(_pngs(out)) == 5


def test_convert_creates_nested_output_dir(make_doc, tmp_path):
    out = tmp_path / "a" / "b" / "c"

    assert main(["convert", str(make_doc(10)), "-o", str(out), "--no-progress"]) == 0
    assert _pngs(out) == ["page_001.png"]


def test_convert_directory_batch(make_doc, tmp_path):
    make_doc(90, "docs/a.md")
    make_doc(10, "docs/b.md")
    out = tmp_path / "out"

    assert main(["convert", str(tmp_path / "docs"), "-o", str(out), "--no-progress"]) == 0
    assert _pngs(out / "a") == ["page_001.png", "page_002.png"]
    assert _pngs(out / "b") == ["page_001.png"]


def test_convert_continue_on_error_reports_failures(make_doc, tmp_path, capsys):
    bad = tmp_path / "docs" / "a.md"
    bad.parent.mkdir()
    bad.write_bytes(b"\xff\xfe")
    make_doc(10, "docs/b.md")
    out = tmp_path / "out"

    code = main(["convert", str(tmp_path / "docs"), "-o", str(out), "--continue-on-error", "--no-progress"])

    captured = capsys.readouterr()
    assert code == 1
    assert "a.md" in captured.err
    assert "1 failed" in captured.out
    assert _pngs(out / "b") == ["page_001.png"]


def test_convert_file_not_found(tmp_path, capsys):
    code = main(["convert", str(tmp_path / "missing.md"), "-o", str(tmp_path / "out")])

    captured = capsys.readouterr()
    assert code == 1
    assert "❌ Error: File not found" in captured.err
    assert "Traceback" not in captured.err


def test_convert_invalid_density(make_doc, tmp_path, capsys):
    code = main(["convert", str(make_doc(10)), "-o", str(tmp_path / "out"), "--density", "invalid"])

    assert code == 1
    assert "Invalid density 'invalid'" in capsys.readouterr().err
    assert not (tmp_path / "out").exists()


def test_convert_invalid_density_with_lines_override(make_doc, tmp_path):
    out = tmp_path / "out"

    assert main(["convert", str(make_doc(10)), "-o", str(out), "-d", "invalid", "--lines", "5", "--no-progress"]) == 0
    assert len(_pngs(out)) == 2


@pytest.mark.parametrize("flag, value", [("--lines", "abc"), ("--font-size", "0"), ("--width", "-3")])
def test_convert_invalid_numbers(make_doc, tmp_path, capsys, flag, value):
    with pytest.raises(SystemExit) as exc:
        main(["convert", str(make_doc(10)), "-o", str(tmp_path / "out"), flag, value])

    assert exc.value.code == 1
    assert "❌ Error:" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage:" in capsys.readouterr().out


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])

    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_load_instructions(png_dir, capsys):
    code = main(["load", str(png_dir)])

    out = capsys.readouterr().out
    assert code == 0
    assert "LOADING IMAGES INTO CLAUDE CODE" in out
    assert "═" * 70 in out
    assert f"Review all images in {png_dir}" in out
    assert "(2 images)" in out


def test_load_default_directory(make_doc, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["convert", str(make_doc(10)), "--no-progress"]) == 0
    capsys.readouterr()

    assert main(["load"]) == 0
    assert os.path.join(str(tmp_path), "docshot") in capsys.readouterr().out


def test_load_missing_directory(tmp_path, capsys):
    code = main(["load", str(tmp_path / "missing")])

    assert code == 1
    assert "Directory not found" in capsys.readouterr().err


def test_load_empty_directory_warns(tmp_path, capsys):
    assert main(["load", str(tmp_path)]) == 0
    assert "docshot convert" in capsys.readouterr().out


def test_refs(png_dir, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)

    assert main(["refs", "images"]) == 0
    assert capsys.readouterr().out.strip() == "@images/page_001.png @images/page_002.png"


def test_refs_empty_directory(tmp_path, capsys):
    assert main(["refs", str(tmp_path)]) == 1
    assert "No PNG files found" in capsys.readouterr().err
