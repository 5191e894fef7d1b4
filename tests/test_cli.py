import numpy as np
import pytest

from binarizer.cli import batch_binarize, binarize, show_image
from binarizer.pipeline.batch_binarizer import binarize_gallery
from binarizer.pipeline.image_viewer import view_image

from conftest import two_tone_pixels, write_jpeg


# ─── Program A ─────────────────────────────────────────────────────

def test_view_image_shows_display_window(two_tone_jpg, gui_calls):
    assert view_image(two_tone_jpg) is True
    assert [c[1] for c in gui_calls if c[0] == "imshow"] == ["Display"]
    assert ("waitKey", 0) in gui_calls


def test_view_image_missing_file(tmp_path, gui_calls, caplog):
    assert view_image(tmp_path / "ghost.jpg") is False
    assert gui_calls == []
    assert "Image not found" in caplog.text


def test_show_image_exit_codes(two_tone_jpg, tmp_path, gui_calls):
    assert show_image.main([str(two_tone_jpg)]) == 0
    assert show_image.main([str(tmp_path / "ghost.jpg")]) != 0


def test_show_image_default_path(monkeypatch, tmp_path, gui_calls):
    monkeypatch.setattr(show_image, "DEFAULT_INPUT", str(tmp_path / "missing.jpg"))
    args = show_image.parse_args([])
    assert args.path == str(tmp_path / "missing.jpg")


# ─── Program B ─────────────────────────────────────────────────────

def test_binarize_cli_success(two_tone_jpg, capsys):
    assert binarize.main([str(two_tone_jpg), "--threshold", "128"]) == 0

    out = capsys.readouterr().out
    assert "Success" in out
    assert str(two_tone_jpg.with_name("binary_plate.png")) in out


def test_binarize_cli_failure_still_exits_zero(tmp_path, capsys):
    assert binarize.main([str(tmp_path / "ghost.jpg")]) == 0
    assert "Failure" in capsys.readouterr().out


def test_binarize_cli_threshold_from_environment(two_tone_jpg, monkeypatch, capsys):
    monkeypatch.setenv("FIXED_THRESHOLD", "250")
    assert binarize.main([str(two_tone_jpg)]) == 0
    assert "Success" in capsys.readouterr().out

    from PIL import Image as PILImage
    with PILImage.open(two_tone_jpg.with_name("binary_plate.png")) as im:
        # every pixel is at or below 250
        assert np.array(im).max() == 0


def test_binarize_cli_ignores_non_numeric_env_threshold(two_tone_jpg, monkeypatch, capsys, caplog):
    monkeypatch.setenv("FIXED_THRESHOLD", "abc")

    assert binarize.main([str(two_tone_jpg)]) == 0

    assert "Success" in capsys.readouterr().out
    assert "FIXED_THRESHOLD='abc'" in caplog.text


def test_binarize_cli_bad_configuration_still_exits_zero(two_tone_jpg, monkeypatch, capsys):
    monkeypatch.setenv("PNG_COMPRESSION_LEVEL", "12")

    assert binarize.main([str(two_tone_jpg)]) == 0
    assert "Failure" in capsys.readouterr().out


def test_binarize_cli_show_flag(two_tone_jpg, gui_calls):
    assert binarize.main([str(two_tone_jpg), "--show"]) == 0
    assert {c[1] for c in gui_calls if c[0] == "imshow"} == {"Original", "Binary"}


# ─── Batch ─────────────────────────────────────────────────────────

@pytest.fixture
def gallery(tmp_path):
    folder = tmp_path / "gallery"
    write_jpeg(folder / "one.jpg", two_tone_pixels())
    write_jpeg(folder / "two.jpeg", two_tone_pixels())
    write_jpeg(folder / "nested" / "three.jpg", two_tone_pixels())
    (folder / "broken.jpg").write_bytes(b"garbage")
    (folder / "notes.png").write_bytes(b"garbage")
    return folder


def test_binarize_gallery_flat(gallery):
    written = binarize_gallery(gallery, 128)

    assert sorted(written) == [
        str(gallery / "binary_one.png"),
        str(gallery / "binary_two.png"),
    ]


def test_binarize_gallery_recursive(gallery):
    written = binarize_gallery(gallery, recursive=True)
    assert str(gallery / "nested" / "binary_three.png") in written
    assert len(written) == 3


def test_binarize_gallery_empty_folder(tmp_path):
    assert binarize_gallery(tmp_path) == []


def test_batch_cli(gallery, capsys):
    assert batch_binarize.main([str(gallery)]) == 0
    assert "Binarized 2 image(s)" in capsys.readouterr().out


def test_batch_cli_not_a_folder(tmp_path, capsys):
    assert batch_binarize.main([str(tmp_path / "missing")]) == 0
    assert "Failure" in capsys.readouterr().out


def test_batch_cli_bad_configuration(gallery, monkeypatch, capsys):
    monkeypatch.setenv("PNG_COMPRESSION_LEVEL", "12")

    assert batch_binarize.main([str(gallery)]) == 0
    assert "Failure" in capsys.readouterr().out
    assert not (gallery / "binary_one.png").exists()
