import numpy as np
import pytest
from PIL import Image as PILImage

from region_finder.cli.main import main
from region_finder.models.image import Image
from region_finder.repositories.image_repository import ImageRepository

from conftest import RED, WHITE, BLUE, blank_pixels, fill_rect


@pytest.fixture
def square_png(tmp_path):
    pixels = blank_pixels(10, 10)
    fill_rect(pixels, 0, 0, 8, 8, RED)
    path = tmp_path / "square.png"
    ImageRepository.save(Image(pixels=pixels, path=path))
    return path


@pytest.fixture
def frames_dir(tmp_path):
    folder = tmp_path / "frames"
    for i, x0 in enumerate((0, 20)):
        pixels = blank_pixels(30, 10)
        fill_rect(pixels, x0, 0, x0 + 8, 8, RED)
        ImageRepository.save(Image(pixels=pixels, path=folder / f"f{i}.png"))
    return folder


def _read(path):
    return ImageRepository.load(path).pixels


def test_recolor(square_png, tmp_path):
    out = tmp_path / "recolored.png"
    assert main(["recolor", str(square_png), "--color", "255,0,0", "--seed", "3", "-o", str(out)]) == 0

    pixels = _read(out)
    square = pixels[0:9, 0:9].reshape(-1, 3)
    assert (square == square[0]).all()
    np.testing.assert_array_equal(square[0], np.random.default_rng(3).integers(0, 256, size=3))
    assert tuple(pixels[9, 9]) == tuple(WHITE)


def test_highlight_with_pick(square_png, tmp_path):
    out = tmp_path / "highlighted.png"
    assert main(["highlight", str(square_png), "--pick", "4,4", "--paint-color", "#0000ff", "-o", str(out)]) == 0

    pixels = _read(out)
    assert tuple(pixels[4, 4]) == tuple(BLUE)
    assert tuple(pixels[9, 0]) == tuple(WHITE)


def test_highlight_folder(frames_dir, tmp_path):
    out = tmp_path / "highlighted"
    assert main(["highlight", str(frames_dir), "--color", "255,0,0", "-o", str(out)]) == 0
    assert sorted(p.name for p in out.iterdir()) == ["f0.png", "f1.png"]


def test_paint(frames_dir, tmp_path):
    out = tmp_path / "painting.png"
    assert main(["paint", str(frames_dir), "--pick", "0,0", "--paint-color", "0,0,255", "-o", str(out)]) == 0

    with PILImage.open(out) as saved:
        canvas = np.asarray(saved)
    assert canvas.shape == (10, 30, 4)
    assert int((canvas[:, :, 3] == 255).sum()) == 2 * 81


def test_missing_image_exits_nonzero(tmp_path, capsys):
    assert main(["recolor", str(tmp_path / "missing.png"), "--color", "1,2,3"]) == 1
    assert "error:" in capsys.readouterr().err


def test_pick_outside_image(square_png):
    assert main(["highlight", str(square_png), "--pick", "50,50"]) == 1


def test_empty_frames_folder(tmp_path):
    (tmp_path / "empty").mkdir()
    assert main(["paint", str(tmp_path / "empty"), "--color", "1,2,3"]) == 1


def test_bad_color_is_usage_error(square_png):
    with pytest.raises(SystemExit) as exc:
        main(["recolor", str(square_png), "--color", "red"])
    assert exc.value.code == 2
