import pytest
from PIL import Image

from raytracer.canvas import Canvas
from raytracer.cli import main, write_canvas_to_image
from raytracer.tuples import Color


@pytest.fixture
def canvas():
    c = Canvas(5, 3)
    c.write_pixel(0, 0, Color(1.5, 0, 0))
    c.write_pixel(2, 1, Color(0, 0.5, 0))
    c.write_pixel(4, 2, Color(-0.5, 0, 1))
    return c


def test_ppm_output_matches_canvas_serialisation(tmp_path, canvas):
    path = tmp_path / "image.ppm"
    write_canvas_to_image(path, canvas)
    assert path.read_text() == canvas.to_ppm()


@pytest.mark.parametrize("suffix", [".png", ".bmp"])
def test_lossless_formats_keep_pixels(tmp_path, canvas, suffix):
    path = tmp_path / f"image{suffix}"
    write_canvas_to_image(path, canvas)
    with Image.open(path) as image:
        assert image.size == (5, 3)
        rgb = image.convert("RGB")
        assert rgb.getpixel((0, 0)) == (255, 0, 0)
        assert rgb.getpixel((2, 1)) == (0, 128, 0)
        assert rgb.getpixel((4, 2)) == (0, 0, 255)
        assert rgb.getpixel((1, 1)) == (0, 0, 0)


def test_jpeg_has_canvas_size(tmp_path, canvas):
    path = tmp_path / "image.jpg"
    write_canvas_to_image(path, canvas)
    with Image.open(path) as image:
        assert image.format == "JPEG"
        assert image.size == (5, 3)


def test_unknown_format_is_rejected(tmp_path, canvas):
    with pytest.raises(ValueError, match="Invalid image file format"):
        write_canvas_to_image(tmp_path / "image.gif", canvas)


def test_main_renders_requested_size(tmp_path, capsys):
    output = tmp_path / "render.png"
    assert main(["--width", "4", "--height", "2", "--output", str(output)]) == 0
    with Image.open(output) as image:
        assert image.size == (4, 2)
    assert f"Render saved to {output}" in capsys.readouterr().out


def test_main_defaults_to_scene_bmp_in_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["--width", "2", "--height", "1"]) == 0
    with Image.open(tmp_path / "scene.bmp") as image:
        assert image.format == "BMP"
        assert image.size == (2, 1)


def test_main_rejects_non_positive_size():
    with pytest.raises(SystemExit):
        main(["--width", "0"])