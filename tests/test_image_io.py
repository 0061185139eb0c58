"""Tests for decoding picked files."""

from PIL import Image

from instafilter.core.image_io import image_file_filter, load_image


def test_load_rgb_png(tmp_path, gradient_image):
    path = tmp_path / "photo.png"
    gradient_image.save(path)
    loaded = load_image(path)
    assert loaded.mode == "RGB"
    assert loaded.tobytes() == gradient_image.tobytes()


def test_greyscale_is_converted_to_rgb(tmp_path):
    path = tmp_path / "grey.png"
    Image.new("L", (5, 5), 10).save(path)
    assert load_image(path).mode == "RGB"


def test_transparency_is_kept(tmp_path):
    path = tmp_path / "alpha.png"
    Image.new("RGBA", (5, 5), (1, 2, 3, 4)).save(path)
    loaded = load_image(path)
    assert loaded.mode == "RGBA"
    assert loaded.getpixel((0, 0)) == (1, 2, 3, 4)


def test_exif_orientation_is_applied(tmp_path):
    path = tmp_path / "rotated.jpg"
    exif = Image.Exif()
    exif[0x0112] = 6
    Image.new("RGB", (40, 20), "red").save(path, exif=exif)
    assert load_image(path).size == (20, 40)


def test_unreadable_files_yield_none(tmp_path):
    garbage = tmp_path / "garbage.png"
    garbage.write_bytes(b"definitely not an image")
    assert load_image(garbage) is None
    assert load_image(tmp_path / "missing.png") is None


def test_file_filter_lists_common_formats():
    pattern = image_file_filter()
    assert pattern.startswith("Images (")
    assert "*.jpg" in pattern
    assert "*.png" in pattern
