"""Tests for Pillow-backed loading and saving."""

import numpy as np
import pytest
from PIL import Image

from poolforge.errors import DecodeFailure, EncodeFailure, EncodeNoOp
from poolforge.utils.buffer import Artifact, PixelBuffer
from poolforge.utils.loader import load_artifact, load_image, save_image, write_artifact


@pytest.fixture(autouse=True)
def _in_tmp(tmp_path, monkeypatch):
    """Work with relative paths so directory names never contain a dot."""
    monkeypatch.chdir(tmp_path)


@pytest.mark.unit
@pytest.mark.parametrize("channels", [1, 3, 4])
def test_load_keeps_native_channels(write_image, random_rgb_array, channels):
    if channels == 1:
        arr = random_rgb_array[:, :, :1]
    elif channels == 3:
        arr = random_rgb_array
    else:
        alpha = np.full(random_rgb_array.shape[:2] + (1,), 128, dtype=np.uint8)
        arr = np.concatenate([random_rgb_array, alpha], axis=-1)
    path = write_image(arr)

    buf = load_image(path)

    assert (buf.width, buf.height, buf.channels) == (7, 9, channels)
    np.testing.assert_array_equal(buf.array, arr)


@pytest.mark.unit
def test_load_palette_image_as_rgb():
    Image.new("P", (3, 2), color=5).save("pal.png")
    buf = load_image("pal.png")
    assert buf.channels == 3


@pytest.mark.unit
def test_load_bilevel_image_as_grey():
    Image.new("1", (3, 2), color=1).save("bw.png")
    buf = load_image("bw.png")
    assert buf.channels == 1
    assert np.all(buf.array == 255)


@pytest.mark.unit
def test_load_missing_file():
    with pytest.raises(DecodeFailure):
        load_image("missing.png")


@pytest.mark.unit
def test_load_corrupt_file(tmp_path):
    (tmp_path / "broken.png").write_bytes(b"this is not an image")
    with pytest.raises(DecodeFailure):
        load_image("broken.png")


@pytest.mark.unit
def test_save_png_roundtrip(random_rgb_array):
    assert save_image(PixelBuffer(random_rgb_array), "out.png") is True

    with Image.open("out.png") as im:
        assert im.format == "PNG"
        np.testing.assert_array_equal(np.array(im), random_rgb_array)


@pytest.mark.unit
def test_save_grey_png(random_rgb_array):
    grey = PixelBuffer(random_rgb_array[:, :, 0])
    assert save_image(grey, "grey.png")
    with Image.open("grey.png") as im:
        assert im.mode == "L"


@pytest.mark.unit
@pytest.mark.parametrize("name", ["out.jpg", "out.jpeg"])
def test_save_jpeg(random_rgb_array, name):
    assert save_image(PixelBuffer(random_rgb_array), name)
    with Image.open(name) as im:
        assert im.format == "JPEG"
        assert im.size == (7, 9)


@pytest.mark.unit
def test_save_jpeg_drops_alpha():
    rgba = PixelBuffer(np.full((4, 4, 4), 90, dtype=np.uint8))
    assert save_image(rgba, "out.jpg")
    with Image.open("out.jpg") as im:
        assert im.mode == "RGB"


@pytest.mark.unit
@pytest.mark.parametrize("name", ["out.bmp", "out.PNG", "out.JPG", "noext"])
def test_unknown_extension_is_a_noop(tmp_path, random_rgb_array, name):
    with pytest.warns(EncodeNoOp):
        written = save_image(PixelBuffer(random_rgb_array), name)

    assert written is False
    assert not (tmp_path / name).exists()


@pytest.mark.unit
def test_save_into_missing_directory(random_rgb_array):
    with pytest.raises(EncodeFailure):
        save_image(PixelBuffer(random_rgb_array), "nowhere/out.png")


@pytest.mark.unit
def test_save_rejects_plain_arrays(random_rgb_array):
    with pytest.raises(TypeError):
        save_image(random_rgb_array, "out.png")


@pytest.mark.unit
def test_artifact_roundtrip(random_rgb_array):
    assert write_artifact(Artifact("art.png", PixelBuffer(random_rgb_array)))

    art = load_artifact("art.png")

    assert art.path == "art.png"
    np.testing.assert_array_equal(art.buffer.array, random_rgb_array)
