"""Tests for image preparation before OCR upload."""

import io

import pytest
from PIL import Image

from receiptsplit.receipt.ocr_helpers import resize_image_bytes, scaled_size


def _png_bytes(width: int, height: int, mode: str = "RGB") -> bytes:
    buffer = io.BytesIO()
    Image.new(mode, (width, height), color=0).save(buffer, format="PNG")
    return buffer.getvalue()


def test_scaled_size_keeps_small_images() -> None:
    assert scaled_size(800, 600) == (800, 600)
    assert scaled_size(3000, 10) == (3000, 10)


def test_scaled_size_shrinks_longest_side() -> None:
    assert scaled_size(6000, 1500) == (3000, 750)
    assert scaled_size(1000, 4000, max_dimension=2000) == (500, 2000)


def test_resize_outputs_padded_jpeg() -> None:
    output = resize_image_bytes(_png_bytes(4000, 1000))

    with Image.open(io.BytesIO(output)) as img:
        assert img.format == "JPEG"
        assert img.size == (3000 + 2 * 50, 750 + 2 * 50)


def test_resize_without_padding_converts_mode() -> None:
    output = resize_image_bytes(_png_bytes(40, 20, mode="RGBA"), padding=0)

    with Image.open(io.BytesIO(output)) as img:
        assert img.mode == "RGB"
        assert img.size == (40, 20)


def test_resize_rejects_non_images() -> None:
    with pytest.raises(OSError):
        resize_image_bytes(b"definitely not an image")
