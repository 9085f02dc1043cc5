"""Image preparation before a receipt photo is sent for OCR."""

import io

MAX_IMAGE_DIMENSION = 3000  # Longest side allowed before downscaling
OCR_IMAGE_PADDING = 50  # White border so OCR does not clip edge text
JPEG_QUALITY = 95


def scaled_size(width: int, height: int, max_dimension: int = MAX_IMAGE_DIMENSION) -> tuple[int, int]:
    """Return (width, height) shrunk so the longest side fits max_dimension."""
    longest = max(width, height)
    if longest <= max_dimension:
        return width, height
    scale = max_dimension / longest
    return max(1, int(width * scale)), max(1, int(height * scale))


def resize_image_bytes(
    image_bytes: bytes, max_dimension: int = MAX_IMAGE_DIMENSION, padding: int = OCR_IMAGE_PADDING
) -> bytes:
    """
    Normalize a receipt photo for upload to the OCR service.

    Applies EXIF orientation, downscales oversized photos keeping the aspect
    ratio, adds a white border and re-encodes as JPEG.

    Args:
        image_bytes: Image data as bytes
        max_dimension: Maximum allowed width or height
        padding: White border width in pixels (0 disables)

    Returns:
        JPEG bytes
    """
    from PIL import Image, ImageOps

    img = ImageOps.exif_transpose(Image.open(io.BytesIO(image_bytes))).convert("RGB")

    target_size = scaled_size(*img.size, max_dimension=max_dimension)
    if target_size != img.size:
        img = img.resize(target_size, Image.Resampling.LANCZOS)

    if padding > 0:
        img = ImageOps.expand(img, border=padding, fill="white")

    buffer = io.BytesIO()
    img.save(buffer, format="JPEG", quality=JPEG_QUALITY)
    return buffer.getvalue()
