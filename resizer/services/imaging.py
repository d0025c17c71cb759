"""Pillow helpers for decoding, resizing and JPEG-encoding images."""
from __future__ import annotations

import io
import logging
from typing import BinaryIO

from PIL import Image, UnidentifiedImageError

from resizer.errors import DecodeError, EncodeError

logger = logging.getLogger(__name__)


def decode_image(stream: BinaryIO) -> Image.Image:
    """Decode a whole image from *stream*, fully loading its pixels."""

    try:
        img = Image.open(io.BytesIO(stream.read()))
        img.load()
    except (UnidentifiedImageError, OSError, ValueError, Image.DecompressionBombError) as exc:
        raise DecodeError(f"cannot decode image: {exc}") from exc
    return img


def target_size(size: tuple[int, int], width: int, height: int) -> tuple[int, int] | None:
    """Return the output size for a requested ``width`` x ``height``.

    ``None`` means the image is passed through unchanged: its width already
    fits within the requested width, so it is never upscaled. A zero
    dimension is derived from the source aspect ratio.
    """

    src_w, src_h = size
    if src_w <= width:
        return None
    if width <= 0:
        width = max(1, round(src_w * height / src_h))
    elif height <= 0:
        height = max(1, round(src_h * width / src_w))
    return width, height


def resize_image(img: Image.Image, width: int, height: int) -> Image.Image:
    size = target_size(img.size, width, height)
    if size is None:
        logger.debug("Passing through %dx%d image (requested width %d)", img.width, img.height, width)
        return img
    logger.debug("Resizing %dx%d -> %dx%d", img.width, img.height, *size)
    try:
        return img.resize(size, Image.Resampling.LANCZOS)
    except (ValueError, OverflowError, MemoryError) as exc:
        raise EncodeError(f"cannot resize to {size[0]}x{size[1]}: {exc}") from exc


def encode_jpeg(img: Image.Image, *, quality: int) -> bytes:
    """Encode *img* as JPEG bytes, flattening to RGB first."""

    try:
        if img.mode != "RGB":
            img = img.convert("RGB")  # ensure RGB for JPEG
        buffer = io.BytesIO()
        img.save(buffer, format="JPEG", quality=quality)
    except (OSError, ValueError) as exc:
        raise EncodeError(f"cannot encode JPEG: {exc}") from exc
    data = buffer.getvalue()
    logger.debug("Encoded %dx%d JPEG (%d bytes)", img.width, img.height, len(data))
    return data
