from __future__ import annotations
from pathlib import Path

from PIL import Image, UnidentifiedImageError
from PyQt5.QtGui import QImage

from .errors import ImageDecodeError


def load_image(path: Path) -> QImage:
    """
    Decodes an image file into a QImage using Pillow.
    Animated files show their first frame. Raises ImageDecodeError for
    anything Pillow or the filesystem rejects.
    """
    path = Path(path)
    try:
        with Image.open(path) as image:
            image.seek(0)
            rgba = image.convert("RGBA")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
        raise ImageDecodeError(path, str(e)) from e

    data = rgba.tobytes("raw", "RGBA")
    qimg = QImage(data, rgba.width, rgba.height, rgba.width * 4, QImage.Format_RGBA8888)
    if qimg.isNull():
        raise ImageDecodeError(path, "empty image")
    # QImage does not own *data*; copy before the buffer goes away
    return qimg.copy()
