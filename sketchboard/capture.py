# capture.py
import io
import logging
from PIL import Image

from .utils import get_timestamped_path

from PyQt6.QtCore import QBuffer, QIODevice


def snapshot_to_pil(snapshot):
    # 1. Encode the Qt image as PNG in memory
    buffer = QBuffer()
    buffer.open(QIODevice.OpenModeFlag.ReadWrite)
    snapshot.image.save(buffer, "PNG")

    # 2. Decode with PIL; the surface has no alpha so RGB is lossless
    image = Image.open(io.BytesIO(bytes(buffer.data())))
    return image.convert("RGB")


def export_png(snapshot, path=None, directory="captures"):
    if path is None:
        path = get_timestamped_path(directory)

    snapshot_to_pil(snapshot).save(path, "PNG", optimize=True)
    logging.info(f"Export: wrote {path}")
    return path
