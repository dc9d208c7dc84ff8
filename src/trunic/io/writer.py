"""PNG writer for rendered documents.

This module writes composed surfaces as PNG either to a file or to the
binary standard output stream.
"""

import io
import sys
from pathlib import Path
from typing import BinaryIO

from trunic.domain import Surface
from trunic.exceptions import ImageEncodeError, ImageWriteError

STDOUT_NAME = "<stdout>"


def encode_png(surface: Surface) -> bytes:
    """Encode a surface as PNG bytes.

    Raises:
        ImageEncodeError: If Pillow cannot encode the image
    """
    buffer = io.BytesIO()
    try:
        surface.image.save(buffer, format="PNG")
    except (OSError, ValueError) as e:
        raise ImageEncodeError(str(e)) from e
    return buffer.getvalue()


def write_png(surface: Surface, output: Path | None = None, stream: BinaryIO | None = None) -> int:
    """Write a surface as PNG.

    The image is encoded fully before anything is written, so an encoding
    failure never leaves a partial file behind.

    Args:
        surface: Surface to write
        output: Destination file; None writes to ``stream``
        stream: Binary stream used when output is None (stdout by default)

    Returns:
        Number of bytes written

    Raises:
        ImageEncodeError: If encoding fails
        ImageWriteError: If the destination cannot be written
    """
    data = encode_png(surface)

    if output is None:
        target = stream if stream is not None else sys.stdout.buffer
        try:
            target.write(data)
            target.flush()
        except OSError as e:
            raise ImageWriteError(STDOUT_NAME, str(e)) from e
        return len(data)

    try:
        output.write_bytes(data)
    except OSError as e:
        raise ImageWriteError(str(output), e.strerror or str(e)) from e
    return len(data)
