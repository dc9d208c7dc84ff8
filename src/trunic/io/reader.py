"""Reading input text, one record per line."""

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from trunic.exceptions import InputReadError

STDIO_PATH = "-"
STDIN_NAME = "<stdin>"


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of a text stream without line terminators.

    Args:
        stream: Open text stream

    Yields:
        Each line, with trailing newline characters removed

    Raises:
        InputReadError: If the stream cannot be read or is not valid text
            in its encoding
    """
    name = str(getattr(stream, "name", STDIN_NAME))
    try:
        for line in stream:
            yield line.rstrip("\r\n")
    except UnicodeDecodeError as e:
        raise InputReadError(name, f"not valid {e.encoding} text: {e.reason}") from e
    except OSError as e:
        raise InputReadError(name, e.strerror or str(e)) from e


@contextmanager
def open_input(path: Path | str | None) -> Iterator[TextIO]:
    """Open an input source for reading.

    Example:
        with open_input(Path("poem.txt")) as stream:
            for line in read_lines(stream):
                print(line)

    Args:
        path: UTF-8 text file, or None / "-" for standard input

    Yields:
        Text stream positioned at the start of the input

    Raises:
        InputReadError: If the file cannot be opened
    """
    if path is None or str(path) == STDIO_PATH:
        yield sys.stdin
        return

    try:
        stream = open(path, encoding="utf-8")
    except OSError as e:
        raise InputReadError(str(path), e.strerror or str(e)) from e

    with stream:
        yield stream
