"""Save and load values as raw binary records laid out by a struct format."""

from __future__ import annotations

import os
import struct
from typing import Any, Union

__all__ = ["save", "read"]

PathLike = Union[str, "os.PathLike[str]"]


def save(path: PathLike, fmt: str, *args: Any) -> None:
    """Write ``args`` packed by ``fmt`` to ``path``, replacing its contents."""
    data = struct.pack(fmt, *args)
    with open(path, "wb") as handle:
        handle.write(data)


def read(path: PathLike, fmt: str) -> tuple[Any, ...]:
    """Read values laid out by ``fmt`` from the start of ``path``."""
    size = struct.calcsize(fmt)
    with open(path, "rb") as handle:
        data = handle.read(size)
    if len(data) < size:
        raise EOFError(f"Expected {size} bytes in {os.fspath(path)}, found {len(data)}")
    return struct.unpack(fmt, data)