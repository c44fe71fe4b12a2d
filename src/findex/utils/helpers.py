"""
Small filesystem helpers shared by the indexer and the table writer.

Functions:
    read_sample: Read the leading bytes of an open file
    pad_sample: Zero-fill a short sample to a fixed length
    join_path: Build a normalized child path
    list_dir: Enumerate a directory in a deterministic order
    atomic_write_text: Replace a file's content through a temporary sibling
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from typing import BinaryIO, TextIO


def read_sample(stream: BinaryIO, size: int) -> bytes:
    """
    Read up to ``size`` bytes from the current position of a binary stream.

    Short files return fewer bytes and empty files return ``b""``; neither is
    an error.

    Raises:
        OSError: If the stream cannot be read
    """
    chunks: list[bytes] = []
    remaining = size
    # read() may return short counts on pipes and some filesystems
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def pad_sample(sample: bytes, size: int) -> bytes:
    if len(sample) >= size:
        return sample
    return sample + b"\x00" * (size - len(sample))


def join_path(parent: str, name: str) -> str:
    """Join and normalize, so ``./data`` + ``a.txt`` gives ``data/a.txt``."""
    return os.path.normpath(os.path.join(parent, name))


def list_dir(path: str, sort_entries: bool = True) -> list[os.DirEntry[str]]:
    """
    Enumerate a directory.

    Entries are returned sorted by name when ``sort_entries`` is set, otherwise
    in the order the operating system reports them.

    Raises:
        OSError: If the directory cannot be opened or read
    """
    with os.scandir(path) as it:
        entries = list(it)
    if sort_entries:
        entries.sort(key=lambda e: e.name)
    return entries


def atomic_write_text(
    path: Path,
    write: Callable[[TextIO], None],
    encoding: str = "utf-8",
    errors: str = "strict",
) -> None:
    """
    Write a file through a temporary sibling and ``os.replace`` it into place.

    ``write`` receives the open text handle. If it raises, the temporary file
    is removed and the destination is left untouched.
    """
    tmp = path.with_name(path.name + ".tmp")
    try:
        with open(tmp, "w", encoding=encoding, errors=errors, newline="") as f:
            write(f)
        os.replace(tmp, path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise
