# src/hoststoggle/core/hostsfile.py
import os
from pathlib import Path
from typing import List, Sequence, Union

from hoststoggle.config import HOSTS_FILE_MODE

PathLike = Union[str, Path]

def split_content(text: str) -> List[str]:
    """
    Splits on '\\n' only. A trailing newline yields a trailing empty line,
    so join_lines(split_content(text)) == text.
    """
    return text.split("\n")

def join_lines(lines: Sequence[str]) -> str:
    return "\n".join(lines)

def load_lines(path: PathLike) -> List[str]:
    # newline="" keeps '\r' as line content; undecodable bytes survive as surrogates
    with open(path, "r", encoding="utf-8", errors="surrogateescape", newline="") as f:
        return split_content(f.read())

def save_lines(path: PathLike, lines: Sequence[str], mode: int = HOSTS_FILE_MODE) -> None:
    """
    Overwrites the file in place. `mode` only applies if the file is created.
    The write is not atomic.
    """
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    with os.fdopen(fd, "w", encoding="utf-8", errors="surrogateescape", newline="") as f:
        f.write(join_lines(lines))
