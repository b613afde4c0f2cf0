from __future__ import annotations
from typing import Iterable, List, TextIO
from .utils import to_hex32
from .ast import Encoded

def to_hex_lines(words: Iterable[Encoded]) -> List[str]:
    return [to_hex32(w.word) for w in sorted(words, key=lambda w: w.addr)]

def write_hex(words: Iterable[Encoded], out: TextIO) -> None:
    for line in to_hex_lines(words):
        out.write(line + "\n")
