"""Word list loading and writing. One word per line, UTF-8."""

from __future__ import annotations
from typing import Iterable, List

from .progress import progress


def load_tokens(path: str) -> List[str]:
    """Read one token per line. A UTF-8 byte-order mark, line endings and blank
    lines are dropped; everything else, case included, is kept literally."""
    tokens = []
    with open(path, 'r', encoding='utf-8-sig') as f:
        for line in progress(f, "Loading words"):
            token = line.rstrip('\r\n')
            if token:
                tokens.append(token)
    return tokens


def write_words(path: str, words: Iterable[str]):
    with open(path, 'w', encoding='utf-8', newline='\n') as f:
        for word in words:
            f.write(word)
            f.write('\n')
