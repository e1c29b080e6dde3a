"""
Seeding passes that bootstrap the dictionary before peeling starts.

Pass A (split_capitals): "FooBar" -> foo, bar
Pass B (split_doubled):  "abab"   -> ab

Both are per-token actions run by the task runner. A token either feeds the
dictionary or is forwarded whole to the next stage, never both.
"""

from __future__ import annotations
from typing import List, Optional

from .wordsets import PendingQueue, WordSet


def split_capitals(token: str, dictionary: WordSet, forward: PendingQueue) -> List[str]:
    """Seed the dictionary with the capitalized sub-words of `token`.

    Scans right to left. An uppercase letter whose left neighbour is missing
    or not uppercase starts a sub-word running up to the previous start, so
    "FooBAR" gives "bar" and "foo". Tokens without such a boundary are
    forwarded unchanged.

    Raises AssertionError when the token does not begin on a boundary
    ("aBc"), since the scan would silently lose the leading letters.
    """
    found = []
    length = 1
    for i in range(len(token) - 1, -1, -1):
        if token[i].isupper() and (i == 0 or not token[i - 1].isupper()):
            word = token[i:i + length].lower()
            dictionary.add(word)
            found.append(word)
            length = 0
        length += 1

    if not found:
        forward.put(token)
    elif length != 1:
        raise AssertionError(f"first letter of {token!r} is not capital")
    return found


def split_doubled(token: str, dictionary: WordSet, forward: PendingQueue) -> Optional[str]:
    """Seed the dictionary with the half of a doubled token like "abab".

    Odd-length tokens are dropped here on purpose: they are neither
    forwarded nor recorded. Even-length tokens whose halves differ are
    forwarded unchanged.
    """
    if len(token) % 2 != 0:
        return None

    half = len(token) // 2
    for i in range(half):
        if token[i] != token[i + half]:
            forward.put(token)
            return None

    word = token[:half]
    dictionary.add(word)
    return word
