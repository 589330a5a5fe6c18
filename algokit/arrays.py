"""Hash-based array and string problems."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence

_SEPARATOR = "#"


def has_duplicates(nums: Iterable[int]) -> bool:
    """Return True as soon as any value is seen a second time."""
    seen: set[int] = set()
    for n in nums:
        if n in seen:
            return True
        seen.add(n)
    return False


def encode(strs: Iterable[str]) -> str:
    """Encode strings as ``<length>#<text>`` records joined together."""
    return "".join(f"{len(s)}{_SEPARATOR}{s}" for s in strs)


def decode(s: str) -> list[str]:
    """Split a string produced by :func:`encode` back into its parts.

    Raises ValueError if the input is not a valid encoding.
    """
    decoded: list[str] = []
    i = 0
    while i < len(s):
        sep = s.find(_SEPARATOR, i)
        if sep == -1:
            raise ValueError(f"missing length separator after position {i}")
        try:
            length = int(s[i:sep])
        except ValueError:
            raise ValueError(f"invalid length prefix {s[i:sep]!r}") from None
        if length < 0:
            raise ValueError(f"negative length prefix {length}")
        start = sep + 1
        decoded.append(s[start:start + length])
        i = start + length
    return decoded


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of each other, keeping input order."""
    groups: defaultdict[str, list[str]] = defaultdict(list)
    for s in strs:
        groups["".join(sorted(s))].append(s)
    return list(groups.values())


def top_k_frequent(nums: Sequence[int], k: int) -> list[int]:
    """Return up to ``k`` values, most frequent first."""
    counts = Counter(nums)
    buckets: list[list[int]] = [[] for _ in range(len(nums) + 1)]
    for value, freq in counts.items():
        buckets[freq].append(value)

    result: list[int] = []
    for bucket in reversed(buckets[1:]):
        for value in bucket:
            result.append(value)
            if len(result) == k:
                return result
    return result


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return indices ``(i, j)``, ``i < j``, whose values add up to ``target``."""
    positions: dict[int, int] = {}
    for i, n in enumerate(nums):
        j = positions.get(target - n)
        if j is not None:
            return j, i
        positions.setdefault(n, i)
    return None


def is_anagram(s: str, t: str) -> bool:
    """Return True if ``t`` is a rearrangement of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)