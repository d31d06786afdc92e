"""Small sequence algorithms and hash combination helpers."""

from __future__ import annotations

import bisect
import enum
from typing import Any, Callable, Hashable, Iterable, MutableSequence, Optional, Sequence, Tuple

_MASK64 = 0xFFFFFFFFFFFFFFFF


def equivalent(lhs: Any, rhs: Any) -> bool:
    """True if neither value orders before the other."""
    return not (lhs < rhs) and not (rhs < lhs)


def binary_search(sequence: Sequence[Any], value: Any) -> Optional[int]:
    """Index of the first element equivalent to value in a sorted sequence, or None."""
    index = bisect.bisect_left(sequence, value)
    if index == len(sequence) or not equivalent(sequence[index], value):
        return None
    return index


def erase_unordered(sequence: MutableSequence[Any], index: int) -> Any:
    """Remove the element at index by swapping it with the last one; return it."""
    sequence[index], sequence[-1] = sequence[-1], sequence[index]
    return sequence.pop()


def remove(sequence: MutableSequence[Any], value: Any) -> None:
    """Remove every element equal to value, keeping the order of the rest."""
    sequence[:] = [item for item in sequence if not item == value]


def remove_if(sequence: MutableSequence[Any], predicate: Callable[[Any], bool]) -> None:
    """Remove every element for which predicate is true, keeping the order of the rest."""
    sequence[:] = [item for item in sequence if not predicate(item)]


def hash_value(obj: Hashable) -> int:
    """Unsigned 64-bit hash of obj; enum members hash as their value."""
    if isinstance(obj, enum.Enum):
        obj = obj.value
    return hash(obj) & _MASK64


def hash_combine(seed: int, obj: Hashable) -> int:
    """Return seed combined with the hash of obj."""
    seed &= _MASK64
    return (seed ^ ((hash_value(obj) + 0x9E3779B9 + (seed << 6) + (seed >> 2)) & _MASK64)) & _MASK64


def hash_range(seed: int, iterable: Iterable[Hashable]) -> int:
    """Return seed combined with the hashes of all items, in order."""
    for item in iterable:
        seed = hash_combine(seed, item)
    return seed


def pair_hash(pair: Tuple[Hashable, Hashable]) -> int:
    """Hash of a two-element pair."""
    first, second = pair
    return hash_combine(hash_combine(0, first), second)