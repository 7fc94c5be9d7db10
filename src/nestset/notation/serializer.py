from __future__ import annotations

from typing import Iterable


def to_notation(items: Iterable[tuple[str, int]]) -> str:
    """
    Render the (element, multiplicity) pairs as a multiset notation.
    Every element is repeated as many times as its multiplicity.

    :param items: the pairs in insertion order
    :return: the canonical notation, `{}` if there is no pair
    """
    return '{' + ','.join(
        element for element, multiplicity in items
        for _ in range(multiplicity)
    ) + '}'
