from __future__ import annotations

from typing import Generator, TypeVar

from logzero import logger

from nestset.objects.multiset import MultiSet
from nestset.objects.set import NestedSet
from nestset.utils import POWER_SET_WARN_THRESHOLD


T = TypeVar("T", MultiSet, NestedSet)


def iter_subsets(obj: T) -> Generator[T, None, None]:
    """
    Enumerate the subsets over the distinct elements of the multiset.
    The i-th bit of the mask selects the i-th distinct element in insertion order,
    the multiplicities of the multiset are ignored.

    :param obj: the multiset, or a `NestedSet` whose subsets are built as sets
    :return: a generator of 2 ** n multisets in the mask order, starting from the empty one
    """
    elements = obj.elements()
    for mask in range(1 << len(elements)):
        subset = type(obj)()
        for i, element in enumerate(elements):
            if mask & (1 << i):
                subset.add(element)
        yield subset


def boolean(obj: T) -> T:
    """
    The power set (boolean) of the multiset,
    every subset is added as its notation, e.g., the boolean of `{a, a, b}`
    is `{{},{a},{b},{a,b}}`.

    :param obj: the multiset, or a `NestedSet` whose subsets are built as sets
    :return: a new multiset with 2 ** n elements, n is the number of distinct elements
    """
    n = obj.distinct_count()
    if n > POWER_SET_WARN_THRESHOLD:
        logger.warning(f"Building the boolean of {n} distinct elements, "
                       f"it contains {1 << n} subsets")
    ret = type(obj)()
    for subset in iter_subsets(obj):
        ret.add(subset.to_notation())
    return ret
