from __future__ import annotations

from typing import IO, Generator, Iterator, Union

from logzero import logger

from nestset.notation import is_valid, is_valid_element, split_elements, \
    strip_whitespace, to_notation
from nestset.utils import MalformedNotationError


class MultiSet(object):
    """
    A multiset whose elements are alphanumeric tokens or nested multisets
    written in the notation, e.g., `{a, a, {b, c}}`.

    Elements are kept as whitespace-free strings in insertion order,
    each with a positive multiplicity.
    Malformed input never raises: the operation returns False (or 0)
    and leaves the multiset unchanged.
    """

    # a mutable multiset is not hashable
    __hash__ = None

    def __init__(self, notation: str = None) -> None:
        super().__init__()
        self.entities_multiplicity: dict[str, int] = dict()
        if notation is not None:
            self.assign(notation)

    @staticmethod
    def _normalize(element: str) -> Union[str, None]:
        if not is_valid_element(element):
            logger.debug(f"Invalid element: {element!r}")
            return None
        return strip_whitespace(element)

    def _increment(self, element: str, multiplicity: int = 1) -> None:
        self.entities_multiplicity[element] = \
            self.entities_multiplicity.get(element, 0) + multiplicity

    def add(self, element: str) -> bool:
        """
        Add one occurrence of the element

        :param element: a scalar or a nested multiset notation
        :return: False if the element is malformed
        """
        element = self._normalize(element)
        if element is None:
            return False
        self._increment(element)
        return True

    def remove(self, element: str) -> bool:
        """
        Remove one occurrence of the element

        :param element: the element
        :return: False if the element is malformed or absent
        """
        element = self._normalize(element)
        if element is None or element not in self.entities_multiplicity:
            return False
        if self.entities_multiplicity[element] > 1:
            self.entities_multiplicity[element] -= 1
        else:
            del self.entities_multiplicity[element]
        return True

    def remove_all(self, element: str) -> int:
        """
        Remove all occurrences of the element

        :param element: the element
        :return: the multiplicity the element had
        """
        element = self._normalize(element)
        if element is None:
            return 0
        return self.entities_multiplicity.pop(element, 0)

    def clear(self) -> None:
        self.entities_multiplicity.clear()

    def assign(self, notation: str) -> bool:
        """
        Replace the content with the elements of the notation.
        A malformed notation leaves the multiset untouched.
        """
        if not is_valid(notation):
            logger.debug(f"Ignore malformed notation: {notation!r}")
            return False
        self.clear()
        for element in split_elements(notation):
            self.add(element)
        return True

    def update(self, other: Union[MultiSet, str]) -> bool:
        """
        Merge another multiset or a notation into this one,
        i.e., the multiplicities are summed up.
        """
        if isinstance(other, MultiSet):
            for element, multiplicity in list(other.items()):
                self._increment(element, multiplicity)
            return True
        if not is_valid(other):
            logger.debug(f"Ignore malformed notation: {other!r}")
            return False
        for element in split_elements(other):
            self.add(element)
        return True

    def intersection_update(self, other: Union[MultiSet, str]) -> bool:
        """
        Keep the common elements with the smaller multiplicity.
        A malformed notation leaves the multiset untouched.
        """
        other = self._coerce(other)
        if other is None or other is NotImplemented:
            return False
        self.entities_multiplicity = {
            element: min(multiplicity, other.entities_multiplicity[element])
            for element, multiplicity in self.items()
            if element in other.entities_multiplicity
        }
        return True

    def difference_update(self, other: Union[MultiSet, str]) -> bool:
        other = self._coerce(other)
        if other is None or other is NotImplemented:
            return False
        remains = dict()
        for element, multiplicity in self.items():
            multiplicity -= other.entities_multiplicity.get(element, 0)
            if multiplicity > 0:
                remains[element] = multiplicity
        self.entities_multiplicity = remains
        return True

    def cardinality(self) -> int:
        return sum(self.entities_multiplicity.values())

    def distinct_count(self) -> int:
        return len(self.entities_multiplicity)

    def count(self, element: str) -> int:
        element = self._normalize(element)
        if element is None:
            return 0
        return self.entities_multiplicity.get(element, 0)

    def is_empty(self) -> bool:
        return len(self.entities_multiplicity) == 0

    def contains(self, element: str) -> bool:
        return self.count(element) > 0

    def items(self) -> Generator[tuple[str, int], None, None]:
        return self.entities_multiplicity.items()

    def elements(self) -> list[str]:
        """
        The distinct elements in insertion order
        """
        return list(self.entities_multiplicity.keys())

    def copy(self) -> MultiSet:
        ret = type(self)()
        ret.entities_multiplicity = dict(self.entities_multiplicity)
        return ret

    def boolean(self) -> MultiSet:
        from nestset.objects.boolean import boolean
        return boolean(self)

    def to_notation(self) -> str:
        return to_notation(self.items())

    @classmethod
    def read(cls, stream: IO[str]) -> MultiSet:
        """
        Read one line from the stream as a multiset notation

        :param stream: a text stream
        :return: the multiset
        :raises MalformedNotationError: if the line is malformed
        """
        line = stream.readline().rstrip('\r\n')
        return parse_multiset(line, cls)

    def write(self, stream: IO[str]) -> None:
        stream.write(self.to_notation())

    def _coerce(self, other) -> Union[MultiSet, None]:
        if isinstance(other, MultiSet):
            return other
        if isinstance(other, str):
            if is_valid(other):
                return type(self)(other)
            logger.debug(f"Ignore malformed operand: {other!r}")
            return None
        return NotImplemented

    def __iadd__(self, other: Union[MultiSet, str]) -> MultiSet:
        if not isinstance(other, (MultiSet, str)):
            return NotImplemented
        self.update(other)
        return self

    def __imul__(self, other: Union[MultiSet, str]) -> MultiSet:
        if not isinstance(other, (MultiSet, str)):
            return NotImplemented
        self.intersection_update(other)
        return self

    def __isub__(self, other: Union[MultiSet, str]) -> MultiSet:
        if not isinstance(other, (MultiSet, str)):
            return NotImplemented
        self.difference_update(other)
        return self

    def __add__(self, other: Union[MultiSet, str]) -> MultiSet:
        if not isinstance(other, (MultiSet, str)):
            return NotImplemented
        ret = self.copy()
        ret += other
        return ret

    def __mul__(self, other: Union[MultiSet, str]) -> MultiSet:
        if not isinstance(other, (MultiSet, str)):
            return NotImplemented
        ret = self.copy()
        ret *= other
        return ret

    def __sub__(self, other: Union[MultiSet, str]) -> MultiSet:
        if not isinstance(other, (MultiSet, str)):
            return NotImplemented
        ret = self.copy()
        ret -= other
        return ret

    def __eq__(self, o: object) -> bool:
        if not isinstance(o, MultiSet):
            return NotImplemented
        if self.distinct_count() != o.distinct_count():
            return False
        for element, multiplicity in o.items():
            if self.entities_multiplicity.get(element, 0) != multiplicity:
                return False
        return True

    def __contains__(self, element: str) -> bool:
        return self.contains(element)

    def __getitem__(self, element: str) -> bool:
        return self.contains(element)

    def __len__(self) -> int:
        return self.cardinality()

    def __iter__(self) -> Iterator[str]:
        for element, multiplicity in self.items():
            for _ in range(multiplicity):
                yield element

    def __str__(self) -> str:
        return self.to_notation()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_notation()!r})"


def parse_multiset(text: str, cls: type = MultiSet) -> MultiSet:
    """
    Parse the notation into a multiset

    :param text: the multiset notation
    :param cls: the multiset class to instantiate
    :return: the multiset
    :raises MalformedNotationError: if the notation is malformed
    """
    if not is_valid(text):
        raise MalformedNotationError(text)
    return cls(text)
