from __future__ import annotations

from typing import IO, Iterator, Union

from logzero import logger

from nestset.notation import is_valid, is_valid_element, split_elements, \
    strip_whitespace, to_notation
from nestset.utils import MalformedNotationError


class NestedSet(object):
    """
    A set whose elements are alphanumeric tokens or nested sets,
    e.g., `{a, b, {c, d}}`.
    It shares the notation with `MultiSet`, but every element occurs at most once:
    repeated elements in a notation are dropped.
    """

    # a mutable set is not hashable
    __hash__ = None

    def __init__(self, notation: str = None) -> None:
        super().__init__()
        # a list keeps the insertion order of the elements
        self.p_entities: list[str] = list()
        if notation is not None:
            self.assign(notation)

    @staticmethod
    def _normalize(element: str) -> Union[str, None]:
        if not is_valid_element(element):
            logger.debug(f"Invalid element: {element!r}")
            return None
        return strip_whitespace(element)

    def add(self, element: str) -> bool:
        """
        Add the element

        :param element: a scalar or a nested set notation
        :return: False if the element is malformed or already in the set
        """
        element = self._normalize(element)
        if element is None or element in self.p_entities:
            return False
        self.p_entities.append(element)
        return True

    def remove(self, element: str) -> bool:
        element = self._normalize(element)
        if element is None or element not in self.p_entities:
            return False
        self.p_entities.remove(element)
        return True

    def clear(self) -> None:
        self.p_entities.clear()

    def assign(self, notation: str) -> bool:
        """
        Replace the content with the elements of the notation.
        A malformed notation leaves the set untouched.
        """
        if not is_valid(notation):
            logger.debug(f"Ignore malformed notation: {notation!r}")
            return False
        self.clear()
        for element in split_elements(notation):
            self.add(element)
        return True

    def update(self, other: Union[NestedSet, str]) -> bool:
        other = self._coerce(other)
        if other is None or other is NotImplemented:
            return False
        for element in list(other.p_entities):
            self.add(element)
        return True

    def intersection_update(self, other: Union[NestedSet, str]) -> bool:
        other = self._coerce(other)
        if other is None or other is NotImplemented:
            return False
        self.p_entities = [e for e in self.p_entities if e in other.p_entities]
        return True

    def difference_update(self, other: Union[NestedSet, str]) -> bool:
        other = self._coerce(other)
        if other is None or other is NotImplemented:
            return False
        self.p_entities = [e for e in self.p_entities if e not in other.p_entities]
        return True

    def cardinality(self) -> int:
        return len(self.p_entities)

    # every element is distinct in a set
    distinct_count = cardinality

    def is_empty(self) -> bool:
        return len(self.p_entities) == 0

    def contains(self, element: str) -> bool:
        element = self._normalize(element)
        return element is not None and element in self.p_entities

    def elements(self) -> list[str]:
        return list(self.p_entities)

    def copy(self) -> NestedSet:
        ret = type(self)()
        ret.p_entities = list(self.p_entities)
        return ret

    def boolean(self) -> NestedSet:
        from nestset.objects.boolean import boolean
        return boolean(self)

    def to_notation(self) -> str:
        return to_notation((element, 1) for element in self.p_entities)

    @classmethod
    def read(cls, stream: IO[str]) -> NestedSet:
        line = stream.readline().rstrip('\r\n')
        return parse_set(line, cls)

    def write(self, stream: IO[str]) -> None:
        stream.write(self.to_notation())

    def _coerce(self, other) -> Union[NestedSet, None]:
        if isinstance(other, NestedSet):
            return other
        if isinstance(other, str):
            if is_valid(other):
                return type(self)(other)
            logger.debug(f"Ignore malformed operand: {other!r}")
            return None
        return NotImplemented

    def __iadd__(self, other: Union[NestedSet, str]) -> NestedSet:
        if not isinstance(other, (NestedSet, str)):
            return NotImplemented
        self.update(other)
        return self

    def __imul__(self, other: Union[NestedSet, str]) -> NestedSet:
        if not isinstance(other, (NestedSet, str)):
            return NotImplemented
        self.intersection_update(other)
        return self

    def __isub__(self, other: Union[NestedSet, str]) -> NestedSet:
        if not isinstance(other, (NestedSet, str)):
            return NotImplemented
        self.difference_update(other)
        return self

    def __add__(self, other: Union[NestedSet, str]) -> NestedSet:
        if not isinstance(other, (NestedSet, str)):
            return NotImplemented
        ret = self.copy()
        ret += other
        return ret

    def __mul__(self, other: Union[NestedSet, str]) -> NestedSet:
        if not isinstance(other, (NestedSet, str)):
            return NotImplemented
        ret = self.copy()
        ret *= other
        return ret

    def __sub__(self, other: Union[NestedSet, str]) -> NestedSet:
        if not isinstance(other, (NestedSet, str)):
            return NotImplemented
        ret = self.copy()
        ret -= other
        return ret

    def __eq__(self, o: object) -> bool:
        if not isinstance(o, NestedSet):
            return NotImplemented
        if self.cardinality() != o.cardinality():
            return False
        return all(element in self.p_entities for element in o.p_entities)

    def __contains__(self, element: str) -> bool:
        return self.contains(element)

    def __getitem__(self, element: str) -> bool:
        return self.contains(element)

    def __len__(self) -> int:
        return self.cardinality()

    def __iter__(self) -> Iterator[str]:
        return iter(list(self.p_entities))

    def __str__(self) -> str:
        return self.to_notation()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_notation()!r})"


def parse_set(text: str, cls: type = NestedSet) -> NestedSet:
    """
    Parse the notation into a set

    :param text: the set notation
    :param cls: the set class to instantiate
    :return: the set
    :raises MalformedNotationError: if the notation is malformed
    """
    if not is_valid(text):
        raise MalformedNotationError(text)
    return cls(text)
