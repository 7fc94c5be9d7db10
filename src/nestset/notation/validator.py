from __future__ import annotations

from enum import Enum

from logzero import logger


class ScannerState(Enum):
    """
    States of the notation scanner.
    The brace depth is tracked separately as a plain counter.
    """
    AWAITING_ELEMENT = 1
    AFTER_ELEMENT = 2
    AFTER_COMMA = 3

    def expects_element(self) -> bool:
        return self is not ScannerState.AFTER_ELEMENT


def is_scalar_char(char: str) -> bool:
    # only ASCII letters and digits are allowed in a scalar element
    return char.isascii() and char.isalnum()


def _is_delimiter(char: str) -> bool:
    return char in '{},' or char.isspace()


def _scan(text: str) -> tuple[bool, int]:
    """
    Scan the notation once from left to right.

    :param text: the candidate notation
    :return: whether the text is well-formed, and the number of commas
        seen outside of any brace
    """
    state = ScannerState.AWAITING_ELEMENT
    depth = 0
    top_level_commas = 0
    i = 0
    while i < len(text):
        char = text[i]
        if char.isspace():
            i += 1
            continue
        if char == '{':
            if not state.expects_element():
                logger.debug(f"Unexpected '{{' at {i} in {text!r}")
                return False, top_level_commas
            depth += 1
            state = ScannerState.AWAITING_ELEMENT
        elif char == '}':
            if depth <= 0 or state is ScannerState.AFTER_COMMA:
                logger.debug(f"Unexpected '}}' at {i} in {text!r}")
                return False, top_level_commas
            depth -= 1
            state = ScannerState.AFTER_ELEMENT
        elif char == ',':
            if state is not ScannerState.AFTER_ELEMENT:
                logger.debug(f"Unexpected ',' at {i} in {text!r}")
                return False, top_level_commas
            if depth == 0:
                top_level_commas += 1
            state = ScannerState.AFTER_COMMA
        else:
            if not state.expects_element():
                logger.debug(f"Unexpected element at {i} in {text!r}")
                return False, top_level_commas
            end = i
            while end < len(text) and not _is_delimiter(text[end]):
                if not is_scalar_char(text[end]):
                    logger.debug(f"Illegal character {text[end]!r} at {end} in {text!r}")
                    return False, top_level_commas
                end += 1
            i = end
            state = ScannerState.AFTER_ELEMENT
            continue
        i += 1
    return depth == 0 and state is ScannerState.AFTER_ELEMENT, top_level_commas


def is_valid(text: str) -> bool:
    """
    Check whether the text is a well-formed multiset notation,
    e.g., `{a, b, {c, d}}`. A bare list without the outer braces,
    e.g., `a, b, {c, d}`, is accepted as well.
    """
    if not isinstance(text, str):
        return False
    valid, _ = _scan(text)
    return valid


def is_valid_element(text: str) -> bool:
    """
    Check whether the text is a single element,
    i.e., a scalar such as `a1` or one braced multiset such as `{a, {b}}`.
    """
    if not isinstance(text, str):
        return False
    valid, top_level_commas = _scan(text)
    return valid and top_level_commas == 0
