from __future__ import annotations


def strip_whitespace(text: str) -> str:
    return ''.join(char for char in text if not char.isspace())


def _is_wrapped(text: str) -> bool:
    """
    Whether the first `{` of the text is closed by its last `}`,
    e.g., `{a, {b}}` is wrapped while `{a}, {b}` is not.
    """
    if not (text.startswith('{') and text.endswith('}')):
        return False
    depth = 0
    for i, char in enumerate(text):
        if char == '{':
            depth += 1
        elif char == '}':
            depth -= 1
            if depth == 0:
                return i == len(text) - 1
    return False


def split_elements(text: str) -> list[str]:
    """
    Split a multiset notation into its top-level elements.
    Nested multisets are kept as single elements with their own braces.
    The text must have been checked by `is_valid` beforehand.

    :param text: the multiset notation
    :return: the elements in the order they appear
    """
    text = strip_whitespace(text)
    if _is_wrapped(text):
        text = text[1:-1]
    elements = []
    depth = 0
    buffer = []
    for char in text:
        if char == ',' and depth == 0:
            elements.append(''.join(buffer))
            buffer = []
            continue
        if char == '{':
            depth += 1
        elif char == '}':
            depth -= 1
        buffer.append(char)
    if buffer:
        elements.append(''.join(buffer))
    return elements
