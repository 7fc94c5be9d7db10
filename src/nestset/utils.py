from __future__ import annotations

# boolean() logs a warning above this many distinct elements,
# the result has 2 ** n entries
POWER_SET_WARN_THRESHOLD = 16

RESERVED_KEYWORDS = [
    'boolean',
    'distinct',
    'count',
    'in',
    'not',
]


class NestsetError(Exception):
    pass


class MalformedNotationError(NestsetError, ValueError):
    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Malformed multiset notation: {text!r}")


class ScriptParsingError(NestsetError):
    pass


class UndefinedNameError(ScriptParsingError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Multiset {name} is not defined.")


class ScriptTypeError(ScriptParsingError):
    def __init__(self, expected: str, actual):
        super().__init__(f"Expect a {expected}, but got {actual} of type {type(actual).__name__}.")
