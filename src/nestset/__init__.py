from nestset.notation import is_valid, is_valid_element, split_elements, to_notation
from nestset.objects.multiset import MultiSet, parse_multiset
from nestset.objects.set import NestedSet, parse_set
from nestset.objects.boolean import boolean, iter_subsets
from nestset.parser.parser import parse
from nestset.program import Program
from nestset.utils import MalformedNotationError, NestsetError, \
    ScriptParsingError, ScriptTypeError, UndefinedNameError

__all__ = [
    'MultiSet',
    'NestedSet',
    'Program',
    'boolean',
    'is_valid',
    'is_valid_element',
    'iter_subsets',
    'parse',
    'parse_multiset',
    'parse_set',
    'split_elements',
    'to_notation',
    'MalformedNotationError',
    'NestsetError',
    'ScriptParsingError',
    'ScriptTypeError',
    'UndefinedNameError',
]
