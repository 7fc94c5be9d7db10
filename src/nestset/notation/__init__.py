from nestset.notation.validator import ScannerState, is_valid, is_valid_element
from nestset.notation.splitter import split_elements, strip_whitespace
from nestset.notation.serializer import to_notation

__all__ = [
    'ScannerState',
    'is_valid',
    'is_valid_element',
    'split_elements',
    'strip_whitespace',
    'to_notation',
]
