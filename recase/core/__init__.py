from .utils import split_words, to_camel_case, to_dot_case, to_kebab_case, init_logger
from .converter import CaseConverter, convert, get_converter
from .enumeration import CaseStyle
from .exceptions import InvalidArgumentError
from .recase import ReCaseApp

__all__ = [
    "split_words",
    "to_camel_case",
    "to_dot_case",
    "to_kebab_case",
    "init_logger",
    "CaseConverter",
    "convert",
    "get_converter",
    "CaseStyle",
    "InvalidArgumentError",
    "ReCaseApp",
]
