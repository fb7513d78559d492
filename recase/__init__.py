from .core import (
    CaseConverter,
    CaseStyle,
    InvalidArgumentError,
    ReCaseApp,
    convert,
    get_converter,
    split_words,
    to_camel_case,
    to_dot_case,
    to_kebab_case,
)

__version__ = "0.1.0"

__all__ = [
    "CaseConverter",
    "CaseStyle",
    "InvalidArgumentError",
    "ReCaseApp",
    "convert",
    "get_converter",
    "split_words",
    "to_camel_case",
    "to_dot_case",
    "to_kebab_case",
]
