from .case_convert import split_words, to_camel_case, to_dot_case, to_kebab_case
from .logger_utils import init_logger
from .pydantic_config_parser import PydanticConfigParser

__all__ = [
    "split_words",
    "to_camel_case",
    "to_dot_case",
    "to_kebab_case",
    "init_logger",
    "PydanticConfigParser",
]
