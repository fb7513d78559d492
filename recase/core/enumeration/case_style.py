"""Case style enumeration for string conversion."""

from enum import Enum


class CaseStyle(str, Enum):
    """Target naming conventions."""
    CAMEL = "camel"
    DOT = "dot"
    KEBAB = "kebab"
