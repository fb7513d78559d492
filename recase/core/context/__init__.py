from .registry import Converter, Registry

CONVERTERS = Registry()

__all__ = [
    "Converter",
    "Registry",
    "CONVERTERS",
]
