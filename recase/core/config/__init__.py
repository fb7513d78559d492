from .config_parser import ReCaseConfigParser

__all__ = [
    "ReCaseConfigParser",
]
