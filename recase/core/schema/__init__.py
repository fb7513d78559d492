from .convert_config import ConvertConfig
from .request import ConvertRequest
from .response import Response

__all__ = [
    "ConvertConfig",
    "ConvertRequest",
    "Response",
]
