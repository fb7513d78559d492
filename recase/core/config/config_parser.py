from ..utils import PydanticConfigParser
from ..schema import ConvertConfig


class ReCaseConfigParser(PydanticConfigParser[ConvertConfig]):
    """Reads `default.yaml` from this package; `content` is never coerced to a number or bool."""

    raw_keys: tuple = ("content",)
