from typing import Any, Callable

from loguru import logger

from .context import CONVERTERS
from .enumeration import CaseStyle
from .exceptions import InvalidArgumentError
from .schema import ConvertRequest, Response


def _style_name(style: CaseStyle | str) -> str:
    if isinstance(style, CaseStyle):
        return style.value
    if isinstance(style, str):
        return style.strip().lower()
    raise ValueError(f"style must be a CaseStyle or str, got {type(style).__name__}")


def get_converter(style: CaseStyle | str) -> Callable[[str], str]:
    """Look up the converter registered for `style`.

    Accepts a `CaseStyle` member or its value; names are matched
    case-insensitively. Unknown styles raise `ValueError`.
    """
    return CONVERTERS.get_registered(_style_name(style))


def convert(content: Any, style: CaseStyle | str = CaseStyle.CAMEL) -> str:
    return get_converter(style)(content)


class CaseConverter:

    def __init__(self, style: CaseStyle | str = CaseStyle.CAMEL, raise_exception: bool = True):
        self.converter = get_converter(style)
        self.style: CaseStyle = CaseStyle(_style_name(style))
        self.raise_exception: bool = raise_exception

    def call(self, content: Any = "", style: CaseStyle | str | None = None, **kwargs) -> Response:
        """Convert `content`; an explicit `style` overrides the instance style for this call only."""
        converter = self.converter if style is None else get_converter(style)
        style = self.style if style is None else CaseStyle(_style_name(style))
        request = ConvertRequest(content=content, style=style, **kwargs)
        response = Response(metadata={"style": request.style.value})

        try:
            response.answer = converter(request.content)
        except InvalidArgumentError as e:
            if self.raise_exception:
                raise
            logger.exception(f"{request.style.value} convert failed, error={e.args}")
            response.success = False
            response.metadata["error"] = str(e)
            return response

        logger.debug(f"{request.style.value}: {request.content!r} -> {response.answer!r}")
        return response
