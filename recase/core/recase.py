import sys

from loguru import logger

from .config import ReCaseConfigParser
from .converter import CaseConverter
from .schema import ConvertConfig, Response
from .utils import PydanticConfigParser, init_logger


class ReCaseApp:
    def __init__(
        self,
        *args,
        config: ConvertConfig | None = None,
        parser: type[PydanticConfigParser] = ReCaseConfigParser,
        config_path: str | None = None,
        **kwargs,
    ):
        """
        Initialize application with configuration.

        Args:
            *args: Dot-notation overrides passed to parser. Examples:
                - "style=kebab"
                - "content=myVariableName"
                - "log_level=DEBUG"
            config: Pre-built ConvertConfig, skips parsing when given.
            parser: Configuration parser class.
            config_path: Extra YAML file(s), comma separated, merged over default.yaml.
            **kwargs: Same as args but as keyword arguments.
        """
        self.parser = parser(ConvertConfig)
        self.config: ConvertConfig = config
        if self.config is None:
            input_args = []
            if config_path:
                input_args.append(f"config={config_path}")
            if args:
                input_args.extend(args)
            if kwargs:
                input_args.extend([f"{k}={v}" for k, v in kwargs.items()])
            self.config = self.parser.parse_args(*input_args)

        init_logger(level=self.config.log_level, log_dir=self.config.log_dir or None)

    def run(self) -> Response:
        converter = CaseConverter(style=self.config.style, raise_exception=self.config.raise_exception)
        return converter.call(content=self.config.content)


def main():
    try:
        app = ReCaseApp(*sys.argv[1:])
        response = app.run()
    except (TypeError, ValueError, FileNotFoundError) as e:
        logger.exception(f"recase failed: {e}")
        sys.exit(1)

    if not response.success:
        sys.exit(1)
    print(response.answer)


if __name__ == "__main__":
    main()
