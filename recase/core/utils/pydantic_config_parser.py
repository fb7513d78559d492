import copy
import inspect
import json
from pathlib import Path
from typing import Any, Generic, Type, TypeVar

import yaml
from loguru import logger
from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


def deep_merge(base_dict: dict, update_dict: dict) -> dict:
    result = copy.deepcopy(base_dict)
    for key, value in update_dict.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def convert_value(value_str: str) -> Any:
    """Coerce a command-line value: bools, None, numbers, JSON, else the raw string."""
    value_str = value_str.strip()
    lower_str = value_str.lower()

    if lower_str in ("true", "false"):
        return lower_str == "true"
    if lower_str in ("none", "null"):
        return None

    number_type = float if ("e" in lower_str or "." in value_str) else int
    try:
        return number_type(value_str)
    except ValueError:
        pass

    try:
        return json.loads(value_str)
    except ValueError:
        return value_str


class PydanticConfigParser(Generic[T]):
    """Layered config: model defaults < `default_config` yaml < `config=` yamls < `key=value` args.

    Yaml names are looked up next to the parser subclass first, then relative
    to the working directory.
    """

    default_config: str = "default"
    # dot-notation keys whose values stay plain strings
    raw_keys: tuple = ()

    def __init__(self, config_class: Type[T]):
        self.config_class = config_class
        self.config_dict: dict = {}

    @staticmethod
    def load_from_yaml(yaml_path: str | Path) -> dict:
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Configuration file does not exist: {yaml_path}")

        with yaml_path.open(encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def parse_dot_notation(self, dot_list: list[str]) -> dict:
        config_dict = {}
        for item in dot_list:
            if "=" not in item:
                continue

            key_path, value_str = item.split("=", 1)
            value = value_str if key_path in self.raw_keys else convert_value(value_str)

            *parents, leaf = key_path.split(".")
            current_dict = config_dict
            for key in parents:
                current_dict = current_dict.setdefault(key, {})
            current_dict[leaf] = value

        return config_dict

    def _resolve_config_path(self, config_name: str) -> Path:
        if not config_name.endswith(".yaml"):
            config_name += ".yaml"

        config_path = Path(inspect.getfile(self.__class__)).parent / config_name
        if config_path.exists():
            logger.debug(f"load config={config_path}")
            return config_path

        config_path = Path(config_name)
        if not config_path.exists():
            raise FileNotFoundError(f"config={config_name} not found")
        logger.debug(f"load config={config_path}")
        return config_path

    def parse_args(self, *args: str) -> T:
        config_names = [self.default_config] if self.default_config else []
        dot_list = []
        for arg in args:
            if "=" not in arg:
                logger.warning(f"ignore arg={arg}, expected `key=value`")
                continue

            arg = arg.lstrip("-")
            key, value = arg.split("=", 1)
            if key in ("c", "config"):
                config_names.extend(c.strip() for c in value.split(",") if c.strip())
            else:
                dot_list.append(arg)

        self.config_dict = self.config_class().model_dump()
        for config_name in config_names:
            self.config_dict = deep_merge(self.config_dict, self.load_from_yaml(self._resolve_config_path(config_name)))
        self.config_dict = deep_merge(self.config_dict, self.parse_dot_notation(dot_list))

        return self.config_class.model_validate(self.config_dict)

    def update_config(self, **kwargs) -> T:
        # `a__b=1` addresses the nested key `a.b`
        dot_list = [f"{key.replace('__', '.')}={value}" for key, value in kwargs.items()]
        final_config = deep_merge(self.config_dict, self.parse_dot_notation(dot_list))
        return self.config_class.model_validate(final_config)
