from typing import Callable, Dict

Converter = Callable[[str], str]


class Registry(Dict[str, Converter]):
    """Name-keyed converter table with attribute access, e.g. `CONVERTERS.kebab`."""

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError:
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    def __reduce__(self):
        return self.__class__, (dict(self),)

    def register(self, name: str = ""):
        def decorator(func: Converter) -> Converter:
            key = name or func.__name__
            if key in self and self[key] is not func:
                raise KeyError(f"{key} already registered by {self[key].__name__}")
            self[key] = func
            return func

        return decorator

    def get_registered(self, name: str) -> Converter:
        if name not in self:
            raise ValueError(f"unknown name={name}, supported={','.join(sorted(self.keys()))}")
        return self[name]
