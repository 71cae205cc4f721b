import importlib
from typing import Any, Dict, Optional, Type

from sudokugen.utils.log import get_logger


class Registry(object):
    """Name to class mapping, with lazy import of built-in entries."""

    def __init__(self, name: str, default_mapping: Optional[Dict[str, str]] = None):
        """
        Args:
            name (`str`): The name of the registry.
            default_mapping (`dict`): Mapping from registered names to dotted
                class paths, imported on first lookup.
        """
        self._name = name
        self._modules = {}
        self._default_mapping = dict(default_mapping or {})
        self.logger = get_logger(__name__)

    @property
    def name(self) -> str:
        return self._name

    @property
    def modules(self) -> dict:
        """Classes imported or registered so far."""
        return self._modules

    def names(self) -> list:
        """All names that `get` can resolve without a dotted path."""
        return sorted(set(self._modules) | set(self._default_mapping))

    def get(self, module_key: str) -> Any:
        """
        Look up `module_key`. Built-in names are imported from the default
        mapping, dotted paths such as ``"my_pkg.fill.MyFill"`` are imported
        and cached.

        Raises:
            `ImportError`: the target class cannot be imported.
            `KeyError`: the name is unknown.
        """
        module = self._modules.get(module_key, None)
        if module is not None:
            return module
        if module_key in self._default_mapping:
            module_path, class_name = self._default_mapping[module_key].rsplit(".", 1)
        elif isinstance(module_key, str) and "." in module_key:
            module_path, class_name = module_key.rsplit(".", 1)
        else:
            raise KeyError(
                f"{module_key} is not registered in {self._name}, choose from {self.names()}"
            )
        try:
            module = self._dynamic_import(module_path, class_name)
        except (ImportError, AttributeError) as e:
            self.logger.error(f"Failed to import {class_name} from {module_path}: {e}")
            raise ImportError(f"Cannot import {class_name} from {module_path}") from e
        self._register_module(module_name=module_key, module_cls=module, force=True)
        return module

    def _register_module(self, module_name=None, module_cls=None, force=False):
        if module_name is None:
            module_name = module_cls.__name__

        if module_name in self._modules and not force:
            self.logger.warning(
                f"{module_name} is already registered in {self._name}, "
                f"if you want to override it, please set force=True."
            )
            raise KeyError(f"{module_name} is already registered in {self._name}")

        self._modules[module_name] = module_cls
        module_cls._name = module_name

    def register_module(self, module_name: str, module_cls: Type = None, force=False):
        """
        Register a class under `module_name`, directly or as a decorator.

        Example:

            .. code-block:: python

                @FILL_STRATEGIES.register_module("shuffled_columns")
                class ShuffledColumnFill(FillStrategy):
                    pass
        """
        if not (module_name is None or isinstance(module_name, str)):
            raise TypeError(f"module_name must be either of None, str, got {type(module_name)}")
        if module_cls is not None:
            self._register_module(module_name=module_name, module_cls=module_cls, force=force)
            return module_cls

        def _register(module_cls):
            self._register_module(module_name=module_name, module_cls=module_cls, force=force)
            return module_cls

        return _register

    def _dynamic_import(self, module_path: str, class_name: str) -> Type:
        module = importlib.import_module(module_path)
        return getattr(module, class_name)
