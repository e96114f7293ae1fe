"""
Feature module registry and package discovery.

``ModuleLoader`` imports every package under ``modules/`` and hands each
exported ``IAppModule`` subclass to the process-wide ``ModuleRegistry``,
which runs the module's ``on_entry`` hook and later its ``on_shutdown``.
"""
import importlib
import inspect
import logging
from pathlib import Path
from types import ModuleType
from typing import TYPE_CHECKING, Callable, Dict, Iterator, List, Optional, Type

from core.app_context import AppContext
from core.interface import IAppModule

if TYPE_CHECKING:
    from fastapi import APIRouter


class ModuleRegistry:
    """Singleton mapping module names to live module instances."""

    _instance: Optional["ModuleRegistry"] = None

    def __new__(cls) -> "ModuleRegistry":
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._initialized = False
            cls._instance = instance
        return cls._instance

    def __init__(self) -> None:
        if self._initialized:
            return
        self._logger = logging.getLogger(__name__)
        self._modules: Dict[str, IAppModule] = {}
        self._context: Optional[AppContext] = None
        self._initialized = True

    def set_context(self, context: AppContext) -> None:
        self._context = context

    def register(self, module: IAppModule) -> bool:
        """
        Add a module under its own name and activate it.

        A failing ``on_entry`` is logged and recorded as an event; the
        module stays registered so its status can still be reported.

        Returns:
            False if a module with the same name is already present.
        """
        name = module.get_module_name()
        if name in self._modules:
            self._logger.warning(f"Duplicate module name '{name}', keeping the first one")
            return False

        self._modules[name] = module
        self._logger.info(f"Registered module '{name}'")
        if self._context is not None:
            self._activate(name, module, self._context)
        return True

    def _activate(self, name: str, module: IAppModule, context: AppContext) -> None:
        try:
            module.on_entry(context)
        except Exception as e:
            self._logger.exception(f"on_entry failed for module '{name}'")
            context.log_event(f"Module '{name}' failed to start: {e}", "ERROR")
        else:
            context.log_event(f"Module '{name}' started", "SUCCESS")

    def register_class(self, module_class: Type[IAppModule]) -> bool:
        try:
            module = module_class()
        except Exception as e:
            self._logger.error(f"Cannot construct {module_class.__name__}: {e}")
            return False
        return self.register(module)

    def unregister(self, module_name: str) -> bool:
        """Remove a module and run its ``on_shutdown``; False if unknown."""
        module = self._modules.pop(module_name, None)
        if module is None:
            self._logger.warning(f"No module named '{module_name}' to unregister")
            return False
        try:
            module.on_shutdown()
        except Exception as e:
            self._logger.error(f"on_shutdown failed for module '{module_name}': {e}")
        self._logger.info(f"Unregistered module '{module_name}'")
        return True

    def get_module(self, module_name: str) -> Optional[IAppModule]:
        return self._modules.get(module_name)

    def get_all_modules(self) -> List[IAppModule]:
        return list(self._modules.values())

    def get_module_names(self) -> List[str]:
        return list(self._modules)

    def _routers(self, getter: Callable[[IAppModule], Optional["APIRouter"]]) -> List["APIRouter"]:
        found = (getter(module) for module in self._modules.values())
        return [router for router in found if router is not None]

    def get_api_routers(self) -> List["APIRouter"]:
        """JSON routers, mounted under ``/api``."""
        return self._routers(lambda m: m.get_api_router())

    def get_page_routers(self) -> List["APIRouter"]:
        """HTML routers, mounted at the root."""
        return self._routers(lambda m: m.get_page_router())

    def shutdown_all(self) -> None:
        for name in list(self._modules):
            self.unregister(name)
        self._logger.info("Module registry drained")


class ModuleLoader:
    """Registers the IAppModule classes exported by ``<package>.<name>`` packages."""

    def __init__(self, registry: ModuleRegistry, package: str = "modules") -> None:
        self._registry = registry
        self._package = package
        self._logger = logging.getLogger(__name__)

    @staticmethod
    def _module_classes(package: ModuleType) -> Iterator[Type[IAppModule]]:
        for _, member in inspect.getmembers(package, inspect.isclass):
            if issubclass(member, IAppModule) and member is not IAppModule:
                yield member

    def load_from_directory(self, modules_path: str) -> int:
        """
        Import each package directory below ``modules_path``.

        Directories starting with ``_`` or lacking ``__init__.py`` are
        skipped, as are packages that fail to import.

        Returns:
            Number of modules registered.
        """
        root = Path(modules_path)
        if not root.is_dir():
            self._logger.warning(f"Module directory not found: {modules_path}")
            return 0

        count = 0
        for entry in sorted(root.iterdir()):
            if entry.name.startswith("_") or not (entry / "__init__.py").is_file():
                continue
            try:
                package = importlib.import_module(f"{self._package}.{entry.name}")
            except Exception as e:
                self._logger.error(f"Could not import module package '{entry.name}': {e}")
                continue
            for module_class in self._module_classes(package):
                if self._registry.register_class(module_class):
                    count += 1
                    self._logger.info(f"Loaded {module_class.__name__} from {entry.name}/")
        return count
