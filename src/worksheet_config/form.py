"""Editable state of a worksheet run configuration."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from loguru import logger

from .config import DEFAULT_RUNTIME_OPTIONS, ProjectContext, RunConfiguration
from .modules import ModuleSelector, ProjectModuleSelector

RUNTIME_OPTIONS = "runtime_options"
WORKING_DIRECTORY = "working_directory"
SCRIPT_PATH = "script_path"
MODULE = "module"
FIELD_NAMES = (RUNTIME_OPTIONS, WORKING_DIRECTORY, SCRIPT_PATH, MODULE)

FieldListener = Callable[[str, Optional[str]], None]


class UnknownFieldError(KeyError):
    """Raised when a form field name is not one of ``FIELD_NAMES``."""


class ConfigurationForm:
    """Hold the values being edited for one run configuration.

    ``load`` copies a configuration into the form and ``apply`` copies the form
    back out. Each call writes to exactly one side; neither validates, so empty
    strings round-trip unchanged. Listeners registered with ``add_listener``
    are told about every field write, which is how UI adapters stay in sync.
    """

    def __init__(
        self,
        project: Optional[ProjectContext] = None,
        module_selector: Optional[ModuleSelector] = None,
    ) -> None:
        self._project = project
        self._module_selector = module_selector or ProjectModuleSelector(project)
        self._values: Dict[str, str] = {
            RUNTIME_OPTIONS: DEFAULT_RUNTIME_OPTIONS,
            WORKING_DIRECTORY: self._default_working_directory(),
            SCRIPT_PATH: "",
        }
        self._listeners: List[FieldListener] = []

    @property
    def module_selector(self) -> ModuleSelector:
        return self._module_selector

    def add_listener(self, listener: FieldListener) -> None:
        self._listeners.append(listener)

    def _default_working_directory(self) -> str:
        if self._project is None:
            return ""
        return self._project.base_path() or ""

    def _notify(self, name: str, value: Optional[str]) -> None:
        for listener in self._listeners:
            listener(name, value)

    # ------------------------------------------------------------------
    # Field accessors
    # ------------------------------------------------------------------
    def get_field(self, name: str) -> Optional[str]:
        if name == MODULE:
            return self._module_selector.get_module()
        try:
            return self._values[name]
        except KeyError:
            raise UnknownFieldError(name) from None

    def set_field(self, name: str, value: Optional[str]) -> None:
        if name == MODULE:
            self._module_selector.select(value)
            self._notify(MODULE, self._module_selector.get_module())
            return
        if name not in self._values:
            raise UnknownFieldError(name)
        self._values[name] = value or ""
        self._notify(name, self._values[name])

    @property
    def runtime_options(self) -> str:
        return self._values[RUNTIME_OPTIONS]

    @runtime_options.setter
    def runtime_options(self, value: str) -> None:
        self.set_field(RUNTIME_OPTIONS, value)

    @property
    def working_directory(self) -> str:
        return self._values[WORKING_DIRECTORY]

    @working_directory.setter
    def working_directory(self, value: str) -> None:
        self.set_field(WORKING_DIRECTORY, value)

    @property
    def script_path(self) -> str:
        return self._values[SCRIPT_PATH]

    @script_path.setter
    def script_path(self, value: str) -> None:
        self.set_field(SCRIPT_PATH, value)

    @property
    def module(self) -> Optional[str]:
        return self._module_selector.get_module()

    @module.setter
    def module(self, value: Optional[str]) -> None:
        self.set_field(MODULE, value)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, config: RunConfiguration) -> None:
        """Show ``config`` in the form."""

        self.set_field(RUNTIME_OPTIONS, config.runtime_options)
        self.set_field(
            WORKING_DIRECTORY, config.working_directory or self._default_working_directory()
        )
        self.set_field(SCRIPT_PATH, config.script_path)
        self._module_selector.reset(config)
        self._notify(MODULE, self._module_selector.get_module())
        logger.debug("Loaded run configuration {}", config.name)

    def apply(self, config: RunConfiguration) -> None:
        """Write the form's current values into ``config``."""

        config.runtime_options = self.runtime_options
        config.working_directory = self.working_directory
        config.script_path = self.script_path
        self._module_selector.apply_to(config)
        logger.debug("Applied form values to run configuration {}", config.name)


__all__ = [
    "FIELD_NAMES",
    "MODULE",
    "RUNTIME_OPTIONS",
    "SCRIPT_PATH",
    "WORKING_DIRECTORY",
    "ConfigurationForm",
    "UnknownFieldError",
]
