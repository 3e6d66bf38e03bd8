"""Module selection for run configurations."""

from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

from loguru import logger

from .config import ProjectContext, RunConfiguration


@runtime_checkable
class ModuleSelector(Protocol):
    """Keeps the selected module in step with a run configuration."""

    def reset(self, config: RunConfiguration) -> None:
        ...

    def apply_to(self, config: RunConfiguration) -> None:
        ...

    def get_module(self) -> Optional[str]:
        ...

    def select(self, module: Optional[str]) -> None:
        ...


class ProjectModuleSelector:
    """Select among the modules a project declares.

    A project that declares no modules leaves the choice unconstrained, so any
    module name read from a configuration is kept as is. A configured module
    the project does not know is shown as no selection.
    """

    def __init__(self, project: Optional[ProjectContext] = None) -> None:
        self._project = project
        self._selected: Optional[str] = None
        self._unresolved: Optional[str] = None

    def modules(self) -> List[str]:
        if self._project is None:
            return []
        return list(self._project.modules)

    def _accepts(self, module: Optional[str]) -> bool:
        known = self.modules()
        return module is None or not known or module in known

    def select(self, module: Optional[str]) -> None:
        if not self._accepts(module):
            logger.warning("Ignoring unknown module {}", module)
            return
        self._selected = module
        self._unresolved = None

    def reset(self, config: RunConfiguration) -> None:
        self._unresolved = None
        if self._accepts(config.module):
            self._selected = config.module
        else:
            logger.warning("Module {} is not part of the project; leaving it unselected", config.module)
            self._selected = None
            self._unresolved = config.module

    def apply_to(self, config: RunConfiguration) -> None:
        # an unknown module is written back untouched until the user picks another
        config.module = self._unresolved if self._unresolved is not None else self._selected

    def get_module(self) -> Optional[str]:
        return self._selected


__all__ = ["ModuleSelector", "ProjectModuleSelector"]
