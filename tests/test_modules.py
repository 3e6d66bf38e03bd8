from __future__ import annotations

from worksheet_config.config import ProjectContext, RunConfiguration
from worksheet_config.modules import ModuleSelector, ProjectModuleSelector


def test_selector_satisfies_protocol(selector) -> None:
    assert isinstance(ProjectModuleSelector(), ModuleSelector)
    assert isinstance(selector, ModuleSelector)


def test_reset_keeps_known_module() -> None:
    chooser = ProjectModuleSelector(ProjectContext(modules=["core", "app"]))
    chooser.reset(RunConfiguration(module="app"))
    assert chooser.get_module() == "app"


def test_reset_leaves_unknown_module_unselected() -> None:
    chooser = ProjectModuleSelector(ProjectContext(modules=["core", "app"]))
    chooser.reset(RunConfiguration(module="legacy"))
    assert chooser.get_module() is None

    config = RunConfiguration()
    chooser.apply_to(config)
    assert config.module == "legacy"


def test_selecting_after_unknown_module_replaces_it() -> None:
    chooser = ProjectModuleSelector(ProjectContext(modules=["core", "app"]))
    chooser.reset(RunConfiguration(module="legacy"))
    chooser.select("app")
    config = RunConfiguration(module="legacy")
    chooser.apply_to(config)
    assert config.module == "app"


def test_select_ignores_unknown_module() -> None:
    chooser = ProjectModuleSelector(ProjectContext(modules=["core"]))
    chooser.select("core")
    chooser.select("legacy")
    assert chooser.get_module() == "core"


def test_without_project_any_module_is_kept() -> None:
    chooser = ProjectModuleSelector()
    chooser.reset(RunConfiguration(module="anything"))
    config = RunConfiguration()
    chooser.apply_to(config)
    assert config.module == "anything"
    assert chooser.modules() == []
