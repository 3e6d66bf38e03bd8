from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import pytest

from worksheet_config.config import RunConfiguration


class StubProject:
    def __init__(self, base: Optional[str]) -> None:
        self._base = base

    def base_path(self) -> Optional[str]:
        return self._base


class StubModuleSelector:
    """Records calls without any project model behind it."""

    def __init__(self) -> None:
        self.selected: Optional[str] = None
        self.calls: List[str] = []

    def reset(self, config: RunConfiguration) -> None:
        self.calls.append("reset")
        self.selected = config.module

    def apply_to(self, config: RunConfiguration) -> None:
        self.calls.append("apply_to")
        config.module = self.selected

    def get_module(self) -> Optional[str]:
        return self.selected

    def select(self, module: Optional[str]) -> None:
        self.calls.append("select")
        self.selected = module


@pytest.fixture()
def selector() -> StubModuleSelector:
    return StubModuleSelector()


@pytest.fixture()
def sample_config() -> RunConfiguration:
    return RunConfiguration(
        name="Scratch",
        runtime_options="-Xmx1g -Djline.terminal=NONE",
        working_directory="/home/dev/work",
        script_path="/home/dev/work/scratch.sc",
        module="core",
    )


@pytest.fixture()
def browse_tree(tmp_path: Path) -> Path:
    (tmp_path / "a").mkdir()
    (tmp_path / ".hidden").mkdir()
    (tmp_path / "b.txt").write_text("text")
    (tmp_path / "x.sc").write_text("1 + 1")
    (tmp_path / "x.txt").write_text("text")
    (tmp_path / ".secret.sc").write_text("2 + 2")
    return tmp_path


@pytest.fixture()
def stub_project():
    return StubProject
