"""Plain data models shared by the form and the pickers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(slots=True)
class FileEntry:
    """A candidate filesystem entry offered by a browse dialog."""

    path: Path
    is_directory: bool

    @classmethod
    def from_path(cls, path: Path) -> "FileEntry":
        return cls(path=path, is_directory=path.is_dir())

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def extension(self) -> str:
        return self.path.suffix[1:]

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")


@dataclass(slots=True, frozen=True)
class PickerPolicy:
    """Which entries a picker lets the user see and which it lets them choose.

    ``allow_*`` controls visibility while browsing; ``choose_*`` controls what
    a confirmation may write back. A script picker shows folders for navigation
    but only chooses files.
    """

    allow_directories: bool
    allow_files: bool
    extension_filter: Optional[str] = None
    choose_directories: bool = False
    choose_files: bool = False


__all__ = ["FileEntry", "PickerPolicy"]
