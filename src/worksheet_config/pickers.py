"""Filtered file and directory pickers bound to form fields."""

from __future__ import annotations

from pathlib import Path
from typing import List

from loguru import logger

from .config import WORKSHEET_EXTENSION
from .form import SCRIPT_PATH, WORKING_DIRECTORY, ConfigurationForm
from .models import FileEntry, PickerPolicy

WORKING_DIRECTORY_TITLE = "Choose Working Directory"
WORKSHEET_TITLE = "Choose Worksheet"

DIRECTORY_POLICY = PickerPolicy(allow_directories=True, allow_files=False, choose_directories=True)


def script_policy(extension: str = WORKSHEET_EXTENSION) -> PickerPolicy:
    """Directories stay visible so the user can navigate to the script."""

    return PickerPolicy(
        allow_directories=True,
        allow_files=True,
        extension_filter=extension,
        choose_files=True,
    )


def entry_visible(policy: PickerPolicy, entry: FileEntry, show_hidden: bool = False) -> bool:
    """Return True when ``entry`` should be listed under ``policy``."""

    if entry.is_hidden and not show_hidden:
        return False
    if entry.is_directory:
        return policy.allow_directories
    if not policy.allow_files:
        return False
    return policy.extension_filter is None or entry.extension == policy.extension_filter


def entry_selectable(policy: PickerPolicy, entry: FileEntry) -> bool:
    """Return True when confirming ``entry`` may write it into the bound field."""

    if entry.is_directory:
        return policy.choose_directories and policy.allow_directories
    return policy.choose_files and entry_visible(policy, entry, show_hidden=True)


class PathPicker:
    """Write a filtered filesystem selection into one form field."""

    def __init__(
        self,
        title: str,
        policy: PickerPolicy,
        form: ConfigurationForm,
        field: str,
    ) -> None:
        self.title = title
        self.policy = policy
        self._form = form
        self._field = field

    @property
    def field(self) -> str:
        return self._field

    @property
    def directories_only(self) -> bool:
        return self.policy.choose_directories and not self.policy.choose_files

    def is_visible(self, entry: FileEntry, show_hidden: bool = False) -> bool:
        return entry_visible(self.policy, entry, show_hidden)

    def is_selectable(self, entry: FileEntry) -> bool:
        return entry_selectable(self.policy, entry)

    def is_browsable(self, entry: FileEntry, root: Path, show_hidden: bool = False) -> bool:
        """Visibility of a dialog row while ``root`` is the directory on display.

        ``root`` and its ancestors always stay listed so a start directory
        inside a hidden folder remains reachable.
        """

        if entry.path == root or entry.path in root.parents:
            return True
        return self.is_visible(entry, show_hidden)

    def list_entries(self, directory: Path, *, show_hidden: bool = False) -> List[FileEntry]:
        """List the visible children of ``directory``, directories first.

        An unreadable directory yields an empty listing and an unreadable child
        is skipped; neither raises.
        """

        try:
            children = list(Path(directory).iterdir())
        except OSError as exc:
            logger.warning("Unable to list {}: {}", directory, exc)
            return []
        entries: List[FileEntry] = []
        for child in children:
            try:
                entries.append(FileEntry.from_path(child))
            except OSError as exc:
                logger.warning("Skipping {}: {}", child, exc)
        visible = [entry for entry in entries if self.is_visible(entry, show_hidden)]
        return sorted(visible, key=lambda entry: (not entry.is_directory, entry.name.lower()))

    def on_confirm(self, entry: FileEntry) -> bool:
        """Write ``entry`` into the bound field; entries that cannot be chosen are ignored."""

        if not self.is_selectable(entry):
            logger.warning("{}: {} cannot be chosen", self.title, entry.path)
            return False
        logger.debug("{} -> {}", self.title, entry.path)
        self._form.set_field(self._field, str(entry.path))
        return True

    def cancel(self) -> None:
        logger.debug("{} cancelled", self.title)


def directory_picker(form: ConfigurationForm) -> PathPicker:
    return PathPicker(WORKING_DIRECTORY_TITLE, DIRECTORY_POLICY, form, WORKING_DIRECTORY)


def script_picker(form: ConfigurationForm, extension: str = WORKSHEET_EXTENSION) -> PathPicker:
    return PathPicker(WORKSHEET_TITLE, script_policy(extension), form, SCRIPT_PATH)


__all__ = [
    "DIRECTORY_POLICY",
    "WORKING_DIRECTORY_TITLE",
    "WORKSHEET_TITLE",
    "PathPicker",
    "directory_picker",
    "entry_selectable",
    "entry_visible",
    "script_picker",
    "script_policy",
]
