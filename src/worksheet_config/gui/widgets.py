"""Reusable Qt widgets for the run configuration editor."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from PySide6.QtCore import QModelIndex, QSortFilterProxyModel
from PySide6.QtWidgets import (
    QDialog,
    QFileDialog,
    QHBoxLayout,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QWidget,
)

from ..form import ConfigurationForm
from ..models import FileEntry
from ..pickers import PathPicker


class _PickerFilterProxy(QSortFilterProxyModel):
    """Hide file dialog rows the picker policy rejects.

    Only rows below the directory the dialog shows are filtered; the directory
    itself and its ancestors must stay reachable even when they are hidden.
    """

    def __init__(self, picker: PathPicker, root: Path, parent=None) -> None:
        super().__init__(parent)
        self._picker = picker
        self._root = root

    def set_root(self, directory: str) -> None:
        self._root = Path(directory)
        self.invalidateFilter()

    def filterAcceptsRow(self, source_row: int, source_parent: QModelIndex) -> bool:
        model = self.sourceModel()
        index = model.index(source_row, 0, source_parent)
        entry = FileEntry(path=Path(model.filePath(index)), is_directory=model.isDir(index))
        return self._picker.is_browsable(entry, self._root)


class PathPickerWidget(QWidget):
    """Line edit plus browse button mirroring one form field."""

    def __init__(
        self,
        picker: PathPicker,
        form: ConfigurationForm,
        *,
        placeholder: str | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._picker = picker
        self._form = form
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self._edit = QLineEdit(self)
        if placeholder:
            self._edit.setPlaceholderText(placeholder)
        self._edit.setText(form.get_field(picker.field) or "")
        layout.addWidget(self._edit, stretch=1)
        button = QPushButton("Browse…", self)
        button.clicked.connect(self._choose_path)
        layout.addWidget(button)
        self._edit.textEdited.connect(self._store_text)
        form.add_listener(self._field_changed)

    def text(self) -> str:
        return self._edit.text()

    def _store_text(self, text: str) -> None:
        self._form.set_field(self._picker.field, text)

    def _field_changed(self, name: str, value: Optional[str]) -> None:
        if name == self._picker.field and self._edit.text() != (value or ""):
            self._edit.setText(value or "")

    def _start_directory(self) -> str:
        current = Path(self._edit.text().strip() or Path.home())
        if current.is_file():
            current = current.parent
        return str(current)

    def _choose_path(self) -> None:
        start = self._start_directory()
        dialog = QFileDialog(self, self._picker.title, start)
        dialog.setOption(QFileDialog.Option.DontUseNativeDialog, True)
        if self._picker.directories_only:
            dialog.setFileMode(QFileDialog.FileMode.Directory)
            dialog.setOption(QFileDialog.Option.ShowDirsOnly, True)
        else:
            dialog.setFileMode(QFileDialog.FileMode.ExistingFile)
        proxy = _PickerFilterProxy(self._picker, Path(start).absolute(), dialog)
        dialog.setProxyModel(proxy)
        dialog.directoryEntered.connect(proxy.set_root)
        if dialog.exec() != QDialog.DialogCode.Accepted or not dialog.selectedFiles():
            self._picker.cancel()
            return
        entry = FileEntry.from_path(Path(dialog.selectedFiles()[0]))
        if not self._picker.on_confirm(entry):
            QMessageBox.warning(self, self._picker.title, f"{entry.path} cannot be chosen here.")


__all__ = ["PathPickerWidget"]
