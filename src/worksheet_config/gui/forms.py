"""Editor views binding Qt widgets to a ConfigurationForm."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from loguru import logger
from PySide6.QtWidgets import (
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLineEdit,
    QMessageBox,
    QVBoxLayout,
    QWidget,
)

from ..config import ProjectContext, RunConfiguration, save_config
from ..form import MODULE, RUNTIME_OPTIONS, ConfigurationForm
from ..pickers import directory_picker, script_picker
from .widgets import PathPickerWidget


class RunConfigurationEditor(QWidget):
    """Thin Qt adapter over a ConfigurationForm."""

    def __init__(self, form: ConfigurationForm, *, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._form = form
        layout = QFormLayout(self)

        self._options_edit = QLineEdit(self)
        self._options_edit.setObjectName("VM options")
        self._options_edit.setText(form.runtime_options)
        self._options_edit.textEdited.connect(
            lambda text: self._form.set_field(RUNTIME_OPTIONS, text)
        )
        layout.addRow("VM options", self._options_edit)

        self._workdir_picker = PathPickerWidget(directory_picker(form), form, parent=self)
        layout.addRow("Working directory", self._workdir_picker)

        self._script_picker = PathPickerWidget(
            script_picker(form), form, placeholder="Worksheet (*.sc)", parent=self
        )
        layout.addRow("Worksheet", self._script_picker)

        self._module_combo = QComboBox(self)
        self._module_combo.addItem("")
        modules = getattr(form.module_selector, "modules", None)
        if modules is not None:
            self._module_combo.addItems(modules())
        self._module_combo.setEditable(self._module_combo.count() == 1)
        self._module_combo.setEnabled(True)
        self._module_combo.setCurrentText(form.module or "")
        self._module_combo.currentTextChanged.connect(self._module_selected)
        layout.addRow("Use classpath of module", self._module_combo)

        form.add_listener(self._field_changed)

    def _module_selected(self, text: str) -> None:
        if text != (self._form.module or ""):
            self._form.set_field(MODULE, text or None)

    def _field_changed(self, name: str, value: Optional[str]) -> None:
        if name == RUNTIME_OPTIONS and self._options_edit.text() != value:
            self._options_edit.setText(value or "")
        elif name == MODULE and self._module_combo.currentText() != (value or ""):
            self._module_combo.setCurrentText(value or "")


class RunConfigurationDialog(QDialog):
    """OK/Apply/Cancel dialog editing one run configuration file."""

    def __init__(
        self,
        config: RunConfiguration,
        config_path: Path,
        project: ProjectContext | None = None,
        *,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle(f"Run Configuration: {config.name}")
        self._config = config
        self._config_path = config_path
        self._form = ConfigurationForm(project)
        self._form.load(config)

        layout = QVBoxLayout(self)
        self._editor = RunConfigurationEditor(self._form, parent=self)
        layout.addWidget(self._editor)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok
            | QDialogButtonBox.StandardButton.Apply
            | QDialogButtonBox.StandardButton.Cancel,
            parent=self,
        )
        buttons.accepted.connect(self._accept)
        buttons.rejected.connect(self.reject)
        buttons.button(QDialogButtonBox.StandardButton.Apply).clicked.connect(self._apply)
        layout.addWidget(buttons)

    @property
    def form(self) -> ConfigurationForm:
        return self._form

    def _apply(self) -> bool:
        self._form.apply(self._config)
        try:
            save_config(self._config, self._config_path)
        except OSError as exc:
            logger.exception("Failed to save run configuration")
            QMessageBox.critical(self, "Save failed", str(exc))
            return False
        logger.info("Saved run configuration to {}", self._config_path)
        return True

    def _accept(self) -> None:
        if self._apply():
            self.accept()


__all__ = ["RunConfigurationEditor", "RunConfigurationDialog"]
