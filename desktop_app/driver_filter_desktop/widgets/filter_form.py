"""Main window with the driver filter form."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import Signal
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (QApplication, QCheckBox, QFileDialog, QFormLayout,
                               QGroupBox, QHBoxLayout, QLabel, QLineEdit,
                               QMainWindow, QPushButton, QVBoxLayout, QWidget)

from ..controller import SubmissionController, SubmissionState
from ..download import SaveFile
from ..models import FormState, SourceFile
from ..time_fields import (HOUR_MAX, MINUTE_MAX, SECOND_MAX, compose_time,
                           normalize_component, split_time)

logger = logging.getLogger(__name__)

SUBMIT_LABEL = "Filter Data"
SUBMITTING_LABEL = "Filtering..."


def dialog_save_file(parent: Optional[QWidget] = None) -> SaveFile:
    """Return a save capability that asks the user where to put the file."""

    def save(content: bytes, filename: str) -> None:
        path, _ = QFileDialog.getSaveFileName(parent, "Save filtered file", filename,
                                              filter="Excel Files (*.xlsx)")
        if not path:
            logger.info("Save dialog for %s cancelled", filename)
            return
        Path(path).write_bytes(content)
        logger.info("Saved %d bytes to %s", len(content), path)

    return save


class TimeFieldRow(QWidget):
    """HH / MM / SS inputs for one break time."""

    time_changed = Signal(str)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.hour_input = self._component_input("HH", HOUR_MAX)
        self.minute_input = self._component_input("MM", MINUTE_MAX)
        self.second_input = self._component_input("SS", SECOND_MAX)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.hour_input)
        layout.addWidget(QLabel(":"))
        layout.addWidget(self.minute_input)
        layout.addWidget(QLabel(":"))
        layout.addWidget(self.second_input)

    def _component_input(self, placeholder: str, maximum: int) -> QLineEdit:
        line_edit = QLineEdit()
        line_edit.setPlaceholderText(placeholder)
        line_edit.setMaxLength(3)
        line_edit.textEdited.connect(lambda text: self._handle_edit(line_edit, text, maximum))
        return line_edit

    def _handle_edit(self, line_edit: QLineEdit, text: str, maximum: int) -> None:
        normalized = normalize_component(text, maximum)
        if normalized != line_edit.text():
            line_edit.setText(normalized)
        self.time_changed.emit(self.value())

    def value(self) -> str:
        """Composed time, empty until at least one component is entered.

        Components left blank are filled with ``"00"`` here, as the value is
        stored, so a partially typed time always reaches the form complete.
        """

        parts = (self.hour_input.text(), self.minute_input.text(), self.second_input.text())
        if not any(parts):
            return ""
        return compose_time(*parts, fill=True)

    def set_value(self, value: str) -> None:
        hour, minute, second = split_time(value)
        self.hour_input.setText(hour)
        self.minute_input.setText(minute)
        self.second_input.setText(second)


class DriverFilterWindow(QMainWindow):
    """Form for filtering a schedule by driver."""

    def __init__(self, controller: SubmissionController, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self.setWindowTitle("Driver Data Filter")
        self.resize(480, 560)

        title = QLabel("Driver Data Filter")
        font = QFont()
        font.setPointSize(18)
        font.setBold(True)
        title.setFont(font)

        self.error_label = QLabel()
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet("color: #b91c1c; background: #fee2e2; padding: 6px;")
        self.error_label.hide()

        self.file_label = QLabel("No file selected")
        self.file_button = QPushButton("Upload Excel File")
        self.file_button.clicked.connect(self._choose_file)

        self.driver_input = QLineEdit()
        self.driver_input.setPlaceholderText("Enter Driver Name")
        self.driver_input.textEdited.connect(lambda text: self.controller.update(driver_name=text))

        self.break_checkbox = QCheckBox("Add Break Period")
        self.break_checkbox.toggled.connect(self._handle_break_toggled)
        self.break_date_input = QLineEdit()
        self.break_date_input.setPlaceholderText("YYYY-MM-DD")
        self.break_date_input.textEdited.connect(lambda text: self._update_break(date=text))
        self.break_start_row = TimeFieldRow()
        self.break_start_row.time_changed.connect(lambda value: self._update_break(start_time=value))
        self.break_end_row = TimeFieldRow()
        self.break_end_row.time_changed.connect(lambda value: self._update_break(end_time=value))

        self.off_checkbox = QCheckBox("Give Off Day")
        self.off_checkbox.toggled.connect(self._handle_off_toggled)
        self.off_date_input = QLineEdit()
        self.off_date_input.setPlaceholderText("YYYY-MM-DD")
        self.off_date_input.textEdited.connect(lambda text: self.controller.update(off_date=text))

        self.submit_button = QPushButton(SUBMIT_LABEL)
        self.submit_button.clicked.connect(self.submit)

        self._build_ui(title)

        self.controller.add_state_listener(self._apply_state)
        self.controller.add_form_listener(self._apply_form)
        self._apply_form(self.controller.form)

    # ------------------------------------------------------------------
    def _build_ui(self, title: QLabel) -> None:
        file_row = QHBoxLayout()
        file_row.addWidget(self.file_button)
        file_row.addWidget(self.file_label, stretch=1)

        self.break_group = QGroupBox("Break")
        break_form = QFormLayout(self.break_group)
        break_form.addRow("Break Date", self.break_date_input)
        break_form.addRow("Start (24-hour, HH:MM:SS)", self.break_start_row)
        break_form.addRow("End (24-hour, HH:MM:SS)", self.break_end_row)

        self.off_group = QGroupBox("Off Day")
        off_form = QFormLayout(self.off_group)
        off_form.addRow("Off Date", self.off_date_input)

        central_widget = QWidget()
        layout = QVBoxLayout(central_widget)
        layout.addWidget(title)
        layout.addWidget(QLabel("Filter and download driver schedules"))
        layout.addWidget(self.error_label)
        layout.addLayout(file_row)
        layout.addWidget(QLabel("Driver Name"))
        layout.addWidget(self.driver_input)
        layout.addWidget(self.break_checkbox)
        layout.addWidget(self.break_group)
        layout.addWidget(self.off_checkbox)
        layout.addWidget(self.off_group)
        layout.addStretch(1)
        layout.addWidget(self.submit_button)

        self.setCentralWidget(central_widget)

    # ------------------------------------------------------------------
    def submit(self) -> None:
        result = self.controller.submit()
        if result.succeeded:
            self.statusBar().showMessage(f"Saved {result.filename}", 5000)
        self._show_error(self.controller.error_message)

    # ------------------------------------------------------------------
    def _choose_file(self) -> None:
        path, _ = QFileDialog.getOpenFileName(self, "Upload Excel File", filter="Excel Files (*.xlsx)")
        if path:
            self.controller.update(source_file=SourceFile(Path(path)))

    def _update_break(self, **changes: str) -> None:
        form = self.controller.form.with_break(**changes)
        self.controller.update(break_window=form.break_window)

    def _handle_break_toggled(self, checked: bool) -> None:
        self.break_group.setVisible(checked)
        if checked != self.controller.form.add_break:
            self.controller.update(add_break=checked)

    def _handle_off_toggled(self, checked: bool) -> None:
        self.off_group.setVisible(checked)
        if checked != self.controller.form.give_off:
            self.controller.update(give_off=checked)

    def _apply_state(self, state: SubmissionState) -> None:
        submitting = state is SubmissionState.SUBMITTING
        self.submit_button.setEnabled(not submitting)
        self.submit_button.setText(SUBMITTING_LABEL if submitting else SUBMIT_LABEL)
        if submitting:
            self._show_error("")
            QApplication.processEvents()

    def _apply_form(self, form: FormState) -> None:
        """Redraw widgets that differ from ``form``, e.g. after a reset."""

        self.file_label.setText(form.source_file.name if form.source_file else "No file selected")
        if self.driver_input.text() != form.driver_name:
            self.driver_input.setText(form.driver_name)
        if self.break_date_input.text() != form.break_window.date:
            self.break_date_input.setText(form.break_window.date)
        if self.break_start_row.value() != form.break_window.start_time:
            self.break_start_row.set_value(form.break_window.start_time)
        if self.break_end_row.value() != form.break_window.end_time:
            self.break_end_row.set_value(form.break_window.end_time)
        if self.off_date_input.text() != form.off_date:
            self.off_date_input.setText(form.off_date)
        self.break_checkbox.setChecked(form.add_break)
        self.off_checkbox.setChecked(form.give_off)
        self.break_group.setVisible(form.add_break)
        self.off_group.setVisible(form.give_off)

    def _show_error(self, message: str) -> None:
        self.error_label.setText(message)
        self.error_label.setVisible(bool(message))


__all__ = ["DriverFilterWindow", "TimeFieldRow", "dialog_save_file"]
