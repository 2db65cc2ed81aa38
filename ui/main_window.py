from __future__ import annotations
import logging
import os
import sys

from PySide6.QtWidgets import (
    QApplication, QComboBox, QFileDialog, QFormLayout, QHBoxLayout, QLabel,
    QLineEdit, QMainWindow, QMessageBox, QPushButton, QVBoxLayout, QWidget
)

from core import config
from core.errors import FormArchiveError, FormStorageError
from core.logging_config import setup_logging
from core.models.form import FormData
from core.services.form_service import FORMS_DIR, FormService
from ui.widgets.signature_pad import SignaturePad

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, service: FormService | None = None):
        super().__init__()
        self.setWindowTitle("Form Fillout")
        self.resize(600, 900)
        self.service = service or FormService()

        w = QWidget()
        root = QVBoxLayout(w)
        self.setCentralWidget(w)

        # Sélecteur de formulaire (display names)
        self.cmb_forms = QComboBox()
        self.cmb_forms.currentIndexChanged.connect(self._on_select)
        root.addWidget(self.cmb_forms)

        # Identité / contact
        self.ed_first = QLineEdit()
        self.ed_middle = QLineEdit(); self.ed_middle.setMaxLength(1)
        self.ed_last = QLineEdit()
        self.ed_display = QLineEdit()
        self.ed_ssn = QLineEdit()
        self.ed_phone = QLineEdit()
        self.ed_email = QLineEdit()
        self.ed_address = QLineEdit()

        form = QFormLayout()
        form.addRow("First Name:", self.ed_first)
        form.addRow("Middle Initial:", self.ed_middle)
        form.addRow("Last Name:", self.ed_last)
        form.addRow("Display Name:", self.ed_display)
        form.addRow("Social Security Number:", self.ed_ssn)
        form.addRow("Phone Number:", self.ed_phone)
        form.addRow("Email Address:", self.ed_email)
        form.addRow("Street Address:", self.ed_address)
        root.addLayout(form)

        # Signature
        root.addWidget(QLabel("Signature:"))
        self.sig_pad = SignaturePad()
        root.addWidget(self.sig_pad, 1)

        bar = QHBoxLayout()
        btn_new = QPushButton("New Form")
        btn_save = QPushButton("Save")
        btn_reset = QPushButton("Reset")
        bar.addWidget(btn_new); bar.addWidget(btn_save); bar.addWidget(btn_reset)
        root.addLayout(bar)
        btn_new.clicked.connect(self._form_new)
        btn_save.clicked.connect(self._form_save)
        btn_reset.clicked.connect(self._form_reset)

        self.ed_status = QLineEdit("No Errors")
        self.ed_status.setReadOnly(True)
        root.addWidget(self.ed_status)

        bar_io = QHBoxLayout()
        btn_import = QPushButton("Import")
        btn_export = QPushButton("Export")
        bar_io.addWidget(btn_import); bar_io.addWidget(btn_export)
        root.addLayout(bar_io)
        btn_import.clicked.connect(self._forms_import)
        btn_export.clicked.connect(self._forms_export)

        self._refresh_forms(0)

    # ==================== AFFICHAGE ====================
    def _refresh_forms(self, select: int):
        self.cmb_forms.blockSignals(True)
        self.cmb_forms.clear()
        self.cmb_forms.addItems(self.service.display_names())
        self.cmb_forms.setCurrentIndex(select)
        self.cmb_forms.blockSignals(False)
        self._show_form(self.service.get_form(select))

    def _show_form(self, f: FormData):
        self.ed_first.setText(f.first_name)
        self.ed_middle.setText(f.middle_initial)
        self.ed_last.setText(f.last_name)
        self.ed_display.setText(f.display_name)
        self.ed_ssn.setText(f.ssn)
        self.ed_phone.setText(f.phone)
        self.ed_email.setText(f.email)
        self.ed_address.setText(f.address)
        self.sig_pad.set_signature(f.signature)

    def _on_select(self, idx: int):
        if idx >= 0:
            self._show_form(self.service.get_form(idx))

    # ==================== ACTIONS ====================
    def _form_new(self):
        idx = self.service.new_form()
        self._refresh_forms(idx)

    def _form_save(self):
        idx = self.cmb_forms.currentIndex()
        res = self.service.save_form(
            idx,
            first_name=self.ed_first.text(),
            middle_initial=self.ed_middle.text(),
            last_name=self.ed_last.text(),
            display_name=self.ed_display.text(),
            ssn=self.ed_ssn.text(),
            phone=self.ed_phone.text(),
            email=self.ed_email.text(),
            address=self.ed_address.text(),
            signature=self.sig_pad.get_signature(),
        )
        self._refresh_forms(res.index)
        self.ed_status.setText(res.message.splitlines()[0])
        if not res.success:
            QMessageBox.warning(self, "Validation", res.message)

    def _form_reset(self):
        idx = self.cmb_forms.currentIndex()
        self.service.reset_form(idx)
        self._show_form(self.service.get_form(idx))

    def _forms_import(self):
        path, _ = QFileDialog.getOpenFileName(self, "Choose a file", FORMS_DIR, config.ARCHIVE_FILTER)
        if not path:
            return
        try:
            self.service.import_forms(path)
        except (FormArchiveError, FormStorageError) as e:
            logger.warning("Import failed: %s", e)
            QMessageBox.critical(self, "Import", str(e))
            return
        self._refresh_forms(0)
        self.ed_status.setText(f"Imported {len(self.service.store)} form(s)")

    def _forms_export(self):
        path, _ = QFileDialog.getSaveFileName(self, "Export forms", FORMS_DIR, config.ARCHIVE_FILTER)
        if not path:
            return
        if not os.path.splitext(path)[1]:
            path += config.ARCHIVE_SUFFIX
        try:
            self.service.export_forms(path)
        except FormStorageError as e:
            logger.warning("Export failed: %s", e)
            QMessageBox.critical(self, "Export", str(e))
            return
        self.ed_status.setText(f"Exported {len(self.service.store)} form(s)")


def main() -> int:
    setup_logging()
    app = QApplication(sys.argv)
    win = MainWindow()
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
