"""About dialog — application info."""

from __future__ import annotations

import sys

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QDialog, QDialogButtonBox, QLabel, QVBoxLayout

from spectrum_explorer.constants import APP_NAME, APP_VERSION
from spectrum_explorer.ui.styles.colors import ACCENT, TEXT_DISABLED, TEXT_SECONDARY


class AboutDialog(QDialog):
    """Application name, version and stack."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("About")
        self.setFixedSize(380, 240)

        layout = QVBoxLayout(self)
        layout.setSpacing(8)

        for text, style in (
            (APP_NAME, f"font-size: 16pt; font-weight: bold; color: {ACCENT};"),
            (f"Version {APP_VERSION}", f"font-size: 11pt; color: {TEXT_SECONDARY};"),
            (
                f"Python {sys.version_info.major}.{sys.version_info.minor} | "
                "PyQt6 | NumPy | pyqtgraph",
                f"font-size: 9pt; color: {TEXT_SECONDARY};",
            ),
            (
                "Explore wavelength, frequency and photon energy\n"
                "across the electromagnetic spectrum.",
                f"font-size: 9pt; color: {TEXT_DISABLED};",
            ),
        ):
            label = QLabel(text)
            label.setStyleSheet(style)
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            layout.addWidget(label)

        layout.addStretch()
        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Close)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)
