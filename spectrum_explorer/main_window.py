"""Main window — spectrum bar, conversion/education panels and chart.

Layout:
  Top:    SpectrumBarWidget
  Middle: ConversionPanel | EducationalPanel (QSplitter)
  Bottom: SpectrumChartWidget
  Footer: QStatusBar with the current selection
"""

from __future__ import annotations

import logging

from PyQt6.QtCore import QSettings, Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QMainWindow, QSplitter, QVBoxLayout, QWidget

from spectrum_explorer.constants import APP_NAME, APP_VERSION, MIN_WINDOW_HEIGHT, MIN_WINDOW_WIDTH
from spectrum_explorer.core.photon import format_energy, format_frequency, format_wavelength
from spectrum_explorer.core.spectrum_catalog import SpectrumCatalog
from spectrum_explorer.ui.charts.spectrum_chart import SpectrumChartWidget
from spectrum_explorer.ui.dialogs.about_dialog import AboutDialog
from spectrum_explorer.ui.dialogs.preferences_dialog import PreferencesDialog
from spectrum_explorer.ui.panels.conversion_panel import ConversionPanel
from spectrum_explorer.ui.panels.educational_panel import EducationalPanel
from spectrum_explorer.ui.preferences_store import load_preferences, save_preferences
from spectrum_explorer.ui.selection_controller import SelectionController
from spectrum_explorer.ui.widgets.spectrum_bar_widget import SpectrumBarWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Application main window."""

    def __init__(
        self,
        settings: QSettings | None = None,
        catalog: SpectrumCatalog | None = None,
    ):
        super().__init__()
        self.setWindowTitle(f"{APP_NAME} v{APP_VERSION}")
        self.setMinimumSize(MIN_WINDOW_WIDTH, MIN_WINDOW_HEIGHT)

        self._settings = settings if settings is not None else QSettings()
        self._controller = SelectionController(catalog, parent=self)

        self._build_ui()
        self._build_menus()
        self._restore_state()

        self._controller.wavelength_changed.connect(self._on_wavelength_changed)
        self._controller.input_rejected.connect(self._on_input_rejected)
        self._update_status()

    @property
    def controller(self) -> SelectionController:
        return self._controller

    def _build_ui(self) -> None:
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(8)

        self._bar = SpectrumBarWidget(self._controller)
        layout.addWidget(self._bar)

        splitter = QSplitter(Qt.Orientation.Horizontal)
        self._conversion_panel = ConversionPanel(self._controller)
        self._educational_panel = EducationalPanel(self._controller)
        splitter.addWidget(self._conversion_panel)
        splitter.addWidget(self._educational_panel)
        splitter.setStretchFactor(0, 1)
        splitter.setStretchFactor(1, 2)
        layout.addWidget(splitter, stretch=1)

        self._chart = SpectrumChartWidget(self._controller)
        layout.addWidget(self._chart, stretch=1)

        self.setCentralWidget(central)
        self._bar.setFocus()

    def _build_menus(self) -> None:
        file_menu = self.menuBar().addMenu("&File")
        prefs_action = QAction("&Preferences…", self)
        prefs_action.setShortcut(QKeySequence.StandardKey.Preferences)
        prefs_action.triggered.connect(self._on_preferences)
        file_menu.addAction(prefs_action)
        file_menu.addSeparator()
        quit_action = QAction("&Quit", self)
        quit_action.setShortcut(QKeySequence.StandardKey.Quit)
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

        help_menu = self.menuBar().addMenu("&Help")
        about_action = QAction("&About", self)
        about_action.triggered.connect(self._on_about)
        help_menu.addAction(about_action)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def closeEvent(self, event):
        self._save_state()
        super().closeEvent(event)

    def _save_state(self) -> None:
        try:
            self._settings.setValue("mainwindow/geometry", self.saveGeometry())
            save_preferences(self._settings, self._controller.preferences)
        except Exception:
            logger.warning("Failed to save window state", exc_info=True)

    def _restore_state(self) -> None:
        geometry = self._settings.value("mainwindow/geometry")
        if geometry:
            self.restoreGeometry(geometry)
        self._controller.set_preferences(load_preferences(self._settings))

    # ------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------

    def _on_preferences(self) -> None:
        dlg = PreferencesDialog(self._controller.preferences, self)
        if dlg.exec() == PreferencesDialog.DialogCode.Accepted:
            self._controller.set_preferences(dlg.preferences())
            try:
                save_preferences(self._settings, self._controller.preferences)
            except Exception:
                logger.warning("Failed to save preferences", exc_info=True)

    def _on_about(self) -> None:
        AboutDialog(self).exec()

    def _on_wavelength_changed(self, _wavelength: float) -> None:
        self._update_status()

    def _on_input_rejected(self, kind: str) -> None:
        self.statusBar().showMessage(f"Invalid {kind} ignored", 3000)

    def _update_status(self) -> None:
        state = self._controller.state
        self.statusBar().showMessage(
            f"λ = {format_wavelength(state.wavelength)}   "
            f"f = {format_frequency(state.frequency)}   "
            f"E = {format_energy(state.energy_ev)}   "
            f"{state.region_name}"
        )
