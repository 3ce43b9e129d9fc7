"""Charts — pyqtgraph visualization widgets."""

from spectrum_explorer.ui.charts.base_chart import BaseChart
from spectrum_explorer.ui.charts.spectrum_chart import SpectrumChartWidget

__all__ = ["BaseChart", "SpectrumChartWidget"]
