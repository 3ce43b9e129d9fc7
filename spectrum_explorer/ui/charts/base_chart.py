"""Base chart widget — pyqtgraph-based with dark theme.

Common API for chart widgets: add_curve, add_region, add_infinite_line,
clear_curves.  In log mode pyqtgraph plots curve data as given but places
regions and lines in view coordinates, so callers pass log10 values for
those; ``view_x`` does the mapping.
"""

import math

import numpy as np
import pyqtgraph as pg
from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QVBoxLayout, QWidget

from spectrum_explorer.ui.styles.colors import ACCENT, BACKGROUND, BORDER, PANEL_BG, TEXT_SECONDARY, WARNING


class BaseChart(QWidget):
    """pyqtgraph PlotWidget wrapper with dark theme and utility methods."""

    def __init__(
        self,
        title: str = "",
        x_label: str = "",
        y_label: str = "",
        log_x: bool = False,
        log_y: bool = False,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self._curves: list[pg.PlotDataItem] = []
        self._regions: list[pg.LinearRegionItem] = []
        self._lines: list[pg.InfiniteLine] = []
        self._log_x = log_x
        self._log_y = log_y

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.plot_widget = pg.PlotWidget()
        self.plot_widget.setBackground(BACKGROUND)
        self.plot_widget.showGrid(x=True, y=True, alpha=0.15)
        layout.addWidget(self.plot_widget)

        plot_item = self.plot_widget.getPlotItem()
        if title:
            plot_item.setTitle(title, color=TEXT_SECONDARY, size="10pt")
        if x_label:
            plot_item.setLabel("bottom", x_label, color=TEXT_SECONDARY)
        if y_label:
            plot_item.setLabel("left", y_label, color=TEXT_SECONDARY)

        for axis_name in ("bottom", "left"):
            axis = plot_item.getAxis(axis_name)
            axis.setPen(pg.mkPen(BORDER))
            axis.setTextPen(pg.mkPen(TEXT_SECONDARY))

        self.plot_widget.setLogMode(x=log_x, y=log_y)

        self._legend = plot_item.addLegend(
            offset=(10, 10),
            labelTextColor=TEXT_SECONDARY,
            brush=pg.mkBrush(PANEL_BG),
            pen=pg.mkPen(BORDER),
        )

    @property
    def is_log_x(self) -> bool:
        return self._log_x

    def view_x(self, x: float) -> float:
        """Data x → view coordinate (log10 on a log axis)."""
        return math.log10(x) if self._log_x else x

    def add_curve(
        self,
        x: np.ndarray,
        y: np.ndarray,
        name: str = "",
        color: str = ACCENT,
        width: int = 2,
    ) -> pg.PlotDataItem:
        """Add a data curve to the plot."""
        pen = pg.mkPen(color=color, width=width)
        curve = self.plot_widget.plot(x, y, pen=pen, name=name or None)
        self._curves.append(curve)
        return curve

    def clear_curves(self) -> None:
        """Remove all curves, regions and lines."""
        for item in (*self._curves, *self._regions, *self._lines):
            self.plot_widget.removeItem(item)
        self._curves.clear()
        self._regions.clear()
        self._lines.clear()
        if self._legend is not None:
            self._legend.clear()

    def add_region(
        self,
        x_min: float,
        x_max: float,
        color: str = ACCENT,
        alpha: float = 0.2,
    ) -> pg.LinearRegionItem:
        """Add a colored vertical band between two view x coordinates."""
        c = pg.mkColor(color)
        c.setAlphaF(alpha)
        region = pg.LinearRegionItem(
            values=[x_min, x_max],
            movable=False,
            brush=pg.mkBrush(c),
            pen=pg.mkPen(None),
        )
        region.setZValue(-10)
        self.plot_widget.addItem(region)
        self._regions.append(region)
        return region

    def add_infinite_line(
        self,
        pos: float,
        angle: int = 90,
        color: str = WARNING,
        style: Qt.PenStyle = Qt.PenStyle.DashLine,
        label: str = "",
    ) -> pg.InfiniteLine:
        """Add a vertical or horizontal infinite line at a view coordinate."""
        pen = pg.mkPen(color=color, width=1, style=style)
        line = pg.InfiniteLine(
            pos=pos, angle=angle, pen=pen,
            label=label or None,
            labelOpts={"color": TEXT_SECONDARY, "position": 0.95},
        )
        self.plot_widget.addItem(line)
        self._lines.append(line)
        return line

    def remove_item(self, item) -> None:
        """Remove a single region or line added earlier."""
        self.plot_widget.removeItem(item)
        for bucket in (self._curves, self._regions, self._lines):
            if item in bucket:
                bucket.remove(item)
