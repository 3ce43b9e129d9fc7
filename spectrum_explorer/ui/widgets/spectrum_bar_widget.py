"""Spectrum bar widget — clickable bar of spectral regions with indicator.

Regions are drawn left to right in ascending wavelength with the widths
given by the controller's SpectrumBarLayout.  Clicking selects the
wavelength under the cursor; arrow keys, Home and End step the selection
(Shift for large steps).
"""

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QColor, QFont, QKeyEvent, QMouseEvent, QPainter, QPainterPath, QPen
from PyQt6.QtWidgets import QSizePolicy, QToolTip, QWidget

from spectrum_explorer.constants import (
    INDICATOR_DOT_SIZE,
    INDICATOR_WIDTH,
    SPECTRUM_BAR_BORDER_RADIUS,
    SPECTRUM_BAR_BORDER_WIDTH,
    SPECTRUM_BAR_HEIGHT,
)
from spectrum_explorer.core.photon import format_wavelength
from spectrum_explorer.core.spectrum_bar import NavKey
from spectrum_explorer.ui.selection_controller import SelectionController
from spectrum_explorer.ui.styles.colors import (
    BORDER,
    INDICATOR,
    INDICATOR_GLOW,
    TEXT_PRIMARY,
)

# Keyed by int key code, as returned by QKeyEvent.key()
_KEY_MAP: dict[int, NavKey] = {
    Qt.Key.Key_Left.value: NavKey.LEFT,
    Qt.Key.Key_Down.value: NavKey.DOWN,
    Qt.Key.Key_Right.value: NavKey.RIGHT,
    Qt.Key.Key_Up.value: NavKey.UP,
    Qt.Key.Key_Home.value: NavKey.HOME,
    Qt.Key.Key_End.value: NavKey.END,
}

# drawText takes a plain int when alignment and text flags are mixed
_LABEL_FLAGS = Qt.AlignmentFlag.AlignCenter.value | Qt.TextFlag.TextWordWrap.value

# Vertical room above the bar for the indicator dot
_TOP_MARGIN = INDICATOR_DOT_SIZE


class SpectrumBarWidget(QWidget):
    """Interactive electromagnetic spectrum bar."""

    def __init__(self, controller: SelectionController, parent: QWidget | None = None):
        super().__init__(parent)
        self._controller = controller
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setMouseTracking(True)
        self.setMinimumHeight(SPECTRUM_BAR_HEIGHT + _TOP_MARGIN + 4)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.setAccessibleName("Electromagnetic spectrum wavelength selector")

        controller.wavelength_changed.connect(self._on_wavelength_changed)
        self._update_accessible_description()

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def _bar_rect(self) -> QRectF:
        inset = SPECTRUM_BAR_BORDER_WIDTH / 2
        return QRectF(
            inset,
            _TOP_MARGIN,
            max(1.0, self.width() - 2 * inset),
            SPECTRUM_BAR_HEIGHT,
        )

    def position_for_x(self, x: float) -> float:
        """Widget x coordinate → bar position [0–1]."""
        rect = self._bar_rect()
        return min(1.0, max(0.0, (x - rect.left()) / rect.width()))

    def x_for_position(self, position: float) -> float:
        """Bar position [0–1] → widget x coordinate."""
        rect = self._bar_rect()
        return rect.left() + position * rect.width()

    # ------------------------------------------------------------------
    # Painting
    # ------------------------------------------------------------------

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        rect = self._bar_rect()

        clip = QPainterPath()
        clip.addRoundedRect(rect, SPECTRUM_BAR_BORDER_RADIUS, SPECTRUM_BAR_BORDER_RADIUS)
        painter.save()
        painter.setClipPath(clip)

        label_font = QFont(self.font())
        label_font.setPointSizeF(max(6.0, label_font.pointSizeF() - 1))
        painter.setFont(label_font)
        for segment in self._controller.bar_layout.segments:
            seg_rect = QRectF(
                rect.left() + segment.start * rect.width(),
                rect.top(),
                segment.width * rect.width(),
                rect.height(),
            )
            painter.fillRect(seg_rect, QColor(segment.region.color))
            painter.setPen(QColor("#0F172A"))
            painter.drawText(
                seg_rect,
                _LABEL_FLAGS,
                segment.region.name,
            )
        painter.restore()

        painter.setPen(QPen(QColor(BORDER), SPECTRUM_BAR_BORDER_WIDTH))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawRoundedRect(rect, SPECTRUM_BAR_BORDER_RADIUS, SPECTRUM_BAR_BORDER_RADIUS)

        self._paint_indicator(painter, rect)
        painter.end()

    def _paint_indicator(self, painter: QPainter, rect: QRectF) -> None:
        position = self._controller.bar_layout.position_of(self._controller.wavelength)
        if position is None:
            return
        x = self.x_for_position(position)

        glow = QColor(INDICATOR_GLOW)
        glow.setAlphaF(0.6)
        painter.setPen(QPen(glow, INDICATOR_WIDTH + 2))
        painter.drawLine(QPointF(x, rect.top()), QPointF(x, rect.bottom()))
        painter.setPen(QPen(QColor(INDICATOR), INDICATOR_WIDTH))
        painter.drawLine(QPointF(x, rect.top()), QPointF(x, rect.bottom()))

        radius = INDICATOR_DOT_SIZE / 2
        painter.setPen(QPen(QColor(TEXT_PRIMARY), 1))
        painter.setBrush(QColor(INDICATOR_GLOW))
        painter.drawEllipse(QPointF(x, rect.top() - radius), radius, radius)

    # ------------------------------------------------------------------
    # Interaction
    # ------------------------------------------------------------------

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self.setFocus()
            self._controller.set_bar_position(self.position_for_x(event.position().x()))
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        position = self.position_for_x(event.position().x())
        wavelength = self._controller.bar_layout.wavelength_at(position)
        region = self._controller.catalog.classify_by_wavelength(wavelength)
        name = region.name if region is not None else "Unknown region"
        QToolTip.showText(
            event.globalPosition().toPoint(),
            f"{format_wavelength(wavelength)} — {name}",
            self,
        )
        super().mouseMoveEvent(event)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        nav = _KEY_MAP.get(event.key())
        if nav is None:
            super().keyPressEvent(event)
            return
        large = bool(event.modifiers() & Qt.KeyboardModifier.ShiftModifier)
        self._controller.step(nav, large=large)
        event.accept()

    # ------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------

    def _on_wavelength_changed(self, _wavelength: float) -> None:
        self._update_accessible_description()
        self.update()

    def _update_accessible_description(self) -> None:
        state = self._controller.state
        self.setAccessibleDescription(
            f"{format_wavelength(state.wavelength)}, {state.region_name}"
        )
