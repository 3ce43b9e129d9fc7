"""Collapsible section widget — titled bullet list that can be folded away.

Used by the educational panel for a region's applications and examples.
"""

from PyQt6.QtWidgets import QFrame, QLabel, QPushButton, QVBoxLayout, QWidget

_EXPANDED = "▼"
_COLLAPSED = "▶"


class CollapsibleSection(QWidget):
    """A clickable header that shows/hides a bullet list."""

    def __init__(self, title: str, parent: QWidget | None = None):
        super().__init__(parent)
        self._title = title
        self._expanded = True

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self._header = QPushButton()
        self._header.setProperty("cssClass", "section-header")
        self._header.clicked.connect(self.toggle)
        layout.addWidget(self._header)

        self._content_frame = QFrame()
        self._content_frame.setProperty("cssClass", "prop-frame")
        self._content_layout = QVBoxLayout(self._content_frame)
        self._content_layout.setContentsMargins(8, 4, 8, 4)
        self._content_layout.setSpacing(2)
        layout.addWidget(self._content_frame)

        self._refresh_header()

    @property
    def is_expanded(self) -> bool:
        return self._expanded

    def set_items(self, items: list[str]) -> None:
        """Replace the listed lines."""
        while self._content_layout.count():
            item = self._content_layout.takeAt(0)
            if item.widget():
                item.widget().deleteLater()
        for text in items:
            label = QLabel(f"• {text}")
            label.setWordWrap(True)
            self._content_layout.addWidget(label)
        self._refresh_header(len(items))

    def toggle(self) -> None:
        self._expanded = not self._expanded
        self._content_frame.setVisible(self._expanded)
        self._refresh_header()

    def _refresh_header(self, count: int | None = None) -> None:
        if count is None:
            count = self._content_layout.count()
        arrow = _EXPANDED if self._expanded else _COLLAPSED
        self._header.setText(f"  {arrow}  {self._title} ({count})")
