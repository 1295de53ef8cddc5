from __future__ import annotations

import logging

from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QColor, QKeySequence, QPainter, QPen, QShortcut
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from . import config
from .config import PolygonStyle
from .controller import EditorController
from .errors import InvalidPointerError
from .geometry2d import Vec2
from .input_adapter import PointerInputAdapter
from .state import EditorStateSnapshot

logger = logging.getLogger(__name__)


def _qcolor(color: config.Color) -> QColor:
    if isinstance(color, tuple):
        return QColor(*color)
    return QColor(color)


class PolygonCanvas(QWidget):
    def __init__(self, controller: EditorController) -> None:
        super().__init__()
        self.setFixedSize(*config.CANVAS_SIZE)
        self.setMouseTracking(True)
        self.setContextMenuPolicy(Qt.ContextMenuPolicy.PreventContextMenu)
        self.setStyleSheet("background-color: white; border: 1px solid black;")

        self.controller = controller
        self.adapter = PointerInputAdapter()
        self._cursor: Vec2 | None = None
        self._snapshot: EditorStateSnapshot = controller.state
        self._style: PolygonStyle = controller.style
        controller.add_listener(self.on_state_changed)

    def on_state_changed(self, snapshot: EditorStateSnapshot, style: PolygonStyle) -> None:
        self._snapshot = snapshot
        self._style = style
        self.update()

    def _pos(self, event) -> tuple[float, float]:
        p = event.position()
        return (float(p.x()), float(p.y()))

    def _feed(self, events) -> None:
        self.controller.dispatch_all(events)

    def mousePressEvent(self, event) -> None:  # type: ignore[override]
        if event.button() != Qt.MouseButton.LeftButton:
            return
        try:
            self._feed(self.adapter.press(*self._pos(event)))
        except InvalidPointerError as exc:
            logger.warning("Dropped pointer press: %s", exc)

    def mouseMoveEvent(self, event) -> None:  # type: ignore[override]
        held = bool(event.buttons() & Qt.MouseButton.LeftButton)
        try:
            self._feed(self.adapter.move(*self._pos(event), buttons_down=held))
        except InvalidPointerError as exc:
            logger.warning("Dropped pointer move: %s", exc)
            return
        self._cursor = self._pos(event)
        self.update()

    def mouseReleaseEvent(self, event) -> None:  # type: ignore[override]
        if event.button() != Qt.MouseButton.LeftButton:
            return
        try:
            self._feed(self.adapter.release(*self._pos(event)))
        except InvalidPointerError as exc:
            logger.warning("Dropped pointer release: %s", exc)
            self._feed(self.adapter.cancel())

    def leaveEvent(self, event) -> None:  # type: ignore[override]
        self._cursor = None
        self.update()

    def paintEvent(self, event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        snapshot = self._snapshot
        style = self._style

        # committed polygons
        painter.setPen(QPen(_qcolor(style.stroke_color), style.line_width))
        painter.setBrush(_qcolor(style.fill_color))
        for poly in snapshot.committed_polygons:
            if len(poly) >= 2:
                painter.drawPolygon(*[QPointF(x, y) for x, y in poly])

        # active polyline
        if len(snapshot.active_polygon) >= 2:
            painter.setPen(QPen(_qcolor(config.ACTIVE_STROKE_COLOR), config.ACTIVE_LINE_WIDTH))
            painter.drawPolyline(*[QPointF(x, y) for x, y in snapshot.active_polygon])

        for poly in snapshot.committed_polygons:
            for p in poly:
                self._draw_vertex(painter, p, _qcolor(config.COMMITTED_VERTEX_COLOR))
        for p in snapshot.active_polygon:
            self._draw_vertex(painter, p, _qcolor(config.ACTIVE_VERTEX_COLOR))

        if self._cursor is not None:
            self._draw_vertex(painter, self._cursor, _qcolor(config.CURSOR_COLOR))

    def _draw_vertex(self, painter: QPainter, p: Vec2, color: QColor) -> None:
        r = config.VERTEX_MARKER_RADIUS
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(color)
        painter.drawEllipse(QPointF(p[0], p[1]), r, r)


class PolygonWindow(QWidget):
    """Window for drawing polygons with vertex snapping, dragging and undo/redo."""

    def __init__(self, controller: EditorController | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Polygon editor")

        self.controller = controller or EditorController()
        self.canvas = PolygonCanvas(self.controller)

        layout = QVBoxLayout()
        layout.addWidget(self.canvas)
        layout.addLayout(self._create_buttons())
        self.status = QLabel()
        layout.addWidget(self.status)
        self.setLayout(layout)

        QShortcut(QKeySequence.StandardKey.Undo, self).activated.connect(self.controller.undo)
        QShortcut(QKeySequence.StandardKey.Redo, self).activated.connect(self.controller.redo)

        self.controller.add_listener(self._update_status)
        self._update_status(self.controller.state, self.controller.style)

    def _create_buttons(self) -> QHBoxLayout:
        row = QHBoxLayout()
        for text, handler in (
            ("Undo", self.controller.undo),
            ("Redo", self.controller.redo),
            ("Clear", self.controller.clear),
        ):
            btn = QPushButton(text)
            btn.clicked.connect(lambda _checked=False, h=handler: h())
            row.addWidget(btn)
        row.addStretch()
        return row

    def _update_status(self, snapshot: EditorStateSnapshot, style: PolygonStyle) -> None:
        self.status.setText(
            f"Polygons: {len(snapshot.committed_polygons)}   "
            f"Active vertices: {len(snapshot.active_polygon)}   "
            f"History: {self.controller.history.index + 1 if len(self.controller.history) else 0}"
            f"/{len(self.controller.history)}"
        )
