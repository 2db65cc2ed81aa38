from __future__ import annotations
from typing import Optional

from PySide6.QtCore import QPoint, Qt
from PySide6.QtGui import QColor, QMouseEvent, QPainter, QPaintEvent, QPen
from PySide6.QtWidgets import QWidget

from core.models.common import Point, Signature


class SignaturePad(QWidget):
    """Zone de signature : chaque déplacement bouton enfoncé ajoute un point."""

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setMinimumHeight(160)
        self.setAutoFillBackground(True)
        pal = self.palette()
        pal.setColor(self.backgroundRole(), QColor("white"))
        self.setPalette(pal)
        self._signature = Signature()

    def set_signature(self, signature: Signature) -> None:
        self._signature.replace(signature.to_list())
        self.update()

    def get_signature(self) -> Signature:
        return Signature.from_points(self._signature.to_list())

    def clear(self) -> None:
        self._signature.replace([])
        self.update()

    def mouseMoveEvent(self, e: QMouseEvent) -> None:
        if e.buttons() & Qt.MouseButton.LeftButton:
            pos = e.position().toPoint()
            self._signature.append(Point(pos.x(), pos.y()))
            self.update()

    def paintEvent(self, e: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setPen(QPen(QColor("black"), 2))
        for p in self._signature.to_list():
            painter.drawPoint(QPoint(p.x, p.y))
        painter.end()
