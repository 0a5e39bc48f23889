"""PieceItem — a round token standing for one piece on the board scene."""

from __future__ import annotations

from PyQt6.QtCore import QRectF, Qt
from PyQt6.QtGui import QBrush, QColor, QCursor, QFont, QPen
from PyQt6.QtWidgets import QGraphicsEllipseItem, QGraphicsSimpleTextItem

from quadchess.core.piece import Piece


class PieceItem(QGraphicsEllipseItem):
    """Visual handle for a piece, keyed by ``piece_id``.

    The item keeps no game state beyond the id it was created for; the
    scene owns the ``piece_id → item`` mapping.
    """

    _DIAMETER_RATIO = 0.6

    def __init__(
        self,
        piece: Piece,
        tile_size: int,
        fill: QColor,
        outline: QColor,
        text: QColor,
    ) -> None:
        super().__init__()
        self.piece_id = piece.piece_id
        self._tile_size = tile_size

        self.setBrush(QBrush(fill))
        self.setPen(QPen(outline, 2))
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)

        self._label = QGraphicsSimpleTextItem(piece.letter, self)
        self._label.setBrush(QBrush(text))
        self._label.setFont(QFont("Adwaita Sans", max(8, tile_size // 4), QFont.Weight.Bold))
        self._update_size(tile_size)

    @property
    def diameter(self) -> float:
        return self._tile_size * self._DIAMETER_RATIO

    @property
    def margin(self) -> float:
        """Offset from the tile corner that centres the token."""
        return (self._tile_size - self.diameter) / 2

    def set_label_rotation(self, angle: float) -> None:
        """Counter-rotate the letter so it reads upright in a rotated view."""
        self._label.setRotation(-angle)

    def _update_size(self, size: int) -> None:
        self._tile_size = size
        d = self.diameter
        self.setRect(QRectF(0.0, 0.0, d, d))
        bounds = self._label.boundingRect()
        self._label.setPos((d - bounds.width()) / 2, (d - bounds.height()) / 2)
        self._label.setTransformOriginPoint(bounds.center())
