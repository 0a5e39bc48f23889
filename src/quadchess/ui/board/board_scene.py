"""BoardScene — QGraphicsScene that draws the four-player board and pieces."""

from __future__ import annotations

import math
from collections.abc import Iterable

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from quadchess.core.piece import Piece
from quadchess.core.types import Cell, iter_cells
from quadchess.game.config import GameConfig
from quadchess.ui.board.piece_item import PieceItem
from quadchess.ui.styles.theme import BoardTheme


def quadrant_of(col: int, row: int, size: int) -> int:
    """Player index whose territory colour tints ``(col, row)``.

    The board is split along its diagonals around the centre: east is
    player 2, south player 1, north player 3 and west player 0.
    """
    cx = col - (size - 1) / 2
    cz = row - (size - 1) / 2
    angle = math.atan2(cz, cx)
    if -math.pi / 4 <= angle < math.pi / 4:
        return 2
    if math.pi / 4 <= angle < 3 * math.pi / 4:
        return 1
    if -3 * math.pi / 4 <= angle < -math.pi / 4:
        return 3
    return 0


class BoardScene(QGraphicsScene):
    """Renders tiles, coordinates, the selection highlight and piece tokens.

    Signals:
        piece_picked(int): A piece token was clicked; carries its piece id.
        cell_activated(int, int): A tile (not covered by a token) was clicked.
    """

    piece_picked = pyqtSignal(int)
    cell_activated = pyqtSignal(int, int)

    TILE = 48  # px per cell

    def __init__(
        self,
        config: GameConfig | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._config = config or GameConfig.default()
        self._size = self._config.board_size
        self._theme = BoardTheme.for_config(self._config)

        self._show_coordinates = True
        self._label_angle = 0.0

        # Visual layers
        self._tile_items: dict[Cell, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._piece_items: dict[int, PieceItem] = {}
        self._selection_item: QGraphicsRectItem | None = None

        self.setBackgroundBrush(QBrush(self._theme.background))
        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def board_size(self) -> int:
        return self._size

    def set_pieces(self, pieces: Iterable[Piece]) -> None:
        """Re-create every token from *pieces* (full redraw)."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()
        self.set_selected(None)

        for piece in pieces:
            if piece.cell is None:
                continue
            item = PieceItem(
                piece,
                self.TILE,
                self._theme.piece_fill[piece.player],
                self._theme.piece_outline,
                self._theme.piece_text,
            )
            item.set_label_rotation(self._label_angle)
            self._place_item(item, piece.cell)
            self.addItem(item)
            self._piece_items[piece.piece_id] = item

    def move_piece(self, piece_id: int, cell: Cell) -> None:
        """Slide the token for *piece_id* onto *cell*."""
        item = self._piece_items.get(piece_id)
        if item is not None:
            self._place_item(item, cell)

    def remove_piece(self, piece_id: int) -> None:
        """Drop the token for a captured piece."""
        item = self._piece_items.pop(piece_id, None)
        if item is not None:
            self.removeItem(item)

    def piece_item(self, piece_id: int) -> PieceItem | None:
        return self._piece_items.get(piece_id)

    def piece_ids(self) -> set[int]:
        return set(self._piece_items)

    def set_selected(self, cell: Cell | None) -> None:
        """Highlight *cell* as the selected piece's origin, or clear it."""
        if self._selection_item is not None:
            self.removeItem(self._selection_item)
            self._selection_item = None
        if cell is None:
            return
        t = self.TILE
        rect = QGraphicsRectItem(cell.col * t, cell.row * t, t, t)
        rect.setBrush(QBrush(self._theme.highlight_selected))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        self._selection_item = rect

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide the column/row index labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_label_rotation(self, angle: float) -> None:
        """Keep text upright when the view is rotated by *angle* degrees."""
        self._label_angle = angle
        for item in self._piece_items.values():
            item.set_label_rotation(angle)
        for label in self._coord_items:
            label.setRotation(-angle)

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        t = self.TILE
        n = self._size
        font = QFont("Adwaita Sans", max(7, t // 6))

        for cell in iter_cells(n):
            quadrant = quadrant_of(cell.col, cell.row, n)
            is_base = (cell.col + cell.row) % 2 == 0
            color = (
                self._theme.quadrant_base[quadrant]
                if is_base
                else self._theme.quadrant_alt[quadrant]
            )
            rect = QGraphicsRectItem(cell.col * t + 0.5, cell.row * t + 0.5, t - 1, t - 1)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._tile_items[cell] = rect

            # Row numbers on the west edge, column numbers on the north edge
            labels = []
            if cell.col == 0:
                labels.append(str(cell.row))
            if cell.row == 0 and cell.col != 0:
                labels.append(str(cell.col))
            for text in labels:
                txt = QGraphicsSimpleTextItem(text)
                txt.setFont(font)
                txt.setBrush(QBrush(self._theme.coord_text))
                txt.setPos(cell.col * t + 2, cell.row * t + 1)
                txt.setTransformOriginPoint(txt.boundingRect().center())
                txt.setZValue(0.3)
                txt.setVisible(self._show_coordinates)
                self.addItem(txt)
                self._coord_items.append(txt)

        self.setSceneRect(0, 0, n * t, n * t)

    def _place_item(self, item: PieceItem, cell: Cell) -> None:
        t = self.TILE
        item.setPos(cell.col * t + item.margin, cell.row * t + item.margin)

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return super().mousePressEvent(event)
        if event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)
        self.handle_press(event.scenePos())
        event.accept()

    def handle_press(self, pos: QPointF) -> None:
        """Translate a click at *pos* into a piece pick or a cell activation."""
        token = self._token_at(pos)
        if token is not None:
            self.piece_picked.emit(token.piece_id)
            return
        cell = self.cell_at(pos)
        if cell is not None:
            self.cell_activated.emit(cell.col, cell.row)

    def _token_at(self, pos: QPointF) -> PieceItem | None:
        for item in self.items(pos):
            owner: QGraphicsItem | None = item
            while owner is not None and not isinstance(owner, PieceItem):
                owner = owner.parentItem()
            if isinstance(owner, PieceItem):
                return owner
        return None

    # ── Coordinate helpers ───────────────────────────────────────────────

    def cell_at(self, pos: QPointF) -> Cell | None:
        """Scene position → board cell."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < self._size and 0 <= row < self._size):
            return None
        return Cell(col, row)

    def cell_center(self, cell: Cell) -> QPointF:
        t = self.TILE
        return QPointF(cell.col * t + t / 2, cell.row * t + t / 2)
