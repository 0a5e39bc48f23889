"""BoardView — QGraphicsView wrapper that orients the board per player."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QPainter, QResizeEvent
from PyQt6.QtWidgets import QGraphicsView, QSizePolicy, QWidget

from quadchess.game.config import GameConfig
from quadchess.ui.board.board_scene import BoardScene

# Degrees of clockwise view rotation that puts each player's home edge at the
# bottom of the screen.
PERSPECTIVE_ANGLES: dict[int, float] = {
    0: 270.0,  # west
    1: 0.0,  # south
    2: 90.0,  # east
    3: 180.0,  # north
}


class BoardView(QGraphicsView):
    """Displays the board scene, scaled to fit and rotated to a perspective.

    Signals:
        piece_picked(int): Bubbled up from BoardScene.
        cell_activated(int, int): Bubbled up from BoardScene.
    """

    piece_picked = pyqtSignal(int)
    cell_activated = pyqtSignal(int, int)

    def __init__(
        self,
        config: GameConfig | None = None,
        parent: QWidget | None = None,
    ) -> None:
        self._scene = BoardScene(config)
        super().__init__(self._scene, parent)
        self._perspective = 1

        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(420, 420)

        # Bubble scene signals
        self._scene.piece_picked.connect(self.piece_picked.emit)
        self._scene.cell_activated.connect(self.cell_activated.emit)

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    @property
    def perspective(self) -> int:
        """Player index the board is currently oriented towards."""
        return self._perspective

    def set_perspective(self, player: int) -> None:
        """Rotate the view so *player*'s edge faces the viewer."""
        self._perspective = player
        angle = PERSPECTIVE_ANGLES.get(player, 0.0)
        self.resetTransform()
        self.rotate(angle)
        self._scene.set_label_rotation(angle)
        self._fit()

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self._fit()

    def _fit(self) -> None:
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)
