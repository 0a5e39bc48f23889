"""Internationalisation strings for the Quadchess UI.

Usage::

    from quadchess.ui.i18n import t, set_language

    set_language("Portuguese")
    print(t().btn_reset)                      # "Resetar tabuleiro"
    print(t().log_moved.format(player="Red", piece="peão", cell="1,4"))
"""

from __future__ import annotations

from dataclasses import dataclass

from quadchess.core.enums import PieceType


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    app_title: str
    menu_game: str
    menu_reset: str
    menu_skip_turn: str
    menu_quit: str
    menu_view: str
    menu_follow_player: str
    menu_show_coords: str
    menu_language: str

    status_turn: str  # "Turn: {player}"
    status_selected: str  # "{piece} ({player}) selected"

    # ── Move log ─────────────────────────────────────────────────────────
    log_header: str
    current_player: str  # "Current player: {player}"
    log_selected: str  # "Selected: {piece} ({player})"
    log_moved: str  # "{player} moved {piece} to {cell}"
    log_captured: str  # "{player} lost a {piece}"
    log_rejected_own: str
    log_turn_skipped: str
    log_board_reset: str

    # ── ControlPanel ─────────────────────────────────────────────────────
    btn_skip_turn: str
    btn_reset: str

    # ── Default seat names (player index order) ──────────────────────────
    player_names: tuple[str, ...]

    # ── Piece names (PieceType order) ────────────────────────────────────
    piece_names: tuple[str, ...]

    def piece_name(self, piece_type: PieceType) -> str:
        return self.piece_names[list(PieceType).index(piece_type)]


_EN = Strings(
    app_title="Quadchess",
    menu_game="&Game",
    menu_reset="&Reset board",
    menu_skip_turn="&Next turn",
    menu_quit="&Quit",
    menu_view="&View",
    menu_follow_player="&Follow active player",
    menu_show_coords="Show &coordinates",
    menu_language="&Language",
    status_turn="Turn: {player}",
    status_selected="{piece} ({player}) selected",
    log_header="Moves",
    current_player="Current player: {player}",
    log_selected="Selected: {piece} ({player})",
    log_moved="{player} moved {piece} to {cell}",
    log_captured="{player} lost a {piece}",
    log_rejected_own="Invalid move: own occupation",
    log_turn_skipped="Turn passed manually.",
    log_board_reset="Board reset",
    btn_skip_turn="Next turn",
    btn_reset="Reset board",
    player_names=("Red", "Green", "Blue", "Yellow"),
    piece_names=("king", "general", "elephant", "horse", "chariot", "pawn"),
)

_PT = Strings(
    app_title="Quadchess",
    menu_game="&Jogo",
    menu_reset="&Resetar tabuleiro",
    menu_skip_turn="&Próxima vez",
    menu_quit="&Sair",
    menu_view="&Exibir",
    menu_follow_player="&Seguir jogador da vez",
    menu_show_coords="Mostrar &coordenadas",
    menu_language="&Idioma",
    status_turn="Vez: {player}",
    status_selected="{piece} ({player}) selecionado",
    log_header="Jogadas",
    current_player="Jogador atual: {player}",
    log_selected="Selecionado: {piece} ({player})",
    log_moved="{player} moveu {piece} para {cell}",
    log_captured="{player} perdeu {piece}",
    log_rejected_own="Movimento inválido: ocupação própria",
    log_turn_skipped="Vez trocada manualmente.",
    log_board_reset="Tabuleiro resetado",
    btn_skip_turn="Trocar vez",
    btn_reset="Resetar tabuleiro",
    player_names=("Vermelho", "Verde", "Azul", "Amarelo"),
    piece_names=("rei", "general", "elefante", "cavalo", "carruagem", "peão"),
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Portuguese": _PT,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
