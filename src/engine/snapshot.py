"""
表示側に渡す読み取り専用のスナップショット
"""

from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class PieceSnapshot(_Frozen):
    id: str
    player: str
    rank: str
    is_king: bool
    is_alive: bool


class CellSnapshot(_Frozen):
    row: int
    col: int
    piece: Optional[PieceSnapshot] = None
    is_highlight: bool = False
    is_target: bool = False


class ProgressSnapshot(_Frozen):
    level: int
    xp: int
    xp_to_next: int
    mana: int
    max_mana: int


class LogEntrySnapshot(_Frozen):
    message: str
    type: str


class GameSnapshot(_Frozen):
    """ある時点のゲーム全体の状態"""
    board: Tuple[Tuple[CellSnapshot, ...], ...]
    current_player: str
    phase: str
    selected: Optional[Tuple[int, int]] = None
    active_ability: Optional[str] = None
    progress: Dict[str, ProgressSnapshot]
    winner: Optional[str] = None
    is_draw: bool = False
    log: Tuple[LogEntrySnapshot, ...] = ()

    def cell(self, row: int, col: int) -> CellSnapshot:
        return self.board[row][col]

    def piece_count(self, player: str) -> int:
        return sum(
            1 for row in self.board for cell in row
            if cell.piece is not None and cell.piece.player == player
        )
