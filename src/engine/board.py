"""
盤面を管理するモジュール
"""

from typing import Iterator, List, Optional, Tuple

from .config import BOARD_SIZE, HOME_ROWS
from .piece import Piece, Player

Position = Tuple[int, int]


def is_playable_square(row: int, col: int) -> bool:
    """駒が置かれる色のマスか確認（row + col が奇数）"""
    return (row + col) % 2 == 1


class Cell:
    """盤面の1マス"""

    def __init__(self, row: int, col: int, piece: Optional[Piece] = None):
        self.row = row
        self.col = col
        self.piece = piece
        self.is_highlight = False  # 移動先候補
        self.is_target = False     # 能力の対象

    @property
    def position(self) -> Position:
        return (self.row, self.col)

    def is_empty(self) -> bool:
        return self.piece is None

    def to_dict(self) -> dict:
        """マスを辞書形式に変換（API用）"""
        return {
            "row": self.row,
            "col": self.col,
            "piece": self.piece.to_dict() if self.piece else None,
            "is_highlight": self.is_highlight,
            "is_target": self.is_target,
        }


class Board:
    """8x8のゲームボードを表すクラス"""

    def __init__(self):
        # 空の盤面を作成（初期配置は initialize() で行う）
        self.cells: List[List[Cell]] = [
            [Cell(row, col) for col in range(BOARD_SIZE)]
            for row in range(BOARD_SIZE)
        ]

    @classmethod
    def create_initial(cls) -> 'Board':
        """初期配置済みの盤面を作成"""
        board = cls()
        board.initialize()
        return board

    def initialize(self):
        """
        初期配置に戻す
        青: 0-2行目、赤: 5-7行目、いずれも row + col が奇数のマスのみ
        """
        for cell in self.iter_cells():
            cell.piece = None
            cell.is_highlight = False
            cell.is_target = False
            if not is_playable_square(cell.row, cell.col):
                continue
            if cell.row < HOME_ROWS:
                cell.piece = Piece.create_soldier(Player.BLUE, cell.row, cell.col)
            elif cell.row >= BOARD_SIZE - HOME_ROWS:
                cell.piece = Piece.create_soldier(Player.RED, cell.row, cell.col)

    def is_in_bounds(self, row: int, col: int) -> bool:
        """座標が盤面内か確認"""
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    def is_valid_position(self, position: Position) -> bool:
        row, col = position
        return self.is_in_bounds(row, col)

    def get_cell(self, position: Position) -> Cell:
        """指定位置のマスを取得"""
        if not self.is_valid_position(position):
            raise ValueError(f"Invalid position: {position}")
        row, col = position
        return self.cells[row][col]

    def piece_at(self, position: Position) -> Optional[Piece]:
        """指定位置の駒を取得"""
        return self.get_cell(position).piece

    def set_piece_at(self, position: Position, piece: Optional[Piece]):
        """指定位置に駒を置く（Noneで取り除く）"""
        self.get_cell(position).piece = piece

    def is_occupied(self, position: Position) -> bool:
        return self.piece_at(position) is not None

    def iter_cells(self) -> Iterator[Cell]:
        """全マスを行優先で走査"""
        for row in self.cells:
            yield from row

    def clear_highlights(self):
        """移動先候補の表示をすべて消す"""
        for cell in self.iter_cells():
            cell.is_highlight = False

    def clear_targets(self):
        """能力対象の表示をすべて消す"""
        for cell in self.iter_cells():
            cell.is_target = False

    def count_pieces(self, player: Player) -> int:
        """指定プレイヤーの盤上の駒数"""
        return sum(
            1 for cell in self.iter_cells()
            if cell.piece is not None and cell.piece.owner == player
        )

    def copy(self) -> 'Board':
        """盤面のコピーを作成（駒も複製する）"""
        new_board = Board()
        for cell in self.iter_cells():
            new_cell = new_board.cells[cell.row][cell.col]
            new_cell.piece = cell.piece.copy() if cell.piece else None
            new_cell.is_highlight = cell.is_highlight
            new_cell.is_target = cell.is_target
        return new_board

    def __str__(self):
        """盤面の文字列表現を返す"""
        result = ["  " + " ".join(str(col) for col in range(BOARD_SIZE))]
        for row in range(BOARD_SIZE):
            row_str = f"{row} "
            symbols = []
            for cell in self.cells[row]:
                if cell.piece:
                    symbols.append(str(cell.piece))
                elif cell.is_highlight:
                    symbols.append("*")
                elif cell.is_target:
                    symbols.append("+")
                else:
                    symbols.append(".")
            result.append(row_str + " ".join(symbols))
        return "\n".join(result)

    def to_dict(self) -> dict:
        """盤面を辞書形式に変換（API用）"""
        return {
            "board": [[cell.to_dict() for cell in row] for row in self.cells],
            "piece_counts": {
                Player.RED.name: self.count_pieces(Player.RED),
                Player.BLUE.name: self.count_pieces(Player.BLUE),
            },
        }
