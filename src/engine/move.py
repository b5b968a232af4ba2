"""
手（Move）を表現するモジュール
"""

from enum import Enum, auto
from typing import Tuple, Optional

from .piece import Player


class MoveType(Enum):
    """手の種類"""
    SIMPLE = auto()  # 斜め1マスの移動
    JUMP = auto()    # 斜め2マス、間の敵駒を取る


class Move:
    """一手を表すクラス"""

    def __init__(
        self,
        move_type: MoveType,
        from_pos: Tuple[int, int],
        to_pos: Tuple[int, int],
        player: Optional[Player] = None,
        captured_pos: Optional[Tuple[int, int]] = None
    ):
        self.move_type = move_type
        self.from_pos = from_pos
        self.to_pos = to_pos
        self.player = player
        if move_type == MoveType.JUMP and captured_pos is None:
            # 取る駒は中間地点
            captured_pos = ((from_pos[0] + to_pos[0]) // 2, (from_pos[1] + to_pos[1]) // 2)
        self.captured_pos = captured_pos  # JUMPのときのみ

    @property
    def is_jump(self) -> bool:
        return self.move_type == MoveType.JUMP

    def __eq__(self, other):
        if not isinstance(other, Move):
            return NotImplemented
        return (
            self.move_type == other.move_type
            and self.from_pos == other.from_pos
            and self.to_pos == other.to_pos
            and self.captured_pos == other.captured_pos
        )

    def __hash__(self):
        return hash((self.move_type, self.from_pos, self.to_pos, self.captured_pos))

    def __str__(self):
        player = self.player.name if self.player else "?"
        return f"{player} {self.from_pos} -> {self.to_pos} ({self.move_type.name})"

    def __repr__(self):
        return (
            f"Move(type={self.move_type.name}, "
            f"from={self.from_pos}, to={self.to_pos}, "
            f"captured={self.captured_pos}, "
            f"player={self.player.name if self.player else None})"
        )

    def to_dict(self) -> dict:
        """手を辞書形式に変換（API用）"""
        return {
            "type": self.move_type.name,
            "from": self.from_pos,
            "to": self.to_pos,
            "captured": self.captured_pos,
            "player": self.player.name if self.player else None
        }

    @staticmethod
    def from_dict(data: dict) -> 'Move':
        """辞書形式から手を復元（API用）"""
        captured = tuple(data["captured"]) if data.get("captured") else None
        player = Player[data["player"]] if data.get("player") else None
        return Move(
            move_type=MoveType[data["type"]],
            from_pos=tuple(data["from"]),
            to_pos=tuple(data["to"]),
            player=player,
            captured_pos=captured
        )

    @staticmethod
    def create_simple_move(
        from_pos: Tuple[int, int],
        to_pos: Tuple[int, int],
        player: Optional[Player] = None
    ) -> 'Move':
        """通常の移動手を作成"""
        return Move(MoveType.SIMPLE, from_pos, to_pos, player)

    @staticmethod
    def create_jump_move(
        from_pos: Tuple[int, int],
        to_pos: Tuple[int, int],
        player: Optional[Player] = None
    ) -> 'Move':
        """駒を飛び越えて取る手を作成"""
        return Move(MoveType.JUMP, from_pos, to_pos, player)

    @staticmethod
    def between(
        from_pos: Tuple[int, int],
        to_pos: Tuple[int, int],
        player: Optional[Player] = None
    ) -> 'Move':
        """
        座標だけから手を作成
        行の差が1より大きければJUMPとみなす（単発ジャンプしか生成されないため十分）
        """
        if abs(to_pos[0] - from_pos[0]) > 1:
            return Move.create_jump_move(from_pos, to_pos, player)
        return Move.create_simple_move(from_pos, to_pos, player)
