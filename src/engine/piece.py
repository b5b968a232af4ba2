"""
駒とプレイヤーを定義するモジュール
"""

from enum import Enum, auto

from .config import BOARD_SIZE


class Player(Enum):
    """プレイヤーの定義"""
    RED = 0   # 先手（赤・下側）
    BLUE = 1  # 後手（青・上側）

    @property
    def opponent(self):
        """相手プレイヤーを返す"""
        return Player.BLUE if self == Player.RED else Player.RED

    @property
    def forward(self) -> int:
        """前進方向の行の増分（赤は上へ、青は下へ）"""
        return -1 if self == Player.RED else 1

    @property
    def back_rank(self) -> int:
        """成れる行（相手側の最終段）"""
        return 0 if self == Player.RED else BOARD_SIZE - 1


class PieceRank(Enum):
    """駒の階級"""
    SOLDIER = auto()  # 兵 - 前方斜めのみ
    KING = auto()     # 王 - 前後斜め


# 駒の表示記号
PIECE_SYMBOLS = {
    (Player.RED, PieceRank.SOLDIER): "r",
    (Player.RED, PieceRank.KING): "R",
    (Player.BLUE, PieceRank.SOLDIER): "b",
    (Player.BLUE, PieceRank.KING): "B",
}


class Piece:
    """盤上の駒を表すクラス"""

    def __init__(
        self,
        piece_id: str,
        owner: Player,
        rank: PieceRank = PieceRank.SOLDIER,
        is_alive: bool = True
    ):
        self.piece_id = piece_id
        self.owner = owner
        self.rank = rank
        self.is_alive = is_alive

    @staticmethod
    def create_soldier(owner: Player, row: int, col: int) -> 'Piece':
        """初期配置の兵を作成（IDは初期位置から決まる）"""
        prefix = 'r' if owner == Player.RED else 'b'
        return Piece(f"{prefix}-{row}-{col}", owner)

    @property
    def is_king(self) -> bool:
        return self.rank == PieceRank.KING

    def promote(self) -> bool:
        """
        王に成る
        返り値: 成った場合True、既に王ならFalse
        """
        if self.is_king:
            return False
        self.rank = PieceRank.KING
        return True

    def copy(self) -> 'Piece':
        return Piece(self.piece_id, self.owner, self.rank, self.is_alive)

    def __str__(self):
        return PIECE_SYMBOLS[(self.owner, self.rank)]

    def __repr__(self):
        return f"Piece({self.piece_id}, {self.owner.name}, {self.rank.name})"

    def to_dict(self) -> dict:
        """駒を辞書形式に変換（API用）"""
        return {
            "id": self.piece_id,
            "player": self.owner.name,
            "rank": self.rank.name,
            "is_alive": self.is_alive,
            "is_king": self.is_king,
        }
