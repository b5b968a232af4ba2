"""
単体テスト: 駒とプレイヤーのテスト
"""

from src.engine import Piece, Player, PieceRank


class TestPlayer:
    """プレイヤーのテストクラス"""

    def test_opponent(self):
        assert Player.RED.opponent == Player.BLUE
        assert Player.BLUE.opponent == Player.RED

    def test_forward_direction(self):
        """赤は行番号が減る方向、青は増える方向へ進む"""
        assert Player.RED.forward == -1
        assert Player.BLUE.forward == 1

    def test_back_rank(self):
        assert Player.RED.back_rank == 0
        assert Player.BLUE.back_rank == 7


class TestPiece:
    """駒のテストクラス"""

    def test_create_soldier(self):
        piece = Piece.create_soldier(Player.BLUE, 2, 3)
        assert piece.piece_id == "b-2-3"
        assert piece.owner == Player.BLUE
        assert piece.rank == PieceRank.SOLDIER
        assert piece.is_alive

    def test_promote_once(self):
        """成りは一度だけ（2回目は何も起きない）"""
        piece = Piece.create_soldier(Player.RED, 5, 0)

        assert piece.promote(), "最初の成りが失敗しました"
        assert piece.is_king
        assert not piece.promote(), "王が再度成れてしまいます"
        assert piece.rank == PieceRank.KING

    def test_str(self):
        assert str(Piece("a", Player.RED)) == "r"
        assert str(Piece("b", Player.BLUE, PieceRank.KING)) == "B"

    def test_copy_keeps_identity_fields(self):
        piece = Piece("r-5-0", Player.RED, PieceRank.KING)
        copied = piece.copy()
        assert copied is not piece
        assert copied.piece_id == "r-5-0"
        assert copied.is_king
