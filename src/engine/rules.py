"""
駒の移動ルール判定を行うモジュール
"""

from dataclasses import dataclass
from typing import List, Tuple, Optional

from loguru import logger

from .board import Board, Position
from .game_log import LogCategory
from .move import Move, MoveType
from .piece import Piece, Player
from .progression import ProgressionTracker

# 斜め移動の列方向
COLUMN_DIRECTIONS = (-1, 1)


@dataclass
class MoveResult:
    """手を適用した結果"""
    success: bool
    captured: Optional[Piece] = None
    promoted: bool = False


class Rules:
    """移動・取得・成り・勝敗のルールを管理するクラス"""

    @staticmethod
    def get_row_directions(piece: Piece) -> List[int]:
        """
        駒が進める行方向
        兵は前方のみ、王は前後両方
        """
        if piece.is_king:
            return [-1, 1]
        return [piece.owner.forward]

    @staticmethod
    def get_valid_moves(board: Board, from_pos: Position) -> List[Move]:
        """
        指定位置の駒の合法手を取得

        - 隣の斜めマスが空なら SIMPLE
        - 隣の斜めマスに敵駒があり、その先が空なら JUMP
        取れる手があっても取る義務はない（両方同じ優先度で返す）
        """
        if not board.is_valid_position(from_pos):
            return []
        piece = board.piece_at(from_pos)
        if piece is None:
            return []

        row, col = from_pos
        moves = []

        for d_row in Rules.get_row_directions(piece):
            for d_col in COLUMN_DIRECTIONS:
                next_r, next_c = row + d_row, col + d_col
                if not board.is_in_bounds(next_r, next_c):
                    continue

                neighbor = board.piece_at((next_r, next_c))
                if neighbor is None:
                    moves.append(Move.create_simple_move(from_pos, (next_r, next_c), piece.owner))
                elif neighbor.owner != piece.owner:
                    jump_r, jump_c = next_r + d_row, next_c + d_col
                    if board.is_in_bounds(jump_r, jump_c) and not board.is_occupied((jump_r, jump_c)):
                        moves.append(Move.create_jump_move(from_pos, (jump_r, jump_c), piece.owner))

        return moves

    @staticmethod
    def get_legal_moves(board: Board, player: Player) -> List[Move]:
        """指定プレイヤーの合法手をすべて取得"""
        legal_moves = []
        for cell in board.iter_cells():
            if cell.piece and cell.piece.owner == player:
                legal_moves.extend(Rules.get_valid_moves(board, cell.position))
        return legal_moves

    @staticmethod
    def highlight_moves(board: Board, moves: List[Move]):
        """移動先候補のマスに印を付ける（以前の印は消す）"""
        board.clear_highlights()
        for move in moves:
            board.get_cell(move.to_pos).is_highlight = True

    @staticmethod
    def apply_move(board: Board, move: Move, tracker: Optional[ProgressionTracker] = None) -> MoveResult:
        """
        盤面に手を適用する

        JUMPなら中間の駒を取り、経験値を与える。
        移動後は必ず成りを判定する（取らない手でも）。
        tracker が None の場合は盤面だけを変更する。
        """
        if not (board.is_valid_position(move.from_pos) and board.is_valid_position(move.to_pos)):
            return MoveResult(success=False)

        piece = board.piece_at(move.from_pos)
        if piece is None or board.is_occupied(move.to_pos):
            return MoveResult(success=False)

        player = piece.owner
        board.set_piece_at(move.to_pos, piece)
        board.set_piece_at(move.from_pos, None)

        result = MoveResult(success=True)

        if move.move_type == MoveType.JUMP:
            captured = board.piece_at(move.captured_pos)
            board.set_piece_at(move.captured_pos, None)
            if captured is not None:
                captured.is_alive = False
            result.captured = captured
            logger.debug("{} captured {} at {}", player.name, captured, move.captured_pos)
            if tracker:
                tracker.log.add(f"{player.name} crushed an enemy!", LogCategory.COMBAT)
                tracker.grant_experience(player, tracker.rules.capture_xp)

        if move.to_pos[0] == player.back_rank and piece.promote():
            result.promoted = True
            if tracker:
                tracker.log.add(f"{player.name} promoted a piece to King!", LogCategory.LEVEL)
                tracker.grant_experience(player, tracker.rules.promotion_xp)

        return result

    @staticmethod
    def is_game_over(board: Board) -> Tuple[bool, Optional[Player]]:
        """
        ゲームが終了したか確認
        返り値: (終了フラグ, 勝者)
        両者とも駒が0なら (True, None) = 引き分け
        """
        red_alive = board.count_pieces(Player.RED) > 0
        blue_alive = board.count_pieces(Player.BLUE) > 0

        if red_alive and blue_alive:
            return False, None
        if not red_alive and not blue_alive:
            return True, None
        return True, Player.RED if red_alive else Player.BLUE
