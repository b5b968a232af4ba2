"""
能力（ダッシュ・スマイト）の対象判定と効果
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from loguru import logger

from .board import Board, Position
from .config import RuleSettings, BOARD_SIZE
from .game_log import LogCategory
from .piece import Piece, Player
from .progression import ProgressionTracker


class AbilityType(Enum):
    """能力の種類"""
    DASH = "dash"    # 自分の駒を前方へ移動
    SMITE = "smite"  # 敵の駒を消し去る

    def cost(self, rules: RuleSettings) -> int:
        """能力のマナコスト"""
        if self == AbilityType.DASH:
            return rules.dash_cost
        return rules.smite_cost


@dataclass
class AbilityResult:
    """能力を実行した結果"""
    consumed: bool                     # マナを消費したか（手番が終わるか）
    success: bool = False              # 効果が発生したか
    destination: Optional[Position] = None
    removed: Optional[Piece] = None


class Abilities:
    """能力の対象判定と実行を行うクラス"""

    @staticmethod
    def is_valid_target(board: Board, ability: AbilityType, player: Player, position: Position) -> bool:
        """
        対象にできるマスか確認
        ダッシュ: 自分の駒 / スマイト: 敵の駒
        """
        if not board.is_valid_position(position):
            return False
        piece = board.piece_at(position)
        if piece is None:
            return False
        if ability == AbilityType.DASH:
            return piece.owner == player
        return piece.owner != player

    @staticmethod
    def get_targets(board: Board, ability: AbilityType, player: Player) -> List[Position]:
        """対象にできる全マスを取得"""
        return [
            cell.position for cell in board.iter_cells()
            if Abilities.is_valid_target(board, ability, player, cell.position)
        ]

    @staticmethod
    def highlight_targets(board: Board, ability: AbilityType, player: Player) -> List[Position]:
        """移動先の印を消し、対象マスに印を付ける"""
        board.clear_highlights()
        board.clear_targets()
        targets = Abilities.get_targets(board, ability, player)
        for position in targets:
            board.get_cell(position).is_target = True
        return targets

    @staticmethod
    def execute(
        board: Board,
        ability: AbilityType,
        target: Position,
        player: Player,
        tracker: ProgressionTracker
    ) -> AbilityResult:
        """
        能力を実行する
        マナが足りない、または対象が不正な場合は何もしない（consumed=False）
        """
        if not Abilities.is_valid_target(board, ability, player, target):
            return AbilityResult(consumed=False)
        if not tracker.spend_mana(player, ability.cost(tracker.rules)):
            return AbilityResult(consumed=False)

        if ability == AbilityType.SMITE:
            return Abilities._smite(board, target, player, tracker)
        return Abilities._dash(board, target, player, tracker)

    @staticmethod
    def get_dash_destination(board: Board, position: Position, player: Player) -> Optional[Position]:
        """
        ダッシュの着地点を求める（同じ列で前方へ）

        2マス先（盤端で切り詰め）が埋まっていれば1マス先を試す。
        どちらも使えなければNone。
        """
        row, col = position
        target_row = row + player.forward * 2
        target_row = max(0, min(BOARD_SIZE - 1, target_row))

        if board.is_occupied((target_row, col)):
            target_row = row + player.forward

        if board.is_in_bounds(target_row, col) and not board.is_occupied((target_row, col)):
            return (target_row, col)
        return None

    @staticmethod
    def _dash(board: Board, target: Position, player: Player, tracker: ProgressionTracker) -> AbilityResult:
        destination = Abilities.get_dash_destination(board, target, player)
        if destination is None:
            tracker.log.add("Dash failed! Path blocked. Mana consumed.", LogCategory.MAGIC)
            logger.debug("{} dash from {} blocked", player.name, target)
            return AbilityResult(consumed=True)

        piece = board.piece_at(target)
        board.set_piece_at(destination, piece)
        board.set_piece_at(target, None)
        tracker.log.add(f"{player.name} used Dash! Unit surged forward.", LogCategory.MAGIC)
        return AbilityResult(consumed=True, success=True, destination=destination)

    @staticmethod
    def _smite(board: Board, target: Position, player: Player, tracker: ProgressionTracker) -> AbilityResult:
        removed = board.piece_at(target)
        board.set_piece_at(target, None)
        removed.is_alive = False
        tracker.log.add(f"{player.name} used Smite! Enemy obliterated.", LogCategory.MAGIC)
        tracker.grant_experience(player, tracker.rules.smite_xp)
        return AbilityResult(consumed=True, success=True, removed=removed)
