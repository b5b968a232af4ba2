"""
手番の進行を管理するモジュール（エンジンの公開窓口）

表示側は select_or_act / activate_ability / cancel_ability / reset_game で
操作を送り、snapshot() で最新状態を受け取る。
不正な操作はすべて無視する（例外は投げない）。
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Union

from loguru import logger

from .abilities import Abilities, AbilityType
from .board import Board, Position
from .config import RuleSettings, DEFAULT_RULES
from .game_log import GameLog, LogCategory
from .move import Move
from .piece import Player
from .progression import ProgressionTracker, PlayerProgress
from .rules import Rules
from .snapshot import (
    CellSnapshot, GameSnapshot, LogEntrySnapshot, PieceSnapshot, ProgressSnapshot
)

GAME_STARTED_MESSAGE = "Game Started! Red moves first."


class GamePhase(Enum):
    """手番の状態"""
    IDLE_SELECTION = "idle_selection"        # 何も選んでいない
    PIECE_SELECTED = "piece_selected"        # 移動先の選択待ち
    ABILITY_TARGETING = "ability_targeting"  # 能力の対象選択待ち
    GAME_OVER = "game_over"


@dataclass
class TurnState:
    """ゲーム中に変化する唯一の状態"""
    current_player: Player = Player.RED
    selected: Optional[Position] = None
    active_ability: Optional[AbilityType] = None
    winner: Optional[Player] = None
    is_draw: bool = False

    @property
    def game_over(self) -> bool:
        return self.winner is not None or self.is_draw


Listener = Callable[[GameSnapshot], None]


class Game:
    """ゲームの状態を管理するクラス"""

    def __init__(self, rules: RuleSettings = DEFAULT_RULES):
        self.rules = rules
        self.board = Board()
        self.log = GameLog()
        self.tracker = ProgressionTracker(self.log, rules)
        self.state = TurnState()
        self._valid_moves: List[Move] = []
        self._listeners: List[Listener] = []
        self.reset_game()

    # ------------------------------------------------------------------
    # 参照用
    # ------------------------------------------------------------------

    @property
    def phase(self) -> GamePhase:
        if self.state.game_over:
            return GamePhase.GAME_OVER
        if self.state.active_ability is not None:
            return GamePhase.ABILITY_TARGETING
        if self.state.selected is not None:
            return GamePhase.PIECE_SELECTED
        return GamePhase.IDLE_SELECTION

    @property
    def current_player(self) -> Player:
        return self.state.current_player

    @property
    def winner(self) -> Optional[Player]:
        return self.state.winner

    def progress(self, player: Player) -> PlayerProgress:
        return self.tracker.get(player)

    def valid_moves_for(self, row: int, col: int) -> List[Move]:
        """指定マスの駒の合法手（盤面は変更しない）"""
        if not self.board.is_in_bounds(row, col):
            return []
        return Rules.get_valid_moves(self.board, (row, col))

    def can_activate(self, ability: Union[AbilityType, str]) -> bool:
        """現在の手番のプレイヤーがその能力を使えるか"""
        kind = _parse_ability(ability)
        if kind is None or self.state.game_over:
            return False
        return self.tracker.can_afford(self.current_player, kind.cost(self.rules))

    def is_interactable(self, row: int, col: int) -> bool:
        """クリックに反応するマスか"""
        if not self.board.is_in_bounds(row, col):
            return False
        cell = self.board.get_cell((row, col))
        if self.state.active_ability is not None:
            return cell.is_target
        if self.state.game_over:
            return False
        if cell.piece is not None and cell.piece.owner == self.current_player:
            return True
        return cell.is_highlight

    # ------------------------------------------------------------------
    # 操作
    # ------------------------------------------------------------------

    def select_or_act(self, row: int, col: int) -> bool:
        """
        マスのクリックを処理する
        返り値: 状態が変化したらTrue
        """
        if self.state.game_over or not self.board.is_in_bounds(row, col):
            return False

        position = (row, col)
        if self.state.active_ability is not None:
            changed = self._execute_ability(position)
        else:
            changed = self._select_or_move(position)

        if changed:
            self._notify()
        return changed

    def activate_ability(self, ability: Union[AbilityType, str]) -> bool:
        """
        能力を対象選択状態にする
        同じ能力が既に選択中なら取り消す
        """
        kind = _parse_ability(ability)
        if kind is None or self.state.game_over:
            return False

        if self.state.active_ability == kind:
            return self.cancel_ability()

        if not self.can_activate(kind):
            logger.debug("{} cannot afford {}", self.current_player.name, kind.name)
            return False

        self.state.selected = None
        self._valid_moves = []
        self.state.active_ability = kind
        Abilities.highlight_targets(self.board, kind, self.current_player)
        self.log.add(f"Casting {kind.name}... Select target.", LogCategory.MAGIC)
        self._notify()
        return True

    def cancel_ability(self) -> bool:
        """能力の選択を取り消す（マナは消費しない、手番も続く）"""
        if self.state.active_ability is None:
            return False
        self.state.active_ability = None
        self.board.clear_targets()
        self._notify()
        return True

    def reset_game(self):
        """初期状態に戻す（どの状態からでも呼べる）"""
        self.board.initialize()
        self.tracker.reset()
        self.state = TurnState()
        self._valid_moves = []
        self.log.reset(GAME_STARTED_MESSAGE)
        logger.info("Game reset")
        self._notify()

    # ------------------------------------------------------------------
    # 通知
    # ------------------------------------------------------------------

    def add_listener(self, listener: Listener):
        """状態が変わるたびにスナップショットを受け取る関数を登録"""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self):
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)

    def snapshot(self) -> GameSnapshot:
        """現在の状態の不変スナップショットを作成"""
        board = tuple(
            tuple(
                CellSnapshot(
                    row=cell.row,
                    col=cell.col,
                    piece=PieceSnapshot(
                        id=cell.piece.piece_id,
                        player=cell.piece.owner.name,
                        rank=cell.piece.rank.name,
                        is_king=cell.piece.is_king,
                        is_alive=cell.piece.is_alive,
                    ) if cell.piece else None,
                    is_highlight=cell.is_highlight,
                    is_target=cell.is_target,
                )
                for cell in row
            )
            for row in self.board.cells
        )
        return GameSnapshot(
            board=board,
            current_player=self.current_player.name,
            phase=self.phase.value,
            selected=self.state.selected,
            active_ability=self.state.active_ability.value if self.state.active_ability else None,
            progress={
                player.name: ProgressSnapshot(**self.tracker.get(player).to_dict())
                for player in Player
            },
            winner=self.state.winner.name if self.state.winner else None,
            is_draw=self.state.is_draw,
            log=tuple(LogEntrySnapshot(**entry.to_dict()) for entry in self.log),
        )

    def to_dict(self) -> dict:
        """ゲーム状態を辞書形式に変換"""
        return self.snapshot().model_dump()

    # ------------------------------------------------------------------
    # 内部処理
    # ------------------------------------------------------------------

    def _select_or_move(self, position: Position) -> bool:
        cell = self.board.get_cell(position)

        # 自分の駒なら選択し直す
        if cell.piece is not None and cell.piece.owner == self.current_player:
            self.state.selected = position
            self._valid_moves = Rules.get_valid_moves(self.board, position)
            Rules.highlight_moves(self.board, self._valid_moves)
            return True

        if self.state.selected is None or not cell.is_highlight:
            return False

        move = next((m for m in self._valid_moves if m.to_pos == position), None)
        if move is None:
            return False

        result = Rules.apply_move(self.board, move, self.tracker)
        if not result.success:
            return False
        logger.debug("{} played {}", self.current_player.name, move)

        self.board.clear_highlights()
        self.state.selected = None
        self._valid_moves = []
        self._end_turn()
        return True

    def _execute_ability(self, position: Position) -> bool:
        if not self.board.get_cell(position).is_target:
            return False

        kind = self.state.active_ability
        result = Abilities.execute(self.board, kind, position, self.current_player, self.tracker)
        if not result.consumed:
            return False

        self.state.active_ability = None
        self.board.clear_targets()
        self._end_turn()
        return True

    def _end_turn(self):
        """次のプレイヤーのマナを回復して手番を渡し、勝敗を判定する"""
        next_player = self.current_player.opponent
        self.tracker.regenerate(next_player)
        self.state.current_player = next_player
        logger.debug("Turn passes to {}", next_player.name)
        self._check_win_condition()

    def _check_win_condition(self):
        is_over, winner = Rules.is_game_over(self.board)
        if not is_over:
            return

        self.state.winner = winner
        self.state.is_draw = winner is None
        self.state.selected = None
        self.state.active_ability = None
        self.board.clear_highlights()
        self.board.clear_targets()

        if winner is None:
            self.log.add("Both armies have fallen. The battle is a draw.", LogCategory.INFO)
        else:
            self.log.add(f"{winner.name} WINS! The battle is over.", LogCategory.INFO)
        logger.info("Game over (winner: {})", winner.name if winner else "draw")


def _parse_ability(ability: Union[AbilityType, str]) -> Optional[AbilityType]:
    """AbilityType または名前（'dash' / 'DASH'）を解釈する。不明ならNone"""
    if isinstance(ability, AbilityType):
        return ability
    if isinstance(ability, str):
        for kind in AbilityType:
            if ability.lower() == kind.value:
                return kind
    return None
