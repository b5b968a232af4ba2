"""
チェッカー＋RPGのゲームエンジン - パッケージ初期化
"""

from .config import RuleSettings, DEFAULT_RULES, BOARD_SIZE, HOME_ROWS
from .piece import Piece, Player, PieceRank
from .board import Board, Cell, is_playable_square
from .move import Move, MoveType
from .game_log import GameLog, LogEntry, LogCategory
from .progression import PlayerProgress, ProgressionTracker
from .rules import Rules, MoveResult
from .abilities import Abilities, AbilityType, AbilityResult
from .snapshot import GameSnapshot
from .game import Game, GamePhase, TurnState

__all__ = [
    'RuleSettings',
    'DEFAULT_RULES',
    'BOARD_SIZE',
    'HOME_ROWS',
    'Piece',
    'Player',
    'PieceRank',
    'Board',
    'Cell',
    'is_playable_square',
    'Move',
    'MoveType',
    'GameLog',
    'LogEntry',
    'LogCategory',
    'PlayerProgress',
    'ProgressionTracker',
    'Rules',
    'MoveResult',
    'Abilities',
    'AbilityType',
    'AbilityResult',
    'GameSnapshot',
    'Game',
    'GamePhase',
    'TurnState',
]
