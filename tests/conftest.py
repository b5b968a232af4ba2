"""
pytest共通設定とフィクスチャ
"""

import pytest
import sys
from pathlib import Path

from loguru import logger

# プロジェクトルートをパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# テスト中はエンジンの診断ログを出さない
logger.disable("src")


@pytest.fixture
def empty_board():
    """空の盤面を提供するフィクスチャ"""
    from src.engine import Board
    return Board()


@pytest.fixture
def initial_board():
    """初期配置の盤面を提供するフィクスチャ"""
    from src.engine import Board
    return Board.create_initial()


@pytest.fixture
def game_log():
    """空のゲームログを提供するフィクスチャ"""
    from src.engine import GameLog
    return GameLog()


@pytest.fixture
def tracker(game_log):
    """初期状態の経験値・マナ管理を提供するフィクスチャ"""
    from src.engine import ProgressionTracker
    return ProgressionTracker(game_log)


@pytest.fixture
def game():
    """開始直後のゲームを提供するフィクスチャ"""
    from src.engine import Game
    return Game()


@pytest.fixture
def empty_game(game):
    """駒をすべて取り除いたゲーム（局面を自由に組むため）"""
    for cell in game.board.iter_cells():
        cell.piece = None
    return game


@pytest.fixture
def place():
    """盤面に駒を置く関数を提供するフィクスチャ"""
    from src.engine import Piece, PieceRank

    def _place(board, position, player, king=False):
        row, col = position
        prefix = 'r' if player.name == 'RED' else 'b'
        rank = PieceRank.KING if king else PieceRank.SOLDIER
        piece = Piece(f"{prefix}-test-{row}-{col}", player, rank)
        board.set_piece_at(position, piece)
        return piece

    return _place
