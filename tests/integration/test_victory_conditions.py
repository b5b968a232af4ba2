"""
統合テスト: 勝利条件のテスト
ゲーム終了判定とその後の操作を確認
"""

import pytest
from src.engine import Game, GamePhase, Player, AbilityType


class TestVictoryConditions:
    """勝利条件のテストクラス"""

    def test_capturing_last_piece_wins(self, empty_game, place):
        """最後の敵駒を取ると勝利"""
        place(empty_game.board, (5, 2), Player.RED)
        place(empty_game.board, (4, 3), Player.BLUE)

        empty_game.select_or_act(5, 2)
        empty_game.select_or_act(3, 4)

        assert empty_game.winner == Player.RED
        assert empty_game.phase == GamePhase.GAME_OVER
        assert empty_game.snapshot().winner == "RED"
        assert empty_game.log.last.message == "RED WINS! The battle is over."

    def test_smiting_last_piece_wins(self, empty_game, place):
        place(empty_game.board, (5, 2), Player.RED)
        place(empty_game.board, (0, 1), Player.BLUE)
        empty_game.progress(Player.RED).mana = 4

        empty_game.activate_ability(AbilityType.SMITE)
        empty_game.select_or_act(0, 1)

        assert empty_game.winner == Player.RED
        assert empty_game.phase == GamePhase.GAME_OVER

    def test_blue_wins_when_red_eliminated(self, empty_game, place):
        place(empty_game.board, (2, 1), Player.BLUE)
        place(empty_game.board, (3, 2), Player.RED)
        place(empty_game.board, (7, 0), Player.RED)
        empty_game.state.current_player = Player.BLUE
        empty_game.progress(Player.BLUE).mana = 4

        # 1手目: 青が (3, 2) を取る
        empty_game.select_or_act(2, 1)
        empty_game.select_or_act(4, 3)
        assert empty_game.winner is None

        # 赤は動かずにダッシュ（後方の駒は前が空いているので成功）
        empty_game.activate_ability(AbilityType.DASH)
        empty_game.select_or_act(7, 0)
        assert empty_game.board.piece_at((5, 0)) is not None

        # 青のスマイトで最後の駒を消す
        empty_game.activate_ability(AbilityType.SMITE)
        empty_game.select_or_act(5, 0)

        assert empty_game.winner == Player.BLUE
        assert empty_game.phase == GamePhase.GAME_OVER

    def test_game_continues_while_both_have_pieces(self, game):
        game.select_or_act(5, 0)
        game.select_or_act(4, 1)

        assert game.winner is None
        assert game.phase == GamePhase.IDLE_SELECTION

    def test_all_intents_ignored_after_game_over(self, empty_game, place):
        """終了後はクリックも能力も無視される"""
        place(empty_game.board, (5, 2), Player.RED)
        place(empty_game.board, (4, 3), Player.BLUE)
        empty_game.select_or_act(5, 2)
        empty_game.select_or_act(3, 4)
        empty_game.progress(Player.BLUE).mana = 10
        empty_game.progress(Player.RED).mana = 10
        before = empty_game.snapshot()

        assert not empty_game.select_or_act(3, 4)
        assert not empty_game.activate_ability(AbilityType.SMITE)
        assert not empty_game.activate_ability(AbilityType.DASH)
        assert not empty_game.cancel_ability()
        assert not empty_game.can_activate(AbilityType.DASH)
        assert not empty_game.is_interactable(3, 4)

        assert empty_game.snapshot() == before

    def test_reset_after_game_over(self, empty_game, place):
        place(empty_game.board, (5, 2), Player.RED)
        place(empty_game.board, (4, 3), Player.BLUE)
        empty_game.select_or_act(5, 2)
        empty_game.select_or_act(3, 4)

        empty_game.reset_game()

        assert empty_game.snapshot() == Game().snapshot()

    def test_simultaneous_elimination_is_draw(self, empty_game):
        """両者とも駒がなければ引き分け（勝者なし）"""
        empty_game._end_turn()

        assert empty_game.phase == GamePhase.GAME_OVER
        assert empty_game.winner is None
        assert empty_game.state.is_draw
        assert empty_game.snapshot().is_draw
        assert not empty_game.select_or_act(0, 1)
