"""
経験値・レベル・マナの管理
"""

import math
from dataclasses import dataclass, asdict
from typing import Dict

from loguru import logger

from .config import RuleSettings, DEFAULT_RULES
from .game_log import GameLog, LogCategory
from .piece import Player


@dataclass
class PlayerProgress:
    """プレイヤー1人分の成長状態"""
    level: int
    xp: int
    xp_to_next: int
    mana: int
    max_mana: int

    @classmethod
    def initial(cls, rules: RuleSettings = DEFAULT_RULES) -> 'PlayerProgress':
        return cls(
            level=rules.starting_level,
            xp=0,
            xp_to_next=rules.starting_xp_to_next,
            mana=rules.starting_mana,
            max_mana=rules.starting_max_mana,
        )

    def to_dict(self) -> dict:
        return asdict(self)


class ProgressionTracker:
    """両プレイヤーの経験値とマナを管理するクラス"""

    def __init__(self, log: GameLog, rules: RuleSettings = DEFAULT_RULES):
        self.log = log
        self.rules = rules
        self.progress: Dict[Player, PlayerProgress] = {}
        self.reset()

    def reset(self):
        """両プレイヤーを初期状態に戻す"""
        self.progress = {
            Player.RED: PlayerProgress.initial(self.rules),
            Player.BLUE: PlayerProgress.initial(self.rules),
        }

    def get(self, player: Player) -> PlayerProgress:
        return self.progress[player]

    def grant_experience(self, player: Player, amount: int) -> int:
        """
        経験値を与え、必要なら何度でもレベルアップさせる
        返り値: 上がったレベル数
        """
        stats = self.progress[player]
        stats.xp += amount
        levels_gained = 0

        # 一度の大量獲得で複数回レベルアップすることがある
        while stats.xp >= stats.xp_to_next:
            stats.level += 1
            stats.xp -= stats.xp_to_next
            stats.xp_to_next = math.floor(stats.xp_to_next * self.rules.xp_growth_factor)
            stats.max_mana += self.rules.max_mana_per_level
            stats.mana = stats.max_mana
            levels_gained += 1
            self.log.add(
                f"{player.name} Leveled Up to {stats.level}! Max Mana increased.",
                LogCategory.LEVEL,
            )
            logger.info("{} reached level {} (max mana {})", player.name, stats.level, stats.max_mana)

        return levels_gained

    def regenerate(self, player: Player):
        """手番開始時のマナ回復（最大値を超えない）"""
        stats = self.progress[player]
        if stats.mana < stats.max_mana:
            stats.mana = min(stats.max_mana, stats.mana + self.rules.mana_regen)

    def can_afford(self, player: Player, cost: int) -> bool:
        return self.progress[player].mana >= cost

    def spend_mana(self, player: Player, cost: int) -> bool:
        """
        マナを消費する
        返り値: 足りなければ何もせずFalse
        """
        stats = self.progress[player]
        if stats.mana < cost:
            return False
        stats.mana -= cost
        return True
