"""
ゲームのルール定数と設定
"""

from pydantic import BaseModel, ConfigDict, Field

# 盤面サイズ
BOARD_SIZE = 8
# 各プレイヤーの初期配置の段数
HOME_ROWS = 3


class RuleSettings(BaseModel):
    """
    ルールの数値パラメータ

    デフォルト値が標準ルール。テストや調整用に差し替えられる。
    """
    model_config = ConfigDict(frozen=True)

    # 経験値報酬
    capture_xp: int = Field(default=50, ge=0)
    promotion_xp: int = Field(default=20, ge=0)
    smite_xp: int = Field(default=30, ge=0)

    # 能力のマナコスト
    dash_cost: int = Field(default=2, ge=0)
    smite_cost: int = Field(default=4, ge=0)

    # プレイヤーの初期状態
    starting_level: int = Field(default=1, ge=1)
    starting_xp_to_next: int = Field(default=100, gt=0)
    starting_mana: int = Field(default=2, ge=0)
    starting_max_mana: int = Field(default=5, ge=0)

    # レベルアップ
    xp_growth_factor: float = Field(default=1.5, gt=1.0)
    max_mana_per_level: int = Field(default=2, ge=0)

    # 手番交代時のマナ回復量
    mana_regen: int = Field(default=1, ge=0)


DEFAULT_RULES = RuleSettings()
