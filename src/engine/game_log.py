"""
ゲームログ（追記専用）
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple

from loguru import logger


class LogCategory(Enum):
    """ログの種類"""
    INFO = "info"
    COMBAT = "combat"
    LEVEL = "level"
    MAGIC = "magic"


@dataclass(frozen=True)
class LogEntry:
    message: str
    category: LogCategory

    def to_dict(self) -> dict:
        return {"message": self.message, "type": self.category.value}


class GameLog:
    """
    プレイヤーに見せる出来事の記録
    追加したエントリは変更しない。リセット時のみ丸ごと作り直す。
    """

    def __init__(self):
        self._entries: List[LogEntry] = []

    def add(self, message: str, category: LogCategory = LogCategory.INFO) -> LogEntry:
        entry = LogEntry(message, category)
        self._entries.append(entry)
        logger.debug("[{}] {}", category.value, message)
        return entry

    def reset(self, message: str):
        """ログを1件だけの状態に戻す"""
        self._entries = []
        self.add(message, LogCategory.INFO)

    @property
    def entries(self) -> Tuple[LogEntry, ...]:
        return tuple(self._entries)

    @property
    def last(self) -> LogEntry:
        return self._entries[-1]

    def __len__(self):
        return len(self._entries)

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(self.entries)
