"""
配置定义.

日志和发牌相关配置, 在__post_init__中校验.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from .core.hand import MAX_CARDS, MIN_CARDS

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = 'WARNING'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    def __post_init__(self):
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"无效的日志级别: {self.log_level}")


@dataclass
class DealConfig:
    """发牌配置"""
    num_cards: int = 7
    seed: Optional[int] = None  # 随机种子，用于可重现的发牌

    def __post_init__(self):
        if not MIN_CARDS <= self.num_cards <= MAX_CARDS:
            raise ValueError(
                f"发牌张数必须在{MIN_CARDS}到{MAX_CARDS}之间，实际: {self.num_cards}"
            )

    def create_rng(self) -> random.Random:
        """创建随机数生成器, 指定了种子时结果可重现."""
        rng = random.Random()
        if self.seed is not None:
            rng.seed(self.seed)
        return rng


def configure_logging(config: LoggingConfig) -> None:
    """按配置初始化根日志器."""
    logging.basicConfig(level=getattr(logging, config.log_level), format=config.log_format)
