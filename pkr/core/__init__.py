"""
pkr Core - 牌型评估核心

Modules:
    deck: 点数、花色、扑克牌和牌组
    hand: 手牌容器
    eval: 牌型检测、分数编码和评估入口
    exceptions: 异常定义
"""

from .exceptions import (
    EvaluationInvariantError,
    InvalidCardToken,
    InvalidHandSize,
    PkrError,
    ScoreOverflowError,
)
from .deck import Card, Deck, Rank, Suit, parse_cards
from .hand import Hand, MAX_CARDS, MIN_CARDS
from .eval import HandRank, evaluate

__all__ = [
    'PkrError', 'InvalidHandSize', 'InvalidCardToken',
    'EvaluationInvariantError', 'ScoreOverflowError',
    'Card', 'Deck', 'Rank', 'Suit', 'parse_cards',
    'Hand', 'MIN_CARDS', 'MAX_CARDS',
    'HandRank', 'evaluate',
]
