"""
pkr - 德州扑克牌型评估

把5到7张牌评估为一个整数分数, 分数越大牌越强.
"""

__version__ = "1.0.0"

from .core import (
    Card,
    Deck,
    EvaluationInvariantError,
    Hand,
    HandRank,
    InvalidCardToken,
    InvalidHandSize,
    PkrError,
    Rank,
    Suit,
    evaluate,
    parse_cards,
)

__all__ = [
    'Card', 'Deck', 'Hand', 'HandRank', 'Rank', 'Suit',
    'PkrError', 'InvalidHandSize', 'InvalidCardToken', 'EvaluationInvariantError',
    'evaluate', 'parse_cards',
]
