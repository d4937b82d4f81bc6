"""
扑克牌组模块.

提供Rank、Suit、Card和Deck, 以及牌面字符串解析.
"""

from .types import Rank, Suit, get_all_ranks, get_all_suits
from .card import Card, parse_cards
from .deck import Deck

__all__ = ['Rank', 'Suit', 'Card', 'Deck', 'parse_cards', 'get_all_ranks', 'get_all_suits']
