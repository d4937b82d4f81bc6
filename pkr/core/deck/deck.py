"""
扑克牌组管理.

定义Deck类, 提供标准52张牌的洗牌、发牌操作.
随机数生成器由调用方注入, 牌组本身不选择熵源.
"""

import logging
import random
from typing import TYPE_CHECKING, List, Optional

from .card import Card
from .types import Suit, get_all_ranks

if TYPE_CHECKING:
    from ..hand import Hand

logger = logging.getLogger(__name__)

# 新牌组的花色顺序
_DECK_SUIT_ORDER = (Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS, Suit.SPADES)


class Deck:
    """
    表示一副扑克牌.

    包含52张标准扑克牌, 从列表末尾发牌.
    使用可选的随机数生成器以支持确定性测试.

    Examples:
        >>> deck = Deck(random.Random(7))
        >>> deck.shuffle()
        >>> hand = deck.deal_hand(7)
        >>> len(deck)
        45
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        """
        初始化牌组.

        Args:
            rng: 随机数生成器, 为None时使用未指定种子的random.Random
        """
        self._rng = rng or random.Random()
        self._cards: List[Card] = []
        self._reset_deck()

    def _reset_deck(self) -> None:
        """重置牌组为完整的52张牌."""
        self._cards = [
            Card(rank, suit)
            for suit in _DECK_SUIT_ORDER
            for rank in get_all_ranks()
        ]

    def shuffle(self) -> None:
        """洗牌."""
        self._rng.shuffle(self._cards)
        logger.debug("牌组已洗牌, 剩余%d张", len(self._cards))

    def deal_card(self) -> Card:
        """
        发一张牌.

        Returns:
            Card: 发出的牌

        Raises:
            IndexError: 当牌组为空时
        """
        if not self._cards:
            raise IndexError("Cannot deal from empty deck")
        return self._cards.pop()

    def deal_cards(self, count: int) -> List[Card]:
        """
        发多张牌.

        Args:
            count: 要发的牌数

        Returns:
            List[Card]: 发出的牌列表

        Raises:
            ValueError: 当count为负数时
            IndexError: 当牌组中的牌不足时
        """
        if count < 0:
            raise ValueError("Count must be non-negative")
        if count > len(self._cards):
            raise IndexError(f"Cannot deal {count} cards, only {len(self._cards)} remaining")

        return [self.deal_card() for _ in range(count)]

    def deal_hand(self, count: int) -> 'Hand':
        """
        发出一手牌.

        Args:
            count: 手牌张数

        Returns:
            Hand: 由发出的牌组成的手牌

        Raises:
            InvalidHandSize: 当count超出手牌允许的张数时
            IndexError: 当牌组中的牌不足时
        """
        from ..hand import Hand

        Hand.check_size(count)
        return Hand(self.deal_cards(count))

    @property
    def cards_remaining(self) -> int:
        """牌组中剩余的牌数."""
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        return len(self._cards) == 0

    def reset(self) -> None:
        """重置牌组为完整的52张牌."""
        self._reset_deck()

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"Deck(cards_remaining={len(self._cards)})"
