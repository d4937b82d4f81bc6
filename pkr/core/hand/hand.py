"""
手牌容器.

Hand持有2到9张牌, 只能通过带校验的构造函数和追加操作修改.
"""

from typing import Iterable, Iterator, List

from ..deck.card import Card, parse_cards
from ..deck.types import Rank, Suit
from ..exceptions import InvalidHandSize
from ..eval.evaluator import evaluate

# 一手牌允许的最少和最多张数
MIN_CARDS = 2
MAX_CARDS = 9


class Hand:
    """
    一手扑克牌.

    按插入顺序保存牌, 张数始终在[MIN_CARDS, MAX_CARDS]之内.
    排序操作原地进行且稳定, 相同键的牌保持原有相对顺序.

    Examples:
        >>> hand = Hand.from_str("As Ac Ad Kh Ts Kc Qs")
        >>> hand.get_score()
        6000237
    """

    def __init__(self, cards: Iterable[Card]) -> None:
        """
        用一组牌创建手牌.

        Args:
            cards: 牌列表

        Raises:
            InvalidHandSize: 当张数不在[MIN_CARDS, MAX_CARDS]之内时
            TypeError: 当元素不是Card时
        """
        cards = list(cards)
        self.check_size(len(cards))
        self._check_cards(cards)
        self._cards: List[Card] = cards

    @classmethod
    def from_str(cls, text: str) -> 'Hand':
        """
        从以空白分隔的牌面字符串创建手牌, 如"As Ks Qs Js Ts".

        先校验张数, 再逐张解析.

        Raises:
            InvalidHandSize: 当张数不在允许范围内时
            InvalidCardToken: 当某张牌格式无效时
        """
        if not isinstance(text, str):
            raise TypeError(f"输入必须是字符串，实际: {type(text)}")
        cls.check_size(len(text.split()))
        return cls(parse_cards(text))

    @staticmethod
    def check_size(count: int) -> None:
        """
        校验张数是否在允许范围内.

        Raises:
            InvalidHandSize: 当张数不在[MIN_CARDS, MAX_CARDS]之内时
        """
        if count < MIN_CARDS or count > MAX_CARDS:
            raise InvalidHandSize(
                f"一手牌必须有{MIN_CARDS}到{MAX_CARDS}张，实际: {count}"
            )

    @staticmethod
    def _check_cards(cards: List[Card]) -> None:
        for i, card in enumerate(cards):
            if not isinstance(card, Card):
                raise TypeError(f"第{i}张牌必须是Card类型，实际: {type(card)}")

    def add_card(self, card: Card) -> None:
        """
        追加一张牌.

        Raises:
            InvalidHandSize: 当追加后超过MAX_CARDS时
        """
        self.add_cards([card])

    def add_cards(self, cards: Iterable[Card]) -> None:
        """
        追加多张牌, 要么全部追加, 要么一张都不追加.

        Raises:
            InvalidHandSize: 当追加后超过MAX_CARDS时
        """
        cards = list(cards)
        if len(self._cards) + len(cards) > MAX_CARDS:
            raise InvalidHandSize(
                f"手牌最多{MAX_CARDS}张，当前{len(self._cards)}张，无法再追加{len(cards)}张"
            )
        self._check_cards(cards)
        self._cards.extend(cards)

    @property
    def cards(self) -> List[Card]:
        """按插入顺序返回所有牌的副本."""
        return list(self._cards)

    @property
    def ranks(self) -> List[Rank]:
        """按当前顺序返回每张牌的点数."""
        return [card.rank for card in self._cards]

    @property
    def count(self) -> int:
        return len(self._cards)

    def cards_of_suit(self, suit: Suit) -> List[Card]:
        """返回指定花色的牌, 保持当前顺序."""
        return [card for card in self._cards if card.suit == suit]

    def sort_by_suit(self) -> None:
        """按花色固定顺序升序排列."""
        self._cards.sort(key=lambda card: card.suit.order)

    def sort_by_rank(self, ascending: bool = True) -> None:
        """
        按点数排序.

        Args:
            ascending: True为升序, False为降序
        """
        self._cards.sort(key=lambda card: card.rank, reverse=not ascending)

    def copy(self) -> 'Hand':
        """返回独立的副本."""
        return Hand(self._cards)

    def get_score(self) -> int:
        """
        计算手牌强度分数.

        Returns:
            int: 分数越大牌越强, 两手牌直接比较整数即可
        """
        return evaluate(self)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __str__(self) -> str:
        return " ".join(str(card) for card in self._cards)

    def __repr__(self) -> str:
        return f"Hand({str(self)!r})"
