"""
扑克牌数据结构.

定义不可变的Card类以及两字符牌面字符串的解析函数.
"""

from dataclasses import dataclass
from typing import List

from ..exceptions import InvalidCardToken
from .types import Rank, Suit


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    不可变数据类, 包含点数和花色, 相等性和哈希同时基于两者.

    Attributes:
        rank: 点数
        suit: 花色

    Examples:
        >>> card = Card(Rank.ACE, Suit.SPADES)
        >>> str(card)
        'As'
        >>> Card.from_str("Td") == Card(Rank.TEN, Suit.DIAMONDS)
        True
    """

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        """
        验证扑克牌数据的有效性.

        Raises:
            TypeError: 当点数或花色类型无效时
        """
        if not isinstance(self.rank, Rank):
            raise TypeError(f"点数必须是Rank类型，实际: {type(self.rank)}")
        if not isinstance(self.suit, Suit):
            raise TypeError(f"花色必须是Suit类型，实际: {type(self.suit)}")

    def __str__(self) -> str:
        """返回两字符牌面, 如"As"."""
        return f"{self.rank.char}{self.suit.char}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    def __lt__(self, other: 'Card') -> bool:
        """只按点数比较大小."""
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank < other.rank

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        从两字符字符串创建扑克牌对象.

        Args:
            card_str: 点数字符加花色字符, 如"As"、"Td"

        Returns:
            Card: 对应的扑克牌对象

        Raises:
            TypeError: 当输入不是字符串时
            InvalidCardToken: 当字符串格式无效时
        """
        if not isinstance(card_str, str):
            raise TypeError(f"输入必须是字符串，实际: {type(card_str)}")

        if len(card_str) != 2:
            raise InvalidCardToken(f"卡牌字符串必须是2个字符: {card_str!r}")

        return cls(Rank.from_char(card_str[0]), Suit.from_char(card_str[1]))


def parse_cards(text: str) -> List[Card]:
    """
    解析以空白分隔的多张牌.

    Args:
        text: 如"As Ks Qs"

    Returns:
        List[Card]: 按输入顺序排列的牌

    Raises:
        InvalidCardToken: 当任意一张牌格式无效时
    """
    if not isinstance(text, str):
        raise TypeError(f"输入必须是字符串，实际: {type(text)}")
    return [Card.from_str(token) for token in text.split()]
