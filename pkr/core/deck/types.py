"""
扑克牌基础类型定义.

定义扑克牌的花色、点数等基础枚举类型.
"""

from enum import Enum, IntEnum
from typing import List

from ..exceptions import InvalidCardToken


class Suit(Enum):
    """
    扑克牌花色枚举.

    声明顺序即花色的固定顺序(梅花 < 方块 < 红桃 < 黑桃),
    同花检测和按花色排序都依赖这个顺序.
    """

    CLUBS = "c"       # 梅花
    DIAMONDS = "d"    # 方块
    HEARTS = "h"      # 红桃
    SPADES = "s"      # 黑桃

    @property
    def char(self) -> str:
        """花色的单字符表示, 如"s"."""
        return self.value

    @property
    def symbol(self) -> str:
        """花色的Unicode符号."""
        return _SUIT_SYMBOLS[self]

    @property
    def order(self) -> int:
        """花色在固定顺序中的位置."""
        return _SUIT_ORDER[self]

    @classmethod
    def from_char(cls, char: str) -> 'Suit':
        """
        从单个字符解析花色.

        Args:
            char: 花色字符, "c"/"d"/"h"/"s", 不区分大小写

        Returns:
            Suit: 对应的花色

        Raises:
            InvalidCardToken: 当字符无法识别时
        """
        try:
            return cls(char.lower())
        except ValueError:
            raise InvalidCardToken(f"无效的花色: {char!r}") from None


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    定义13种扑克牌点数, 数值越大表示点数越大.
    A只以14出现; 顺子检测中的A当1用是临时值, 不属于这个枚举.
    """

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def char(self) -> str:
        """点数的单字符表示, 如"T"表示10."""
        return _RANK_CHARS[self]

    @classmethod
    def from_char(cls, char: str) -> 'Rank':
        """
        从单个字符解析点数.

        Args:
            char: 点数字符, "2"-"9"、"T"、"J"、"Q"、"K"、"A"

        Returns:
            Rank: 对应的点数

        Raises:
            InvalidCardToken: 当字符无法识别时
        """
        rank = _CHAR_RANKS.get(char.upper())
        if rank is None:
            raise InvalidCardToken(f"无效的点数: {char!r}")
        return rank


_SUIT_SYMBOLS = {
    Suit.CLUBS: "♣", Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥", Suit.SPADES: "♠",
}
_SUIT_ORDER = {suit: index for index, suit in enumerate(Suit)}

_RANK_CHARS = {
    Rank.TWO: "2", Rank.THREE: "3", Rank.FOUR: "4", Rank.FIVE: "5",
    Rank.SIX: "6", Rank.SEVEN: "7", Rank.EIGHT: "8", Rank.NINE: "9",
    Rank.TEN: "T", Rank.JACK: "J", Rank.QUEEN: "Q",
    Rank.KING: "K", Rank.ACE: "A",
}
_CHAR_RANKS = {char: rank for rank, char in _RANK_CHARS.items()}


def get_all_suits() -> List[Suit]:
    """
    获取所有花色.

    Returns:
        List[Suit]: 按固定顺序排列的四种花色
    """
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """
    获取所有点数.

    Returns:
        List[Rank]: 从2到A升序排列的13种点数
    """
    return list(Rank)
