"""
牌型等级定义.

HandRank的枚举值就是该牌型的分数基数, 显式写出而不是由声明位置推导,
调整成员顺序不会改变分数.
"""

from enum import IntEnum

# 相邻牌型基数之间的间隔, 踢脚牌编码必须严格小于它
CATEGORY_SPACING = 1_000_000


class HandRank(IntEnum):
    """
    德州扑克牌型枚举.

    数值即分数基数, 数值越大表示牌型越强.
    """

    HIGH_CARD = 0                  # 高牌
    ONE_PAIR = 1_000_000           # 一对
    TWO_PAIR = 2_000_000           # 两对
    THREE_OF_A_KIND = 3_000_000    # 三条
    STRAIGHT = 4_000_000           # 顺子
    FLUSH = 5_000_000              # 同花
    FULL_HOUSE = 6_000_000         # 葫芦
    FOUR_OF_A_KIND = 7_000_000     # 四条
    STRAIGHT_FLUSH = 8_000_000     # 同花顺

    @property
    def base(self) -> int:
        """牌型的分数基数."""
        return int(self.value)

    @property
    def label(self) -> str:
        """牌型的显示名称, 如"Full House"."""
        return self.name.replace("_", " ").title()

    @classmethod
    def from_score(cls, score: int) -> 'HandRank':
        """
        从分数还原牌型.

        Args:
            score: evaluate返回的分数

        Returns:
            HandRank: 基数不超过score的最大牌型

        Raises:
            ValueError: 当分数为负数或超出最高牌型范围时
        """
        if score < 0 or score >= cls.STRAIGHT_FLUSH.base + CATEGORY_SPACING:
            raise ValueError(f"无效的分数: {score}")
        return max(rank for rank in cls if rank.base <= score)


def category_base(hand_rank: HandRank) -> int:
    """返回牌型的分数基数."""
    return hand_rank.base
