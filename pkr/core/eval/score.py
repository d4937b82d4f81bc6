"""
分数编码.

分数 = 牌型基数 + 踢脚牌编码. 踢脚牌编码把最多5个点数按重要性从高到低
依次左移4位拼接: 点数取值2..14, 4位足够; 5个点数最大为0xEEEEE = 978670,
始终小于牌型间隔1,000,000, 因此任何高牌型的分数都大于任何低牌型的分数.
"""

import logging
from typing import Iterable, List, Sequence

from ..deck.types import Rank
from ..exceptions import ScoreOverflowError
from .types import CATEGORY_SPACING, HandRank, category_base

logger = logging.getLogger(__name__)

BITS_PER_RANK = 4
MAX_SCORED_RANKS = 5

_RANK_MASK = (1 << BITS_PER_RANK) - 1


def pack_ranks(ranks: Iterable[int]) -> int:
    """
    把点数序列编码为整数.

    Args:
        ranks: 按重要性从高到低排列的点数, 可以为空

    Returns:
        int: 编码结果, 空序列返回0
    """
    packed = 0
    for rank in ranks:
        packed = (packed << BITS_PER_RANK) | int(rank)
    return packed


def calculate_hand_score(ranks: Sequence[int], hand_rank: HandRank) -> int:
    """
    计算最终分数.

    Args:
        ranks: 决定胜负的点数, 按重要性从高到低排列, 最多5个
        hand_rank: 牌型

    Returns:
        int: 牌型基数 + 点数编码

    Raises:
        ScoreOverflowError: 当点数超过5个或编码达到牌型间隔时
    """
    if len(ranks) > MAX_SCORED_RANKS:
        logger.error("牌型%s返回了%d个点数: %s", hand_rank.name, len(ranks), list(ranks))
        raise ScoreOverflowError(
            f"最多编码{MAX_SCORED_RANKS}个点数，实际: {len(ranks)}"
        )

    packed = pack_ranks(ranks)
    if packed >= CATEGORY_SPACING:
        logger.error("牌型%s的点数编码%d越界", hand_rank.name, packed)
        raise ScoreOverflowError(f"点数编码{packed}不小于{CATEGORY_SPACING}")

    return category_base(hand_rank) + packed


def decode_ranks(score: int) -> List[Rank]:
    """
    从分数中还原点数序列, 用于显示和调试.

    Args:
        score: calculate_hand_score的返回值

    Returns:
        List[Rank]: 按重要性从高到低排列的点数
    """
    packed = score - HandRank.from_score(score).base
    ranks = []
    while packed:
        ranks.append(Rank(packed & _RANK_MASK))
        packed >>= BITS_PER_RANK
    ranks.reverse()
    return ranks
