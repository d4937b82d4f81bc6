"""
德州扑克牌型评估器.

对5到7张牌(容器允许2到9张)按牌型强弱依次尝试各检测函数,
命中即返回, 得到一个可以直接比较大小的整数分数.
评估过程无状态, 不修改传入的手牌, 多线程并发调用无需加锁.
"""

import logging
from typing import TYPE_CHECKING, List, NoReturn

from ..deck.types import Rank
from ..exceptions import EvaluationInvariantError
from .detectors import (
    HAND_SIZE,
    find_flush,
    find_four_of_a_kind,
    find_full_house,
    find_pair,
    find_straight,
    find_three_of_a_kind,
    find_two_pair,
)
from .score import calculate_hand_score
from .types import HandRank

if TYPE_CHECKING:
    from ..hand import Hand

logger = logging.getLogger(__name__)


def _dedup_sorted(ranks_desc: List[Rank]) -> List[Rank]:
    """去掉有序列表中相邻的重复点数."""
    result: List[Rank] = []
    for rank in ranks_desc:
        if not result or result[-1] != rank:
            result.append(rank)
    return result


def _scored(ranks: List[Rank], hand_rank: HandRank) -> int:
    score = calculate_hand_score(ranks, hand_rank)
    logger.debug("评估结果: %s %s -> %d", hand_rank.name, [r.char for r in ranks], score)
    return score


def _missing_pattern(expected: str, ranks_desc: List[Rank], duplicates: int) -> NoReturn:
    logger.error("重复数%d表明存在%s, 但未找到: %s", duplicates, expected, ranks_desc)
    raise EvaluationInvariantError(
        f"重复数{duplicates}表明存在{expected}，但检测函数未找到: {[r.char for r in ranks_desc]}"
    )


def evaluate(hand: 'Hand') -> int:
    """
    计算一手牌的强度分数.

    按以下顺序判断, 命中即返回:
    同花顺 -> 四条/葫芦(重复数>2) -> 同花 -> 顺子
    -> 三条/两对(重复数>1) -> 一对(重复数>0) -> 高牌.

    Args:
        hand: 待评估的手牌, 不会被修改

    Returns:
        int: 牌型基数 + 踢脚牌编码, 分数越大牌越强

    Raises:
        EvaluationInvariantError: 当重复数与检测结果矛盾时
    """
    hand_desc = hand.copy()
    hand_desc.sort_by_rank(ascending=False)

    # 先找同花, 同花顺只需在同花的点数里找顺子
    flush_ranks = find_flush(hand_desc)
    if flush_ranks is not None:
        straight_flush_high = find_straight(flush_ranks)
        if straight_flush_high is not None:
            return _scored([straight_flush_high], HandRank.STRAIGHT_FLUSH)

    ranks_desc = hand_desc.ranks
    ranks_dedup = _dedup_sorted(ranks_desc)
    duplicates = len(ranks_desc) - len(ranks_dedup)

    if duplicates > 2:
        four_of_a_kind = find_four_of_a_kind(ranks_desc)
        if four_of_a_kind is not None:
            return _scored(four_of_a_kind, HandRank.FOUR_OF_A_KIND)
        full_house = find_full_house(ranks_desc)
        if full_house is not None:
            return _scored(full_house, HandRank.FULL_HOUSE)

    if flush_ranks is not None:
        return _scored(flush_ranks[:HAND_SIZE], HandRank.FLUSH)

    straight_high = find_straight(ranks_dedup)
    if straight_high is not None:
        return _scored([straight_high], HandRank.STRAIGHT)

    if duplicates > 1:
        three_of_a_kind = find_three_of_a_kind(ranks_desc)
        if three_of_a_kind is not None:
            return _scored(three_of_a_kind, HandRank.THREE_OF_A_KIND)
        two_pair = find_two_pair(ranks_desc)
        if two_pair is not None:
            return _scored(two_pair, HandRank.TWO_PAIR)
        _missing_pattern("三条或两对", ranks_desc, duplicates)

    if duplicates > 0:
        pair = find_pair(ranks_desc)
        if pair is not None:
            return _scored(pair, HandRank.ONE_PAIR)
        _missing_pattern("一对", ranks_desc, duplicates)

    return _scored(ranks_desc[:HAND_SIZE], HandRank.HIGH_CARD)
