"""
牌型检测函数.

除同花检测直接读取手牌外, 其余检测函数都要求调用方传入已排好序的点数:
- find_straight: 降序且无重复
- 其余五个: 降序, 保留重复
检测函数内部不排序. 每个函数返回的点数最多5个, 按重要性从高到低排列.
"""

from typing import TYPE_CHECKING, List, Optional, Sequence

from ..deck.types import Rank, get_all_suits

if TYPE_CHECKING:
    from ..hand import Hand

FLUSH_SIZE = 5
STRAIGHT_SIZE = 5
HAND_SIZE = 5

# 顺子检测中A当1用时的临时点数值, 比TWO小1
ACE_LOW = int(Rank.TWO) - 1


def _kickers(ranks_desc: Sequence[Rank], used: Sequence[Rank], count: int) -> List[Rank]:
    """从高到低取不属于已成牌型点数的牌作为踢脚牌."""
    if count <= 0:
        return []
    return [rank for rank in ranks_desc if rank not in used][:count]


def find_flush(hand: 'Hand') -> Optional[List[Rank]]:
    """
    查找同花.

    按固定花色顺序逐个检查, 第一个达到5张的花色即为同花花色.

    Returns:
        Optional[List[Rank]]: 该花色所有牌的点数(降序), 没有同花时返回None
    """
    for suit in get_all_suits():
        suited = hand.cards_of_suit(suit)
        if len(suited) >= FLUSH_SIZE:
            return sorted((card.rank for card in suited), reverse=True)
    return None


def find_straight(ranks_desc_dedup: Sequence[Rank]) -> Optional[Rank]:
    """
    查找顺子.

    最高牌为A时在末尾补一个A当1用的临时值, 以识别A-2-3-4-5.
    从高到低检查每个长度为5的窗口, 首尾相差4即为顺子.

    Args:
        ranks_desc_dedup: 降序且无重复的点数

    Returns:
        Optional[Rank]: 最大顺子的最高牌, A-2-3-4-5返回FIVE; 没有顺子时返回None
    """
    values = [int(rank) for rank in ranks_desc_dedup]
    if values and values[0] == Rank.ACE:
        values.append(ACE_LOW)

    for i in range(len(values) - STRAIGHT_SIZE + 1):
        if values[i] - values[i + STRAIGHT_SIZE - 1] == STRAIGHT_SIZE - 1:
            return Rank(values[i])
    return None


def find_four_of_a_kind(ranks_desc: Sequence[Rank]) -> Optional[List[Rank]]:
    """
    查找四条.

    Returns:
        Optional[List[Rank]]: [四条点数, 踢脚牌]; 没有其他牌时不带踢脚牌.
        没有四条时返回None
    """
    for i in range(len(ranks_desc) - 3):
        if ranks_desc[i] == ranks_desc[i + 3]:
            quad = ranks_desc[i]
            return [quad] + _kickers(ranks_desc, [quad], 1)
    return None


def find_full_house(ranks_desc: Sequence[Rank]) -> Optional[List[Rank]]:
    """
    查找葫芦.

    第一遍从高到低找三条, 第二遍找点数不同于三条的第一个对子.
    第二个较小的三条可以拿出其中两张充当对子.

    Returns:
        Optional[List[Rank]]: [三条点数, 对子点数], 没有葫芦时返回None
    """
    if len(ranks_desc) < HAND_SIZE:
        return None

    trips = None
    for i in range(len(ranks_desc) - 2):
        if ranks_desc[i] == ranks_desc[i + 2]:
            trips = ranks_desc[i]
            break
    if trips is None:
        return None

    for i in range(len(ranks_desc) - 1):
        if ranks_desc[i] == ranks_desc[i + 1] and ranks_desc[i] != trips:
            return [trips, ranks_desc[i]]
    return None


def find_three_of_a_kind(ranks_desc: Sequence[Rank]) -> Optional[List[Rank]]:
    """
    查找三条.

    Returns:
        Optional[List[Rank]]: [三条点数, 最多2张踢脚牌], 没有三条时返回None
    """
    for i in range(len(ranks_desc) - 2):
        if ranks_desc[i] == ranks_desc[i + 2]:
            trips = ranks_desc[i]
            return [trips] + _kickers(ranks_desc, [trips], HAND_SIZE - 3)
    return None


def find_two_pair(ranks_desc: Sequence[Rank]) -> Optional[List[Rank]]:
    """
    查找两对.

    Returns:
        Optional[List[Rank]]: [大对子, 小对子, 最多1张踢脚牌], 不足两对时返回None
    """
    pairs: List[Rank] = []
    for i in range(len(ranks_desc) - 1):
        if ranks_desc[i] == ranks_desc[i + 1] and ranks_desc[i] not in pairs:
            pairs.append(ranks_desc[i])
            if len(pairs) == 2:
                return pairs + _kickers(ranks_desc, pairs, HAND_SIZE - 4)
    return None


def find_pair(ranks_desc: Sequence[Rank]) -> Optional[List[Rank]]:
    """
    查找一对.

    Returns:
        Optional[List[Rank]]: [对子点数, 最多3张踢脚牌], 没有对子时返回None
    """
    for i in range(len(ranks_desc) - 1):
        if ranks_desc[i] == ranks_desc[i + 1]:
            pair = ranks_desc[i]
            return [pair] + _kickers(ranks_desc, [pair], HAND_SIZE - 2)
    return None
