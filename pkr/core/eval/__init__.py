"""
牌型评估模块.

提供牌型检测函数、分数编码和评估入口evaluate.
"""

from .types import CATEGORY_SPACING, HandRank, category_base
from .score import BITS_PER_RANK, MAX_SCORED_RANKS, calculate_hand_score, decode_ranks, pack_ranks
from .detectors import (
    find_flush,
    find_four_of_a_kind,
    find_full_house,
    find_pair,
    find_straight,
    find_three_of_a_kind,
    find_two_pair,
)
from .evaluator import evaluate

__all__ = [
    'CATEGORY_SPACING', 'BITS_PER_RANK', 'MAX_SCORED_RANKS',
    'HandRank', 'category_base', 'pack_ranks', 'calculate_hand_score', 'decode_ranks',
    'find_flush', 'find_straight', 'find_four_of_a_kind', 'find_full_house',
    'find_three_of_a_kind', 'find_two_pair', 'find_pair',
    'evaluate',
]
