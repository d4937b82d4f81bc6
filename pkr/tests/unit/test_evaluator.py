"""
评估器的单元测试.

覆盖各牌型、踢脚牌比较、A-2-3-4-5顺子以及短路顺序.
"""

import pytest

from pkr.core import EvaluationInvariantError, Hand
from pkr.core.eval import HandRank, evaluate
from pkr.core.eval import evaluator as evaluator_module


def score_of(text):
    return evaluate(Hand.from_str(text))


def category_of(text):
    return HandRank.from_score(score_of(text))


class TestScenarios:
    """固定场景的精确分数."""

    def test_straight_flush_ace_high(self):
        assert score_of("2s As Js Ks Qs 9c Ts") == 8_000_014

    def test_four_of_a_kind_with_kicker(self):
        assert score_of("As Ac Ad Ah Ts 9c Qs") == 7_000_236

    def test_full_house(self):
        assert score_of("As Ac Ad Kh Ts Kc Qs") == 6_000_237

    def test_flush_top_five(self):
        assert score_of("As Ks Qs Js 9s 8s 7s") == 5_974_009


class TestCategories:
    """牌型识别测试."""

    @pytest.mark.parametrize("text, expected", [
        ("9h 8h 7h 6h 5h 2s 3c", HandRank.STRAIGHT_FLUSH),
        ("Ah 2h 3h 4h 5h Kc Kd", HandRank.STRAIGHT_FLUSH),
        ("9c 9d 9h 9s 2c 3d 4h", HandRank.FOUR_OF_A_KIND),
        ("Kc Kd Kh 2s 2c 7d 8h", HandRank.FULL_HOUSE),
        ("2h 9h 4h Kh 7h Ac Ad", HandRank.FLUSH),
        ("9c 8d 7h 6s 5c 2d 2h", HandRank.STRAIGHT),
        ("Qc Qd Qh 9s 7c 4d 2h", HandRank.THREE_OF_A_KIND),
        ("Jc Jd 4h 4s Ac 7d 2h", HandRank.TWO_PAIR),
        ("Tc Td 8h 6s 4c 3d 2h", HandRank.ONE_PAIR),
        ("Ac Qd 9h 7s 5c 3d 2h", HandRank.HIGH_CARD),
    ])
    def test_category(self, text, expected):
        assert category_of(text) == expected

    def test_straight_flush_requires_suited_straight(self):
        """同花和顺子来自不同的牌时只算同花."""
        assert category_of("9h 8h 7h 6c 5h 2h 4d") == HandRank.FLUSH

    def test_straight_flush_inside_larger_flush(self):
        assert score_of("Kh 9h 8h 7h 6h 5h 2c") == HandRank.STRAIGHT_FLUSH.base + 9

    def test_quads_beat_flush(self):
        # 7张牌里四条或葫芦不可能同时组成同花, 这里用8张
        assert category_of("9h 9c 9d 9s 2h 4h 6h Kh") == HandRank.FOUR_OF_A_KIND

    def test_full_house_beats_flush(self):
        assert category_of("9h 9c 9d 2s 2h 4h 6h Kh") == HandRank.FULL_HOUSE

    def test_flush_beats_straight(self):
        assert category_of("Th 9h 8c 7h 6h 2h Kd") == HandRank.FLUSH

    def test_straight_beats_trips(self):
        assert category_of("8c 8d 8h 7s 6c 5d 4h") == HandRank.STRAIGHT


class TestWheel:
    """A-2-3-4-5顺子测试."""

    def test_wheel_scores_five_high(self):
        assert score_of("Ac 2d 3h 4s 5c") == HandRank.STRAIGHT.base + 5

    def test_wheel_with_extra_cards(self):
        assert score_of("Ac 2d 3h 4s 5c Kd 9h") == HandRank.STRAIGHT.base + 5

    def test_wheel_loses_to_six_high(self):
        assert score_of("Ac 2d 3h 4s 5c") < score_of("2d 3h 4s 5c 6d")

    def test_steel_wheel(self):
        assert score_of("As 2s 3s 4s 5s Kd Kh") == HandRank.STRAIGHT_FLUSH.base + 5

    def test_broadway_beats_wheel(self):
        assert score_of("Ac Kd Qh Js Tc") > score_of("Ac 2d 3h 4s 5c")


class TestKickers:
    """同牌型下踢脚牌的比较."""

    def test_pair_kickers(self):
        assert score_of("Ac Ad Kh 7s 5c 3d 2h") > score_of("Ac Ad Qh Js Tc 3d 2h")

    def test_pair_uses_three_kickers(self):
        """第五、六大的牌不影响一对的分数."""
        assert score_of("Ac Ad Kh Qs Jc 3d 2h") == score_of("Ac Ad Kh Qs Jc 5d 4h")

    def test_two_pair_kicker(self):
        assert score_of("Kc Kd 5h 5s Ac 3d 2h") > score_of("Kc Kd 5h 5s Qc Jd Th")

    def test_three_pairs_uses_best_two(self):
        score = score_of("Kc Kd 5h 5s 7c 7d 2h")
        assert score == HandRank.TWO_PAIR.base + ((13 << 8) | (7 << 4) | 5)

    def test_trips_kickers(self):
        assert score_of("9c 9d 9h As 2c") > score_of("9c 9d 9h Ks Qc")

    def test_high_card_top_five(self):
        assert score_of("Ac Qd 9h 7s 5c 3d 2h") == score_of("Ac Qd 9h 7s 5c 4d 3h")

    def test_flush_compares_all_five(self):
        assert score_of("Ah Kh Qh Jh 9h") > score_of("Ah Kh Qh Jh 8h")

    def test_full_house_two_triplets(self):
        """两组三条时较大的做三条, 较小的拿两张做对子."""
        assert score_of("Kc Kd Kh Qs Qc Qd 2h") == HandRank.FULL_HOUSE.base + ((13 << 4) | 12)

    def test_full_house_trips_rank_dominates(self):
        assert score_of("3c 3d 3h 2s 2c") > score_of("2c 2d 2h As Ac")

    def test_quads_kicker(self):
        assert score_of("9c 9d 9h 9s Ac 2d 3h") > score_of("9c 9d 9h 9s Kc Qd Jh")


class TestShortAndLongHands:
    """非5到7张的手牌也能评估."""

    def test_two_cards(self):
        assert score_of("Ac Ad") == HandRank.ONE_PAIR.base + 14
        assert score_of("Ac Kd") == HandRank.HIGH_CARD.base + ((14 << 4) | 13)

    def test_four_card_quads_without_kicker(self):
        assert score_of("7c 7d 7h 7s") == HandRank.FOUR_OF_A_KIND.base + 7

    def test_four_card_two_pair(self):
        assert score_of("Kc Kd Qh Qs") == HandRank.TWO_PAIR.base + ((13 << 4) | 12)

    def test_nine_cards(self):
        assert category_of("2c 2d 2h 2s 3c 3d 3h 3s Ac") == HandRank.FOUR_OF_A_KIND
        assert score_of("2c 2d 2h 2s 3c 3d 3h 3s Ac") == HandRank.FOUR_OF_A_KIND.base + ((3 << 4) | 14)


class TestEvaluateContract:
    """评估器的约定."""

    def test_order_independent(self):
        assert score_of("2s As Js Ks Qs 9c Ts") == score_of("Ts 9c Qs Ks Js As 2s")

    def test_hand_not_modified(self):
        hand = Hand.from_str("Kh 2c As 7d 7s")
        evaluate(hand)
        assert str(hand) == "Kh 2c As 7d 7s"

    def test_missing_pattern_aborts(self, monkeypatch):
        """重复数与检测结果矛盾时必须抛出异常, 不能返回分数."""
        monkeypatch.setattr(evaluator_module, "find_pair", lambda ranks_desc: None)
        with pytest.raises(EvaluationInvariantError):
            score_of("Ac Ad 9h 7s 5c")

    def test_missing_trips_or_two_pair_aborts(self, monkeypatch):
        monkeypatch.setattr(evaluator_module, "find_three_of_a_kind", lambda ranks_desc: None)
        monkeypatch.setattr(evaluator_module, "find_two_pair", lambda ranks_desc: None)
        with pytest.raises(EvaluationInvariantError):
            score_of("Ac Ad 9h 9s 5c")


@pytest.mark.integration
def test_concurrent_evaluation_matches_sequential(seeded_deck):
    """多线程同时评估不同手牌, 结果与顺序评估一致."""
    from concurrent.futures import ThreadPoolExecutor

    hands = []
    for _ in range(7):
        hands.append(seeded_deck.deal_hand(7))
        seeded_deck.reset()
        seeded_deck.shuffle()

    expected = [evaluate(hand) for hand in hands]
    with ThreadPoolExecutor(max_workers=4) as executor:
        actual = list(executor.map(evaluate, hands * 20))

    assert actual == expected * 20
