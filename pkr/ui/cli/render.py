"""CLI渲染模块.

把手牌和评估分数渲染成命令行输出文本, 与评估逻辑分离.
"""

from pkr.core import Hand, HandRank
from pkr.core.eval import decode_ranks


class CLIRenderer:
    """CLI渲染器.

    所有渲染方法都是纯函数, 仅依赖传入的数据.
    """

    @staticmethod
    def render_hand(hand: Hand, unicode_suits: bool = False) -> str:
        """渲染手牌.

        Args:
            hand: 手牌
            unicode_suits: 是否用花色符号代替字母

        Returns:
            以空格分隔的牌面字符串
        """
        if not unicode_suits:
            return str(hand)
        return " ".join(f"{card.rank.char}{card.suit.symbol}" for card in hand)

    @staticmethod
    def render_score(score: int) -> str:
        """渲染分数、牌型和决定胜负的点数."""
        hand_rank = HandRank.from_score(score)
        ranks = " ".join(rank.char for rank in decode_ranks(score))
        return f"{hand_rank.label} [{ranks}] score={score}"

    @staticmethod
    def render_evaluation(hand: Hand, score: int, unicode_suits: bool = False) -> str:
        """渲染一次完整的评估结果."""
        lines = [
            f"手牌: {CLIRenderer.render_hand(hand, unicode_suits)}",
            f"牌型: {CLIRenderer.render_score(score)}",
        ]
        return "\n".join(lines)
