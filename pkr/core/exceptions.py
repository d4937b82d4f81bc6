"""
扑克牌型评估异常定义.

区分调用方可恢复的输入异常(向上抛)和内部不变量异常(必须中止).
"""


class PkrError(Exception):
    """pkr基础异常类"""
    pass


class InvalidHandSize(PkrError, ValueError):
    """手牌数量超出允许范围异常"""
    pass


class InvalidCardToken(PkrError, ValueError):
    """卡牌字符串格式错误异常"""
    pass


class EvaluationInvariantError(PkrError, RuntimeError):
    """评估器内部不变量被破坏.

    调用方不应捕获该异常, 否则会得到错误的分数.
    """
    pass


class ScoreOverflowError(EvaluationInvariantError):
    """踢脚牌编码超出牌型间隔异常"""
    pass
