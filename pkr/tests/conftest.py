"""
pkr测试配置文件.

提供通用fixture和测试标记.
"""

import random

import pytest

from pkr.core import Deck, Hand


@pytest.fixture
def seeded_rng():
    """固定种子的随机数生成器fixture"""
    return random.Random(42)


@pytest.fixture
def seeded_deck(seeded_rng):
    """已洗好的确定性牌组fixture"""
    deck = Deck(seeded_rng)
    deck.shuffle()
    return deck


@pytest.fixture
def make_hand():
    """从牌面字符串创建手牌的fixture"""
    return Hand.from_str


# 测试标记定义
def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
    config.addinivalue_line(
        "markers", "integration: 标记集成测试"
    )
