"""
手牌容器模块.
"""

from .hand import Hand, MIN_CARDS, MAX_CARDS

__all__ = ['Hand', 'MIN_CARDS', 'MAX_CARDS']
