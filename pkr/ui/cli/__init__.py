"""牌型评估CLI模块.

包括:
- click命令组
- 渲染器(显示逻辑)
"""

from .cli_eval import cli, main
from .render import CLIRenderer

__all__ = ['cli', 'main', 'CLIRenderer']
