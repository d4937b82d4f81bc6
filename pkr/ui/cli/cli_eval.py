"""牌型评估命令行.

提供evaluate和deal两个子命令.
"""

import logging

import click

from pkr.config import DealConfig, LoggingConfig, configure_logging
from pkr.core import Deck, Hand, InvalidCardToken, InvalidHandSize
from pkr.core.hand import MAX_CARDS, MIN_CARDS
from .render import CLIRenderer

logger = logging.getLogger(__name__)


@click.group()
@click.option('--log-level', default='WARNING', show_default=True,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='日志级别')
def cli(log_level: str) -> None:
    """扑克牌型评估工具."""
    configure_logging(LoggingConfig(log_level=log_level))


@cli.command()
@click.argument('cards')
@click.option('--symbols', is_flag=True, help='用花色符号显示')
def evaluate(cards: str, symbols: bool) -> None:
    """评估一手牌, 如 "As Ks Qs Js Ts 2c 3d"."""
    try:
        hand = Hand.from_str(cards)
    except (InvalidHandSize, InvalidCardToken) as e:
        raise click.BadParameter(str(e), param_hint='CARDS')

    click.echo(CLIRenderer.render_evaluation(hand, hand.get_score(), symbols))


@cli.command()
@click.option('--cards', 'num_cards', default=7, show_default=True,
              type=click.IntRange(MIN_CARDS, MAX_CARDS), help='发牌张数')
@click.option('--seed', type=int, default=None, help='随机种子')
@click.option('--symbols', is_flag=True, help='用花色符号显示')
def deal(num_cards: int, seed: int, symbols: bool) -> None:
    """随机发一手牌并评估."""
    config = DealConfig(num_cards=num_cards, seed=seed)
    deck = Deck(config.create_rng())
    deck.shuffle()
    hand = deck.deal_hand(config.num_cards)
    logger.info("发牌: %s (seed=%s)", hand, config.seed)

    click.echo(CLIRenderer.render_evaluation(hand, hand.get_score(), symbols))


def main() -> None:
    """CLI主入口."""
    cli()


if __name__ == "__main__":
    main()
