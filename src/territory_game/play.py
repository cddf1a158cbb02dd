"""Non-interactive driver that lets strategies play both sides."""

import logging

from territory_game.config import DEFAULT_MAX_HEADLESS_TURNS, OWNER_PLAYER
from territory_game.strategy import GreedyFrontierStrategy

logger = logging.getLogger(__name__)


def run_headless(game, player_strategy=None, cpu_strategy=None, max_turns=DEFAULT_MAX_HEADLESS_TURNS):
    """Alternate both sides until a result or ``max_turns`` moves, then snapshot."""

    player_strategy = player_strategy or GreedyFrontierStrategy()
    turns = 0
    while not game.is_over and turns < int(max_turns):
        if game.turn == OWNER_PLAYER:
            color = player_strategy.choose_color(game, OWNER_PLAYER)
            game.apply_move(OWNER_PLAYER, color)
        else:
            game.play_cpu_turn(cpu_strategy)
        turns += 1

    if not game.is_over:
        logger.info("Stopped after %d turns without a result", turns)
    return game.snapshot()
