from territory_game import GAME_STANDARD, TerritoryGame
from territory_game.runtime import configure_logging

from conftest import grid_records


def test_import_package():
    import territory_game

    assert territory_game.__version__


def test_standard_spec_covers_default_board():
    assert GAME_STANDARD.bounds == (0.0, 0.0, 800.0, 600.0)
    assert len(GAME_STANDARD.palette) == 6


def test_from_records_with_standard_spec():
    colors = [GAME_STANDARD.palette[i % 6] for i in range(80 * 60)]
    records = grid_records(80, 60, colors, size=10.0)
    game = TerritoryGame.from_records(records, spec=GAME_STANDARD)

    assert game.start_cells == {1: 59 * 80, 2: 79}
    assert game.snapshot().status_text() == "Your turn"


def test_configure_logging_is_callable():
    configure_logging()
