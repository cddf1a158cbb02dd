"""Exceptions raised by the board and the game engine."""


class TerritoryError(ValueError):
    """Base class for all territory game errors."""


class OutOfRange(TerritoryError, IndexError):
    """A cell id outside the board bounds."""


class InvalidGraph(TerritoryError):
    """Malformed cell records or adjacency at board construction."""


class InvalidSetup(TerritoryError):
    """Bad palette or starting-cell configuration."""


class IllegalMove(TerritoryError):
    """A move rejected for legality, turn order or a finished game."""


__all__ = [
    "TerritoryError",
    "OutOfRange",
    "InvalidGraph",
    "InvalidSetup",
    "IllegalMove",
]
