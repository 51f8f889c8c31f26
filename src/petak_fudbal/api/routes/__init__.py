"""API route handlers."""

from petak_fudbal.api.routes import awards, matches, periods, players, rivalries

__all__ = [
    "awards",
    "matches",
    "periods",
    "players",
    "rivalries",
]
