from enum import Enum

from chronospan import util


class Unit(Enum):
    """The closed set of duration units, largest first.

    Each member carries its unit letter, singular name, rank (bigger rank is
    a larger unit) and size in seconds.
    """

    WEEK = ("w", "week", 5, util.WEEK)
    DAY = ("d", "day", 4, util.DAY)
    HOUR = ("h", "hour", 3, util.HOUR)
    MINUTE = ("m", "minute", 2, util.MINUTE)
    SECOND = ("s", "second", 1, util.SECOND)

    def __init__(self, symbol: str, noun: str, rank: int, seconds: int):
        self.symbol: str = symbol
        self.noun: str = noun
        self.rank: int = rank
        self.seconds: int = seconds

    def pluralize(self, count: int) -> str:
        return self.noun if count == 1 else f"{self.noun}s"

    @classmethod
    def from_symbol(cls, symbol: str) -> "Unit | None":
        """Return the unit for a single-letter symbol, or None if unknown."""
        return _BY_SYMBOL.get(symbol)


_BY_SYMBOL: dict[str, Unit] = {unit.symbol: unit for unit in Unit}
