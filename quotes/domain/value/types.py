"""Domain value types for the quotes catalog."""

from enum import Enum


class RankingPeriod(str, Enum):
    """Time window used to pick the top quote."""

    WEEKLY = "weekly"
    ALL_TIME = "alltime"
