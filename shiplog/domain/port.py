from enum import Enum


class Port(str, Enum):
    """Harbors a ship can be docked at.

    Values are the snake-case names used in the event log.
    """

    SAN_FRANCISCO = "san_francisco"
    PORTO = "porto"
    LOS_ANGELES = "los_angeles"
    HONG_KONG = "hong_kong"
    TOKYO = "tokyo"
