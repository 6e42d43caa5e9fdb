import math
from typing import Optional


def parse_coordinate(value: Optional[str]) -> float:
    """
    Parse a latitude or longitude supplied by a client
    :return: the coordinate, or 0.0 if the value is missing or malformed
    """
    if not value:
        return 0.0

    try:
        coordinate = float(value)
    except (TypeError, ValueError):
        return 0.0

    if not math.isfinite(coordinate):
        return 0.0
    return coordinate
