from typing import Protocol

from geolink.models.coordinate import Coordinate


class ParseStrategy(Protocol):
    @staticmethod
    def parse(s: str) -> Coordinate | None:
        """Parse a coordinate from the input, returning None if it is not in this format."""
        ...
