import re

from geolink.lib.geo_utils import DECIMAL_PATTERN, try_parse_coordinate
from geolink.models.coordinate import Coordinate

_LAT_LON_PARAMS_RE = re.compile(rf'lat=({DECIMAL_PATTERN})&lon=({DECIMAL_PATTERN})', re.ASCII)


class QueryParamsParser:
    @staticmethod
    def parse(s: str) -> Coordinate | None:
        """
        Parse adjacent lat= and lon= parameters, in that order, from anywhere in the input.

        >>> QueryParamsParser.parse('https://example.com/?lat=48.8584&lon=2.2945')
        Coordinate(lat=48.8584, lon=2.2945)
        """
        match = _LAT_LON_PARAMS_RE.search(s)
        if match is None:
            return None
        return try_parse_coordinate(match[1], match[2])
