import re

from geolink.lib.geo_utils import DECIMAL_PATTERN, try_parse_coordinate
from geolink.models.coordinate import Coordinate

_GEO_URI_RE = re.compile(rf'^geo:({DECIMAL_PATTERN}),({DECIMAL_PATTERN})', re.ASCII)


class GeoUriParser:
    @staticmethod
    def parse(s: str) -> Coordinate | None:
        """
        Parse a geo URI.

        Anything after the longitude (altitude, parameters) is ignored.

        >>> GeoUriParser.parse('geo:34.0522,-118.2437;u=35')
        Coordinate(lat=34.0522, lon=-118.2437)
        """
        match = _GEO_URI_RE.match(s)
        if match is None:
            return None
        return try_parse_coordinate(match[1], match[2])
