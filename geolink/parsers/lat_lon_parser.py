import re

from geolink.lib.geo_utils import DECIMAL_PATTERN, try_parse_coordinate
from geolink.models.coordinate import Coordinate

# the pair must not continue a word, e.g. 'x1,2'
_LAT_LON_RE = re.compile(rf'(?:^|\W)({DECIMAL_PATTERN}),({DECIMAL_PATTERN})', re.ASCII)


class LatLonParser:
    @staticmethod
    def parse(s: str) -> Coordinate | None:
        """
        Parse the first 'lat,lon' pair found in the input.

        >>> LatLonParser.parse('https://www.google.com/maps/@40.7128,-74.0060,15z')
        Coordinate(lat=40.7128, lon=-74.006)
        """
        match = _LAT_LON_RE.search(s)
        if match is None:
            return None
        return try_parse_coordinate(match[1], match[2])
