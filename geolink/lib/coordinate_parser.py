import logging

import geolink.lib.cython_detect  # DO NOT REMOVE  # noqa: F401
from geolink.models.coordinate import Coordinate
from geolink.models.parse_strategy import ParseStrategy
from geolink.parsers.ge0_link_parser import Ge0LinkParser
from geolink.parsers.geo_uri_parser import GeoUriParser
from geolink.parsers.lat_lon_parser import LatLonParser
from geolink.parsers.query_params_parser import QueryParamsParser

# ordered by priority, the generic pair is the last resort
PARSE_STRATEGIES: tuple[type[ParseStrategy], ...] = (
    GeoUriParser,
    Ge0LinkParser,
    QueryParamsParser,
    LatLonParser,
)


def parse_coordinate(s: str) -> Coordinate | None:
    """
    Parse a coordinate from an arbitrary, already percent-decoded string.

    Returns None if no strategy recognizes the input.

    >>> parse_coordinate('geo:1.0,2.0?lat=3.0&lon=4.0')
    Coordinate(lat=1.0, lon=2.0)
    """
    for strategy in PARSE_STRATEGIES:
        result = strategy.parse(s)
        if result is not None:
            logging.debug('Parsed %r with %s', s, strategy.__name__)
            return result

    logging.debug('No coordinate found in %r', s)
    return None
