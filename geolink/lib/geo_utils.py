import logging
from decimal import ROUND_HALF_UP, Decimal

import cython

from geolink.config import GEO_COORDINATE_PRECISION
from geolink.lib.exceptions import OutOfRangeError
from geolink.models.coordinate import Coordinate

if cython.compiled:
    from cython.cimports.libc.math import isfinite
else:
    from math import isfinite

# optionally signed decimal, ascii digits only; possessive, a digit run is never split
DECIMAL_PATTERN = r'-?\d++\.?+\d*+'

_QUANTUM = Decimal(1).scaleb(-GEO_COORDINATE_PRECISION)


def round_coordinate(value: float) -> float:
    """
    Round a coordinate value to GEO_COORDINATE_PRECISION fractional digits.

    Ties are rounded away from zero, based on the exact value of the float.

    >>> round_coordinate(47.385934133)
    47.38593
    """
    return float(Decimal(value).quantize(_QUANTUM, ROUND_HALF_UP))


def validate_coordinate(lat: float, lon: float) -> Coordinate:
    """
    Validate a coordinate pair.

    Both bounds are exclusive: poles and the antimeridian are rejected.
    Raises OutOfRangeError if the pair is not valid.
    """
    lat_: cython.double = lat
    lon_: cython.double = lon
    if not isfinite(lat_) or not isfinite(lon_):
        raise OutOfRangeError(f'Coordinate must be finite, got {lat!r},{lon!r}')
    if not (-90 < lat_ < 90):
        raise OutOfRangeError(f'Invalid latitude {lat!r}')
    if not (-180 < lon_ < 180):
        raise OutOfRangeError(f'Invalid longitude {lon!r}')
    return Coordinate(lat, lon)


def try_parse_coordinate(lat: str, lon: str) -> Coordinate | None:
    """
    Try to parse a coordinate from a pair of decimal strings.

    Returns None if either value is not a number or the pair is out of range.

    >>> try_parse_coordinate('34.0522', '-118.2437')
    Coordinate(lat=34.0522, lon=-118.2437)
    """
    try:
        return validate_coordinate(float(lat), float(lon))
    except ValueError as e:
        logging.debug('Rejected coordinate %r,%r: %s', lat, lon, e)
        return None


def format_coordinate(coordinate: Coordinate) -> str:
    """
    Format a coordinate as a plain decimal 'lat,lon' string.

    >>> format_coordinate(Coordinate(1.0, 1e-05))
    '1,0.00001'
    """
    return f'{_format_decimal(coordinate.lat)},{_format_decimal(coordinate.lon)}'


@cython.cfunc
def _format_decimal(value: float) -> str:
    # -0.0 + 0.0 == 0.0
    return format(Decimal(repr(value + 0.0)).normalize(), 'f')
