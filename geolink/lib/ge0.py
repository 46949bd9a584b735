import cython

from geolink.lib.exceptions import NoMatchError, OutOfRangeError
from geolink.lib.geo_utils import round_coordinate, validate_coordinate
from geolink.models.coordinate import Ge0Result

if cython.compiled:
    from cython.cimports.libc.math import floor
else:
    from math import floor

# 64 chars to encode 6 bits, the position is the value
GE0_SYMBOLS = 'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_'
INVALID = 255

_MAX_POINT_BYTES = 10
_MAX_COORD_BITS = _MAX_POINT_BYTES * 3  # 3 bits of latitude and longitude per byte
_MAX_LAT_LON_CHARS = _MAX_POINT_BYTES - 1

_MIN_ZOOM = 4.0
_MAX_SYMBOL_VALUE = 63


class Ge0Alphabet:
    """
    Ordered 64-symbol alphabet with its reverse lookup table.

    The table is a 256-entry bytes object mapping a character code to its
    6-bit value, or to INVALID for characters outside of the alphabet.
    """

    __slots__ = ('_reverse', 'symbols')

    def __init__(self, symbols: str) -> None:
        if len(symbols) != 64 or len(set(symbols)) != 64 or not symbols.isascii():
            raise ValueError(f'Ge0 alphabet must have 64 distinct ascii symbols, got {symbols!r}')

        reverse = bytearray([INVALID]) * 256
        for i, c in enumerate(symbols):
            reverse[ord(c)] = i

        self.symbols = symbols
        self._reverse = bytes(reverse)

    def lookup(self, c: str) -> int:
        """
        Get the 6-bit value of a symbol, or INVALID.

        >>> GE0_ALPHABET.lookup('o')
        40
        """
        code: cython.int = ord(c)
        if code > 255:
            return INVALID
        return self._reverse[code]


GE0_ALPHABET = Ge0Alphabet(GE0_SYMBOLS)


def ge0_decode(code: str, *, alphabet: Ge0Alphabet = GE0_ALPHABET) -> Ge0Result:
    """
    Decode a Ge0 code into a coordinate pair and zoom level.

    The first symbol holds the zoom, each following symbol (up to 9) holds
    3 bits of latitude interleaved with 3 bits of longitude. Symbols past
    the 9th are ignored.

    Raises NoMatchError for an empty code and OutOfRangeError for invalid
    symbols or when the decoded point is not a valid coordinate.

    >>> ge0_decode('o4B4pYZsRs')
    Ge0Result(lat=47.38593, lon=8.57666, zoom=14.0)
    """
    if not code:
        raise NoMatchError('Ge0 code cannot be empty')

    zoom_value: cython.int = alphabet.lookup(code[0])
    if zoom_value > _MAX_SYMBOL_VALUE:
        raise OutOfRangeError(f'Invalid Ge0 zoom symbol {code[0]!r}')
    zoom = zoom_value / 4 + _MIN_ZOOM

    lat_lon = code[1 : 1 + _MAX_LAT_LON_CHARS]
    lat: cython.longlong = 0
    lon: cython.longlong = 0
    shift: cython.int = _MAX_COORD_BITS - 3

    for c in lat_lon:
        a: cython.int = alphabet.lookup(c)
        if a > _MAX_SYMBOL_VALUE:
            raise OutOfRangeError(f'Invalid Ge0 symbol {c!r}')

        # odd bits are latitude, even bits are longitude
        lat |= (((a >> 5) & 1) << 2 | ((a >> 3) & 1) << 1 | ((a >> 1) & 1)) << shift
        lon |= (((a >> 4) & 1) << 2 | ((a >> 2) & 1) << 1 | (a & 1)) << shift
        shift -= 3

    # move to the center of the precision cell
    middle_of_square: cython.longlong = 1 << (3 * (_MAX_POINT_BYTES - len(lat_lon)) - 1)
    lat += middle_of_square
    lon += middle_of_square

    lat_deg = round_coordinate(lat / ((1 << _MAX_COORD_BITS) - 1) * 180 - 90)
    lon_deg = round_coordinate(lon / (1 << _MAX_COORD_BITS) * 360 - 180)
    validate_coordinate(lat_deg, lon_deg)
    return Ge0Result(lat_deg, lon_deg, zoom)


def ge0_encode(
    lat: float,
    lon: float,
    zoom: float,
    length: int = _MAX_LAT_LON_CHARS,
    *,
    alphabet: Ge0Alphabet = GE0_ALPHABET,
) -> str:
    """
    Encode a coordinate pair and zoom level into a Ge0 code.

    The zoom is clamped to the representable range and rounded half up to 0.25.
    Length is the number of coordinate symbols (1 to 9), more symbols give
    a smaller precision cell.
    """
    if not 1 <= length <= _MAX_LAT_LON_CHARS:
        raise ValueError(f'Ge0 code length must be between 1 and {_MAX_LAT_LON_CHARS}, got {length}')
    validate_coordinate(lat, lon)

    # ties round up, 14.125 encodes as 14.25
    zoom_value: cython.int = min(max(int(floor((zoom - _MIN_ZOOM) * 4 + 0.5)), 0), _MAX_SYMBOL_VALUE)
    max_value: cython.longlong = (1 << _MAX_COORD_BITS) - 1
    lat_bits: cython.longlong = min(max(round((lat + 90) / 180 * max_value), 0), max_value)
    lon_bits: cython.longlong = min(max(round((lon + 180) / 360 * (1 << _MAX_COORD_BITS)), 0), max_value)

    symbols = alphabet.symbols
    str_list = [symbols[zoom_value]] * (length + 1)
    shift: cython.int = _MAX_COORD_BITS - 3
    i: cython.int

    for i in range(1, length + 1):
        lat3: cython.int = (lat_bits >> shift) & 7
        lon3: cython.int = (lon_bits >> shift) & 7
        digit: cython.int = (
            ((lat3 >> 2) & 1) << 5
            | ((lon3 >> 2) & 1) << 4
            | ((lat3 >> 1) & 1) << 3
            | ((lon3 >> 1) & 1) << 2
            | (lat3 & 1) << 1
            | (lon3 & 1)
        )
        str_list[i] = symbols[digit]
        shift -= 3

    return ''.join(str_list)
