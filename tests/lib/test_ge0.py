from math import isclose

import pytest

from geolink.lib.exceptions import NoMatchError, OutOfRangeError
from geolink.lib.ge0 import GE0_ALPHABET, GE0_SYMBOLS, INVALID, Ge0Alphabet, ge0_decode, ge0_encode
from geolink.models.coordinate import Coordinate, Ge0Result


def test_alphabet_lookup():
    for i, c in enumerate(GE0_SYMBOLS):
        assert GE0_ALPHABET.lookup(c) == i


@pytest.mark.parametrize('c', ['!', '~', '+', '/', ' ', '\x00', 'é', '€'])
def test_alphabet_lookup_invalid(c):
    assert GE0_ALPHABET.lookup(c) == INVALID


@pytest.mark.parametrize(
    'symbols',
    [
        '',
        'ABC',
        GE0_SYMBOLS[:-1] + 'A',  # duplicate
        GE0_SYMBOLS[:-1] + 'é',  # non-ascii
        GE0_SYMBOLS + '~',
    ],
)
def test_alphabet_invalid(symbols):
    with pytest.raises(ValueError):
        Ge0Alphabet(symbols)


@pytest.mark.parametrize(
    ('code', 'expected'),
    [
        ('o4B4pYZsRs', Ge0Result(47.38593, 8.57666, 14.0)),
        # zoom only, center of the world
        ('o', Ge0Result(0.0, 0.0, 14.0)),
        ('Aw', Ge0Result(11.25, 22.5, 4.0)),
    ],
)
def test_decode(code, expected):
    assert ge0_decode(code) == expected


def test_decode_is_pure():
    assert ge0_decode('o4B4pYZsRs') == ge0_decode('o4B4pYZsRs')


@pytest.mark.parametrize(
    ('c', 'zoom'),
    [
        ('A', 4.0),
        ('B', 4.25),
        ('o', 14.0),
        ('_', 19.75),
    ],
)
def test_decode_zoom(c, zoom):
    assert ge0_decode(c + '4B4pYZsRs').zoom == zoom


def test_decode_ignores_symbols_past_precision():
    assert ge0_decode('o4B4pYZsRsXYZ') == ge0_decode('o4B4pYZsRs')


def test_decode_empty():
    with pytest.raises(NoMatchError):
        ge0_decode('')


@pytest.mark.parametrize('c', ['!', '~', 'é', '€'])
def test_decode_invalid_zoom(c):
    with pytest.raises(OutOfRangeError):
        ge0_decode(c + '4B4pYZsRs')


def test_decode_invalid_symbol():
    with pytest.raises(OutOfRangeError):
        ge0_decode('o4B4p!ZsRs')


@pytest.mark.parametrize(
    'code',
    [
        'oAAAAAAAAA',  # south pole, and the antimeridian
        'o_________',  # north pole, and the antimeridian
        'ogAAAAAAAA',  # antimeridian only
        'oQAAAAAAAA',  # south pole only
    ],
)
def test_decode_out_of_bounds(code):
    with pytest.raises(OutOfRangeError):
        ge0_decode(code)


def test_decode_custom_alphabet():
    alphabet = Ge0Alphabet(GE0_SYMBOLS[::-1])
    code = ge0_encode(47.38593, 8.57666, 14, alphabet=alphabet)
    assert code != ge0_encode(47.38593, 8.57666, 14)
    assert ge0_decode(code, alphabet=alphabet) == ge0_decode(ge0_encode(47.38593, 8.57666, 14))


def test_encode():
    assert ge0_encode(0, 0, 4, length=1) == 'Aw'


@pytest.mark.parametrize(
    ('lat', 'lon', 'zoom'),
    [
        (0, 0, 4),
        (47.38593, 8.57666, 14),
        (-33.8688, 151.2093, 17.5),
        (64.13, -21.94, 10.25),
        (-89.5, -179.5, 19.75),
    ],
)
@pytest.mark.parametrize('length', [3, 6, 9])
def test_encode_decode(lat, lon, zoom, length):
    code = ge0_encode(lat, lon, zoom, length)
    assert len(code) == length + 1

    decoded = ge0_decode(code)
    assert decoded.zoom == zoom

    # half of the precision cell, plus rounding
    assert isclose(decoded.lat, lat, abs_tol=90 / 8**length + 1e-5)
    assert isclose(decoded.lon, lon, abs_tol=180 / 8**length + 1e-5)


@pytest.mark.parametrize(
    ('zoom', 'expected'),
    [
        (0, 4.0),
        (25, 19.75),
        (14.1, 14.0),
        (14.125, 14.25),
        (14.375, 14.5),
        (4.125, 4.25),
    ],
)
def test_encode_clamps_zoom(zoom, expected):
    assert ge0_decode(ge0_encode(10, 10, zoom)).zoom == expected


@pytest.mark.parametrize('length', [0, 10, -1])
def test_encode_invalid_length(length):
    with pytest.raises(ValueError):
        ge0_encode(10, 10, 10, length)


@pytest.mark.parametrize(
    ('lat', 'lon'),
    [
        (90, 0),
        (-90, 0),
        (0, 180),
        (0, -180),
    ],
)
def test_encode_out_of_bounds(lat, lon):
    with pytest.raises(OutOfRangeError):
        ge0_encode(lat, lon, 10)


def test_result_coordinate():
    assert ge0_decode('o4B4pYZsRs').coordinate == Coordinate(47.38593, 8.57666)
