import logging

from geolink.config import GE0_LINK_PREFIXES
from geolink.lib.exceptions import CoordinateParseError
from geolink.lib.ge0 import ge0_decode
from geolink.models.coordinate import Coordinate


def ge0_link_code(s: str) -> str | None:
    """
    Extract the Ge0 code from a link.

    Returns None if the link has no known prefix.

    >>> ge0_link_code('https://omaps.app/o4B4pYZsRs/Zurich?lang=de')
    'o4B4pYZsRs'
    """
    for prefix in GE0_LINK_PREFIXES:
        if s.startswith(prefix):
            data = s[len(prefix) :]
            break
    else:
        return None

    data = data.partition('?')[0]
    return data.partition('/')[0]


class Ge0LinkParser:
    @staticmethod
    def parse(s: str) -> Coordinate | None:
        """Parse a Ge0 link, discarding the zoom level."""
        code = ge0_link_code(s)
        if not code:
            return None

        try:
            result = ge0_decode(code)
        except CoordinateParseError as e:
            logging.debug('Rejected Ge0 code %r: %s', code, e)
            return None

        return result.coordinate
