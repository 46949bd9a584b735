from typing import NamedTuple

from geolink.models.types import Latitude, Longitude, Zoom


class Coordinate(NamedTuple):
    lat: Latitude
    lon: Longitude


class Ge0Result(NamedTuple):
    lat: Latitude
    lon: Longitude
    zoom: Zoom

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.lat, self.lon)
