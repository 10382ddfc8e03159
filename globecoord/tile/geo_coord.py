"""Degree-based geographic coordinates for slippy-map tiling.

Map data such as OpenStreetMap tiles is addressed with GPS style latitude and
longitude in decimal degrees. GeoCoord carries those two values as typed
Latitude/Longitude units and bridges them to the tile grid and to the
radian-based GeographicPoint/CartesianPoint kernel.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import TYPE_CHECKING

from globecoord.config import ReferenceSphere
from globecoord.errors import TileCoordinateError
from globecoord.geo import CartesianPoint, GeographicPoint
from globecoord.unit import Latitude, Longitude, Meter, Unit

if TYPE_CHECKING:
    from globecoord.tile.tile_coord import TileCoord

logger = logging.getLogger(__name__)


def _as_angle(value, unit_type):
    # plain numbers are decimal degrees
    if isinstance(value, Unit):
        return value.as_unit(unit_type)
    return unit_type(value)


@dataclass
class GeoCoord:
    """Geo-coordinates on the world map (GPS position) in decimal degrees.

    The class is mutable so a position can be moved in place with
    ``add_move``.

    Attributes:
        latitude (Latitude): North/South position, -90 to +90 degrees.
        longitude (Longitude): East/West position, -180 to +180 degrees.

    Example:
        >>> seoul = GeoCoord.from_deg(37.5665, 126.9780)
        >>> seoul.to_tile_coordinates(10).as_tile_index()
        TileIndex(x=873, y=396, zoom=10)
    """

    latitude: Latitude
    longitude: Longitude

    def __post_init__(self):
        self.latitude = _as_angle(self.latitude, Latitude)
        self.longitude = _as_angle(self.longitude, Longitude)

    @classmethod
    def from_deg(cls, lat: float, lon: float) -> GeoCoord:
        """Create a GeoCoord from latitude and longitude values in degrees.

        Args:
            lat (float): Latitude in decimal degrees (-90 to +90).
            lon (float): Longitude in decimal degrees (-180 to +180).
        """
        return cls(Latitude(lat), Longitude(lon))

    @classmethod
    def from_rad(cls, lat: float, lon: float) -> GeoCoord:
        """Create a GeoCoord from latitude and longitude values in radians."""
        return cls(Latitude.from_si(lat), Longitude.from_si(lon))

    @classmethod
    def from_geographic(cls, point: GeographicPoint) -> GeoCoord:
        return cls.from_rad(point.latitude, point.longitude)

    @classmethod
    def from_cartesian(cls, point: CartesianPoint, sphere: ReferenceSphere | None = None) -> GeoCoord:
        """Surface position below a Cartesian point (altitude is dropped)."""
        return cls.from_geographic(GeographicPoint.from_cartesian(point, sphere))

    def to_geographic(self, altitude: float = 0.0) -> GeographicPoint:
        return GeographicPoint(float(self.longitude), float(self.latitude), altitude)

    def to_cartesian(self, sphere: ReferenceSphere | None = None) -> CartesianPoint:
        """Compute the position on the reference sphere surface."""
        return CartesianPoint.from_geographic(self.to_geographic(), sphere)

    def to_tile_coordinates(self, zoom: int) -> TileCoord:
        """Convert GPS coordinates to tile coordinates.

        Uses the OSM naming for tiles
        (https://wiki.openstreetmap.org/wiki/Slippy_map_tilenames): x grows
        eastwards with longitude and y grows southwards. The y axis is not
        linear in latitude, tiles get stretched towards the poles to match
        the Mercator projection.

        Coordinates slightly out of bounds wrap around the globe. This only
        works if they are not far enough out to wrap past the equator.

        Args:
            zoom: Zoom level of the tile grid (2**zoom tiles per axis).

        Returns:
            TileCoord: Fractional tile position.

        Raises:
            TileCoordinateError: If the position falls outside the tile grid
                even after wrapping.
        """
        from globecoord.tile.tile_coord import TileCoord

        tiles = 2**zoom
        lat = float(self.latitude)

        x = ((self.longitude.to(Longitude) + 180.0) / 360.0 * tiles) % tiles
        mercator = math.tan(lat) + 1.0 / math.cos(lat)
        if not mercator > 0.0:
            msg = f"{self} cannot be projected on the tile grid"
            raise TileCoordinateError(msg)
        y = (1.0 - math.log(mercator) / math.pi) / 2.0 * tiles

        if y > tiles:
            logger.debug("Tile y %s beyond the south edge, wrapping around", y)
            y = tiles - y % tiles
            x = (x + tiles / 2.0) % tiles
        elif y < 0.0:
            logger.debug("Tile y %s beyond the north edge, wrapping around", y)
            y = abs(y)
            x = (x + tiles / 2.0) % tiles

        if x > tiles or y > tiles:
            msg = f"{self} @ zoom {zoom} -> {x},{y}"
            raise TileCoordinateError(msg)
        return TileCoord(x, y, zoom)

    def tile_size(self, zoom: int, sphere: ReferenceSphere | None = None) -> Meter:
        """Width of a tile at this position, measured on the sphere surface.

        Returns the straight-line distance between this position and the
        position one tile further east.
        """
        coord = self.to_tile_coordinates(zoom)
        pos = self.to_cartesian(sphere)
        return Meter(coord.right().to_geo_coord().to_cartesian(sphere).distance(pos))

    def add_move(self, d_lon: float, d_lat: float) -> None:
        """Add a displacement in decimal degrees, in place."""
        self.latitude = self.latitude + Latitude(d_lat)
        self.longitude = self.longitude + Longitude(d_lon)

    def __str__(self) -> str:
        return f"({self.latitude}, {self.longitude})"
