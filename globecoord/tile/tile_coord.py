"""Positions and indices in the slippy-map tile grid.

At zoom level z the world is cut into 2**z by 2**z square tiles. TileCoord
is a fractional position in that grid (so (0.5, 0.5) is the middle of tile
(0, 0)) and TileIndex names a whole tile.
"""

from __future__ import annotations

from dataclasses import dataclass
import math

from globecoord.tile.geo_coord import GeoCoord
from globecoord.unit import Latitude, Longitude


@dataclass(frozen=True)
class TileCoord:
    """A coordinate in the OSM tile coordinate system.

    Attributes:
        x (float): West/East position, 0 at longitude -180°.
        y (float): North/South position, 0 at the northern edge of the grid.
        zoom (int): Zoom level.
    """

    x: float
    y: float
    zoom: int

    @property
    def tiles(self) -> int:
        """Number of tiles along each axis at this zoom level."""
        return 2**self.zoom

    def to_geo_coord(self) -> GeoCoord:
        """Inverse Mercator projection of this tile position."""
        lon = self.x / self.tiles * 360.0 - 180.0
        lat_rad = math.atan(math.sinh(math.pi * (1.0 - 2.0 * self.y / self.tiles)))
        return GeoCoord(Latitude.from_si(lat_rad), Longitude(lon))

    def center(self) -> TileCoord:
        """Offset this position by half a tile size.

        Starting from the upper left corner of a tile this gives its middle.
        """
        return TileCoord(self.x + 0.5, self.y + 0.5, self.zoom)

    def up(self) -> TileCoord:
        return TileCoord(self.x, self.y - 1.0, self.zoom)

    def down(self) -> TileCoord:
        return TileCoord(self.x, self.y + 1.0, self.zoom)

    def right(self) -> TileCoord:
        return TileCoord(self.x + 1.0, self.y, self.zoom)

    def as_tile_index(self) -> TileIndex:
        """The tile containing this position (lossy, wraps into the grid)."""
        return TileIndex(math.floor(self.x), math.floor(self.y), self.zoom)


@dataclass(frozen=True)
class TileIndex:
    """Integer index of one tile, always inside the grid of its zoom level.

    Attributes:
        x (int): Column, 0 to 2**zoom - 1.
        y (int): Row, 0 to 2**zoom - 1.
        zoom (int): Zoom level.
    """

    x: int
    y: int
    zoom: int

    def __post_init__(self):
        tiles = 2**self.zoom
        object.__setattr__(self, "x", int(self.x) % tiles)
        object.__setattr__(self, "y", int(self.y) % tiles)

    def as_coord(self) -> TileCoord:
        """Upper left corner of this tile."""
        return TileCoord(float(self.x), float(self.y), self.zoom)

    def right(self) -> TileIndex:
        return self.offset(1, 0)

    def down(self) -> TileIndex:
        return self.offset(0, 1)

    def offset(self, dx: int, dy: int) -> TileIndex:
        """Move by whole tiles, wrapping around the grid on both axes."""
        return TileIndex(self.x + dx, self.y + dy, self.zoom)

    def distance_squared(self, origin: TileIndex) -> int:
        """Squared tile distance to ``origin``, taking the shorter way around.

        Raises:
            ValueError: If both indices use different zoom levels.
        """
        if self.zoom != origin.zoom:
            msg = f"Zoom mismatch: {self.zoom} != {origin.zoom}"
            raise ValueError(msg)
        tiles = 2**self.zoom
        dx = abs(self.x - origin.x)
        dx = min(dx, tiles - dx)
        dy = abs(self.y - origin.y)
        dy = min(dy, tiles - dy)
        return dx * dx + dy * dy

    def __str__(self) -> str:
        return f"{self.zoom}/{self.x}/{self.y}"
