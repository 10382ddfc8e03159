"""Slippy-map tile utilities (OpenStreetMap tile naming).

Components:
    GeoCoord: latitude/longitude in decimal degrees, projects onto tiles
    TileCoord: fractional position in the tile grid of one zoom level
    TileIndex: whole tile, with wrap-around neighbours and distances

Typical Usage:
    >>> from globecoord.tile import GeoCoord
    >>> home = GeoCoord.from_deg(48.1372, 11.5756)
    >>> index = home.to_tile_coordinates(14).as_tile_index()
    >>> print(index)  # "14/8718/5686"
    >>> home.tile_size(14)  # ~1630 m
"""

from .geo_coord import GeoCoord
from .tile_coord import TileCoord, TileIndex

__all__ = ["GeoCoord", "TileCoord", "TileIndex"]
