"""Command line interface for inspecting coordinate conversions.

Subcommands:
    to-cartesian   LON LAT [ALT]           geographic -> Cartesian
    to-geographic  X Y Z                   Cartesian -> geographic
    distance       LON1 LAT1 LON2 LAT2     great-circle angle and surface length
    rotate         X Y Z AX AY AZ THETA    rotate a point about an axis
    tile           LAT LON ZOOM            slippy-map tile of a GPS position

Angles are radians unless ``--degrees`` is given. The reference sphere radius
comes from ``--radius`` (meters), then the GLOBECOORD_RADIUS environment
variable, then the Earth default.

Example:
    $ python -m globecoord to-cartesian 90 45 --degrees
    $ python -m globecoord rotate 1 0 0  0 0 1  90 --degrees
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from globecoord.config import ReferenceSphere
from globecoord.geo import (
    CartesianPoint,
    GeographicPoint,
    initial_bearing,
    linear_distance,
    surface_distance,
)
from globecoord.logging_config import setup_logging
from globecoord.tile import GeoCoord
from globecoord.unit import Degree, Meter, Radian

logger = logging.getLogger(__name__)

CONSOLE = Console()


def _angle_in(value: float, degrees: bool) -> Radian:
    return Degree(value) if degrees else Radian(value)


def _angle_out(radians: float, degrees: bool) -> str:
    if degrees:
        return f"{Radian(radians).to(Degree):.10g} °"
    return f"{radians:.10g} rad"


def _sphere(args: argparse.Namespace) -> ReferenceSphere:
    if args.radius is not None:
        return ReferenceSphere(Meter(args.radius), "custom")
    return ReferenceSphere.from_env()


def _table(title: str, rows: Sequence[tuple[str, str]]) -> Table:
    table = Table(title=title)
    table.add_column("Quantity", style="cyan")
    table.add_column("Value", justify="right")
    for name, value in rows:
        table.add_row(name, value)
    return table


def _to_cartesian(args: argparse.Namespace) -> Table:
    sphere = _sphere(args)
    geo = GeographicPoint(_angle_in(args.lon, args.degrees), _angle_in(args.lat, args.degrees), args.alt)
    cart = CartesianPoint.from_geographic(geo, sphere)
    return _table(
        f"Cartesian coordinates (R = {sphere.radius})",
        [("x", f"{cart.x:.6f}"), ("y", f"{cart.y:.6f}"), ("z", f"{cart.z:.6f}")],
    )


def _to_geographic(args: argparse.Namespace) -> Table:
    sphere = _sphere(args)
    geo = GeographicPoint.from_cartesian(CartesianPoint(args.x, args.y, args.z), sphere)
    return _table(
        f"Geographic coordinates (R = {sphere.radius})",
        [
            ("longitude", _angle_out(geo.longitude, args.degrees)),
            ("latitude", _angle_out(geo.latitude, args.degrees)),
            ("altitude", f"{geo.altitude:.6f}"),
        ],
    )


def _distance(args: argparse.Namespace) -> Table:
    sphere = _sphere(args)
    a = GeographicPoint(_angle_in(args.lon1, args.degrees), _angle_in(args.lat1, args.degrees))
    b = GeographicPoint(_angle_in(args.lon2, args.degrees), _angle_in(args.lat2, args.degrees))
    return _table(
        "Distance",
        [
            ("central angle", _angle_out(a.distance(b), args.degrees)),
            ("surface distance", f"{float(surface_distance(a, b, sphere)):.3f} m"),
            ("chord length", f"{float(linear_distance(a, b, sphere)):.3f} m"),
            ("initial bearing", _angle_out(initial_bearing(a, b, sphere), args.degrees)),
        ],
    )


def _rotate(args: argparse.Namespace) -> Table:
    point = CartesianPoint(args.x, args.y, args.z)
    point.rotate(CartesianPoint(args.ax, args.ay, args.az), _angle_in(args.theta, args.degrees))
    return _table(
        "Rotated point",
        [("x", f"{point.x:.6f}"), ("y", f"{point.y:.6f}"), ("z", f"{point.z:.6f}")],
    )


def _tile(args: argparse.Namespace) -> Table:
    sphere = _sphere(args)
    coord = GeoCoord.from_deg(args.lat, args.lon)
    tile = coord.to_tile_coordinates(args.zoom)
    return _table(
        f"Tile at zoom {args.zoom}",
        [
            ("tile x", f"{tile.x:.4f}"),
            ("tile y", f"{tile.y:.4f}"),
            ("tile", str(tile.as_tile_index())),
            ("tile size", f"{float(coord.tile_size(args.zoom, sphere)):.3f} m"),
        ],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="globecoord", description="Cartesian/geographic coordinate toolkit")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--log-file", default=None, help="also write logs to this file")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--degrees", action="store_true", help="angles in degrees instead of radians")
    common.add_argument("--radius", type=float, default=None, help="reference sphere radius in meters")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("to-cartesian", parents=[common], help="geographic -> Cartesian")
    p.add_argument("lon", type=float)
    p.add_argument("lat", type=float)
    p.add_argument("alt", type=float, nargs="?", default=0.0)
    p.set_defaults(handler=_to_cartesian)

    p = sub.add_parser("to-geographic", parents=[common], help="Cartesian -> geographic")
    for name in ("x", "y", "z"):
        p.add_argument(name, type=float)
    p.set_defaults(handler=_to_geographic)

    p = sub.add_parser("distance", parents=[common], help="distance between two geographic points")
    for name in ("lon1", "lat1", "lon2", "lat2"):
        p.add_argument(name, type=float)
    p.set_defaults(handler=_distance)

    p = sub.add_parser("rotate", parents=[common], help="rotate a point about an axis through the origin")
    for name in ("x", "y", "z", "ax", "ay", "az", "theta"):
        p.add_argument(name, type=float)
    p.set_defaults(handler=_rotate)

    p = sub.add_parser("tile", parents=[common], help="slippy-map tile of a GPS position (degrees)")
    p.add_argument("lat", type=float)
    p.add_argument("lon", type=float)
    p.add_argument("zoom", type=int)
    p.set_defaults(handler=_tile)

    return parser


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    """Run the CLI and return the process exit status."""
    console = console or CONSOLE
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    try:
        table = args.handler(args)
    except ValueError as exc:
        logger.debug("%s failed: %s", args.command, exc)
        console.print(f"[red]error:[/red] {exc}")
        return 1

    console.print(table)
    return 0
