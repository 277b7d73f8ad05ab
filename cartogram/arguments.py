"""Command-line options of the cartogram generator."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import NoReturn, Optional

DEFAULT_LONG_GRID_LENGTH = 256
WORLD_LONG_GRID_LENGTH = 512
MAX_ALLOWED_AUTOSCALE_GRID_LENGTH = 8192
DEFAULT_TARGET_POINTS_PER_INSET = 10000
DEFAULT_MINIMUM_POLYGON_AREA = 1e-5


@dataclass
class Arguments:
    """Settings chosen on the command line."""

    geo_file_name: str = ""
    visual_file_name: str = ""
    n_grid_rows_or_cols: int = DEFAULT_LONG_GRID_LENGTH
    max_allowed_autoscale_grid_length: int = MAX_ALLOWED_AUTOSCALE_GRID_LENGTH
    target_points_per_inset: int = DEFAULT_TARGET_POINTS_PER_INSET
    min_integrations: int = 0
    world: bool = False
    triangulation: bool = True
    qtdt_method: bool = True
    simplify: bool = True
    remove_tiny_polygons: bool = False
    min_polygon_area: float = DEFAULT_MINIMUM_POLYGON_AREA
    rays: bool = False
    skip_projection: bool = False
    make_csv: bool = False
    output_equal_area_map: bool = False
    redirect_exports_to_stdout: bool = False
    export_preprocessed: bool = False
    export_time_report: bool = False
    plot_density: bool = False
    plot_grid: bool = False
    plot_intersections: bool = False
    plot_polygons: bool = False
    plot_quadtree: bool = False
    output_shifted_insets: bool = False
    id_col: Optional[str] = None
    area_col: Optional[str] = None
    inset_col: str = "Inset"
    color_col: str = "Color"
    label_col: str = "Label"


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        self.print_help(sys.stderr)
        self.exit(1, f"ERROR: {message}.\n")


def _unsigned(text: str) -> int:
    try:
        value = int(text, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"not a non-negative integer: {text!r}")
    return value


def _build_parser() -> _Parser:
    parser = _Parser(prog="cartogram")
    parser.add_argument("geometry_file", help="File path: GeoJSON file")
    parser.add_argument(
        "visual_variable_file",
        nargs="?",
        default=None,
        help="File path: CSV file with ID, area, and (optionally) colour",
    )
    parser.add_argument(
        "-n",
        "--n_grid_rows_or_cols",
        type=_unsigned,
        default=None,
        help="Integer: Number of starting grid cells along longer Cartesian "
        "coordinate axis",
    )
    parser.add_argument(
        "-N",
        "--max_allowed_autoscale_grid_length",
        type=_unsigned,
        default=MAX_ALLOWED_AUTOSCALE_GRID_LENGTH,
        help="Integer: Maximum allowed number of grid cells along longer "
        "Cartesian coordinate axis",
    )

    def flag(*names: str, help: str, default: bool = False) -> None:
        action = "store_false" if default else "store_true"
        parser.add_argument(*names, action=action, help=help)

    flag("-W", "--world",
         help="Boolean: is input a world map in longitude-latitude format?")
    flag("-p", "--plot_polygons",
         help="Boolean: Plot images of input and output cartogram")
    flag("-q", "--plot_quadtree",
         help="Boolean: Plot images of Quadtree-Delaunay Triangulation")
    flag("-d", "--plot_density",
         help="Boolean: Plot images of flatten and blur density")
    flag("-g", "--add_grid",
         help="Boolean: Add area legend and grid to relevant plots")
    flag("-i", "--plot_intersections",
         help="Boolean: Plot images of intersections (if any)")
    flag("-E", "--output_equal_area_map",
         help="Boolean: Transform input GeoJSON into cartesian coordinates and exit")
    flag("-T", "--triangulation", default=True,
         help="Boolean: Enable cartogram projection via triangulation")
    flag("-Q", "--qtdt_method", default=True,
         help="Boolean: Enable Quadtree-Delaunay Triangulation Method")
    flag("-S", "--simplify_and_densify", default=True,
         help="Boolean: Enable iterative simplification and densification of polygons")
    flag("--skip_projection", help="Boolean: Skip projection to equal area")
    parser.add_argument(
        "-P",
        "--n_points",
        type=_unsigned,
        default=None,
        help="Integer: If simplification enabled, target number of points per inset",
    )
    flag("-M", "--make_csv", help="Boolean: create CSV file from given GeoJSON?")
    flag("-O", "--redirect_exports_to_stdout",
         help="Boolean: Redirect all exports to stdout as valid JSON")
    flag("--output_shifted_insets",
         help="Boolean: Output repositioned insets in cartesian coordinates GeoJSON")
    flag("-R", "--remove_tiny_polygons", help="Boolean: Remove tiny polygons")
    parser.add_argument(
        "-m",
        "--minimum_polygon_area",
        type=float,
        default=DEFAULT_MINIMUM_POLYGON_AREA,
        help="Double: Minimum size of tiny polygons as proportion of total area",
    )
    flag("-r", "--use_ray_shooting_method",
         help="Boolean: Use old ray shooting method to fill density")
    flag("--export_preprocessed",
         help="Boolean: write input GeoJSON and CSV after preprocessing")
    flag("--export_time_report",
         help="Boolean: write extended time report to CSV file")

    pre = "String: Column name for "
    parser.add_argument(
        "-D", "--id", default=None,
        help=pre + "IDs of geographic divisions [default: 1st CSV column header]",
    )
    parser.add_argument(
        "-A", "--area", default=None,
        help=pre + "target areas [default: 2nd CSV column]",
    )
    parser.add_argument(
        "-C", "--color", "--colour", dest="color", default="Color",
        help=pre + "colors",
    )
    parser.add_argument("-L", "--label", default="Label", help=pre + "labels")
    parser.add_argument("-I", "--inset", default="Inset", help=pre + "insets")
    parser.add_argument(
        "--min_integrations",
        type=_unsigned,
        default=0,
        help="Integer: minimum number of integrations regardless of area error reached",
    )
    return parser


def parse_arguments(argv: list[str] | None = None) -> Arguments:
    """Parse command-line options; exits with a status code on invalid input."""
    parser = _build_parser()
    ns = parser.parse_args(sys.argv[1:] if argv is None else argv)
    err = sys.stderr

    n_used = ns.n_grid_rows_or_cols is not None
    args = Arguments(
        n_grid_rows_or_cols=(
            ns.n_grid_rows_or_cols if n_used else DEFAULT_LONG_GRID_LENGTH
        ),
        max_allowed_autoscale_grid_length=ns.max_allowed_autoscale_grid_length,
        target_points_per_inset=(
            DEFAULT_TARGET_POINTS_PER_INSET if ns.n_points is None else ns.n_points
        ),
        min_integrations=ns.min_integrations,
        world=ns.world,
        triangulation=ns.triangulation,
        qtdt_method=ns.qtdt_method,
        simplify=ns.simplify_and_densify,
        remove_tiny_polygons=ns.remove_tiny_polygons,
        min_polygon_area=ns.minimum_polygon_area,
        rays=ns.use_ray_shooting_method,
        skip_projection=ns.skip_projection,
        make_csv=ns.make_csv,
        output_equal_area_map=ns.output_equal_area_map,
        redirect_exports_to_stdout=ns.redirect_exports_to_stdout,
        export_preprocessed=ns.export_preprocessed,
        export_time_report=ns.export_time_report,
        plot_density=ns.plot_density,
        plot_grid=ns.add_grid,
        plot_intersections=ns.plot_intersections,
        plot_polygons=ns.plot_polygons,
        plot_quadtree=ns.plot_quadtree,
        output_shifted_insets=ns.output_shifted_insets,
        id_col=ns.id,
        area_col=ns.area,
        inset_col=ns.inset,
        color_col=ns.color,
        label_col=ns.label,
    )

    # A world map looks better on a finer grid unless the user chose one.
    if args.world and not n_used:
        args.n_grid_rows_or_cols = WORLD_LONG_GRID_LENGTH

    # Simplification needs triangulation so that tracer points stay consistent.
    if not args.triangulation and args.simplify:
        args.triangulation = True

    if args.redirect_exports_to_stdout and not args.simplify and not args.qtdt_method:
        parser.print_help(err)
        parser.exit(
            18,
            "ERROR: simplification disabled!\n"
            "--output_to_stdout flag is only supported with "
            "simplification or quadtree.\n"
            "To enable simplification, do not pass the -S flag.\n"
            "To enable quadtree, do not pass the -Q flag.\n",
        )

    if not args.simplify:
        print(
            "WARNING: Simplification and densification disabled! "
            "Polygons will not simplified (or densified). "
            "This may result and in polygon intersections. "
            "Thus, we are turning off topology checks. "
            "To enable simplification, pass the -S flag.",
            file=err,
        )
        if ns.n_points is not None:
            print("--n_points ignored.", file=err)

    if args.triangulation and not args.qtdt_method:
        parser.print_help(err)
        parser.exit(
            17,
            "ERROR: Can't disable qtdt_method without disabling triangulation.\n"
            "QTDT method is necessary for Quadtree images.\n"
            "To disable Triangulation, pass the -T flag.\n",
        )

    args.geo_file_name = ns.geometry_file
    print(f"Using geometry from file {args.geo_file_name}", file=err)

    if ns.visual_variable_file is not None:
        args.visual_file_name = ns.visual_variable_file
        print(f"Using visual variables from file {args.visual_file_name}", file=err)
    elif not args.make_csv and not args.output_equal_area_map:
        parser.print_help(err)
        parser.exit(
            15,
            "ERROR: No CSV file provided!\n"
            "To create a CSV, please use the -m flag.\n",
        )
    else:
        args.visual_file_name = ""

    return args