import pytest

from cartogram.arguments import (
    DEFAULT_LONG_GRID_LENGTH,
    DEFAULT_MINIMUM_POLYGON_AREA,
    DEFAULT_TARGET_POINTS_PER_INSET,
    MAX_ALLOWED_AUTOSCALE_GRID_LENGTH,
    parse_arguments,
)


def test_defaults():
    args = parse_arguments(["map.geojson", "data.csv"])
    assert args.geo_file_name == "map.geojson"
    assert args.visual_file_name == "data.csv"
    assert args.n_grid_rows_or_cols == DEFAULT_LONG_GRID_LENGTH
    assert args.max_allowed_autoscale_grid_length == MAX_ALLOWED_AUTOSCALE_GRID_LENGTH
    assert args.target_points_per_inset == DEFAULT_TARGET_POINTS_PER_INSET
    assert args.min_polygon_area == DEFAULT_MINIMUM_POLYGON_AREA
    assert args.triangulation and args.qtdt_method and args.simplify
    assert not args.world and not args.plot_polygons
    assert args.id_col is None and args.area_col is None
    assert (args.color_col, args.label_col, args.inset_col) == (
        "Color",
        "Label",
        "Inset",
    )


def test_world_uses_finer_grid_unless_given():
    assert parse_arguments(["w.geojson", "w.csv", "-W"]).n_grid_rows_or_cols == 512
    args = parse_arguments(["w.geojson", "w.csv", "--world", "-n", "128"])
    assert args.world
    assert args.n_grid_rows_or_cols == 128


def test_simplification_forces_triangulation():
    args = parse_arguments(["m.geojson", "d.csv", "-T"])
    assert args.triangulation
    assert args.simplify


def test_disabling_quadtree_alone_exits_17():
    with pytest.raises(SystemExit) as info:
        parse_arguments(["m.geojson", "d.csv", "-Q"])
    assert info.value.code == 17


def test_disabling_all_methods_is_allowed():
    args = parse_arguments(["m.geojson", "d.csv", "-Q", "-T", "-S", "-P", "500"])
    assert not args.triangulation
    assert not args.qtdt_method
    assert not args.simplify
    assert args.target_points_per_inset == 500


def test_stdout_without_simplify_or_quadtree_exits_18():
    with pytest.raises(SystemExit) as info:
        parse_arguments(["m.geojson", "d.csv", "-O", "-S", "-Q", "-T"])
    assert info.value.code == 18


def test_missing_csv_exits_15():
    with pytest.raises(SystemExit) as info:
        parse_arguments(["m.geojson"])
    assert info.value.code == 15


def test_make_csv_without_csv_file():
    args = parse_arguments(["m.geojson", "-M"])
    assert args.make_csv
    assert args.visual_file_name == ""


def test_equal_area_map_without_csv_file():
    args = parse_arguments(["m.geojson", "-E"])
    assert args.output_equal_area_map
    assert args.visual_file_name == ""


def test_missing_geometry_exits_1():
    with pytest.raises(SystemExit) as info:
        parse_arguments([])
    assert info.value.code == 1


def test_negative_grid_length_is_rejected():
    with pytest.raises(SystemExit) as info:
        parse_arguments(["m.geojson", "d.csv", "-n", "-4"])
    assert info.value.code == 1


def test_column_names_and_colour_alias():
    args = parse_arguments(
        ["m.geojson", "d.csv", "--id", "Code", "-A", "Pop", "--colour", "Fill",
         "-L", "Name", "-I", "Where"]
    )
    assert args.id_col == "Code"
    assert args.area_col == "Pop"
    assert args.color_col == "Fill"
    assert args.label_col == "Name"
    assert args.inset_col == "Where"


def test_boolean_flags_and_numbers():
    args = parse_arguments(
        ["m.geojson", "d.csv", "-p", "-q", "-d", "-g", "-i", "-R", "-r",
         "-m", "0.25", "--min_integrations", "3", "-N", "2048",
         "--export_time_report", "--export_preprocessed", "--skip_projection",
         "--output_shifted_insets", "-O"]
    )
    assert args.plot_polygons and args.plot_quadtree and args.plot_density
    assert args.plot_grid and args.plot_intersections
    assert args.remove_tiny_polygons and args.rays
    assert args.min_polygon_area == 0.25
    assert args.min_integrations == 3
    assert args.max_allowed_autoscale_grid_length == 2048
    assert args.export_time_report and args.export_preprocessed
    assert args.skip_projection and args.output_shifted_insets
    assert args.redirect_exports_to_stdout


def test_n_points_ignored_warning(capsys):
    parse_arguments(["m.geojson", "d.csv", "-S", "-P", "10"])
    assert "--n_points ignored." in capsys.readouterr().err