"""Building blocks for diffusion-based contiguous cartograms."""

__version__ = "0.1.0"

__all__ = [
    "arguments",
    "colors",
    "geometry",
    "interpolate",
    "intersection",
    "matrix",
    "progress_tracker",
    "round_point",
    "smyth",
    "string_to_decimal",
    "time_tracker",
    "triangulation",
]