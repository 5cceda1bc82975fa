"""Plotting utilities for the bloom map."""

from .bloom_map import marker_area, point_size, region_colors, render_bloom_map


__all__ = [
    "marker_area",
    "point_size",
    "region_colors",
    "render_bloom_map",
]
