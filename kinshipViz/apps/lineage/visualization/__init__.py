"""
Lineage visualization module.
Converts workflow lineage graphs to renderer options for UI rendering.
"""
from .category import Category, classify
from .graph_option import GraphOptionBuilder, LabelFormatter, TooltipFormatter, build_graph_option
from .lineage_mapper import LineageMapper

__all__ = [
    "Category",
    "classify",
    "GraphOptionBuilder",
    "LabelFormatter",
    "TooltipFormatter",
    "build_graph_option",
    "LineageMapper",
]
