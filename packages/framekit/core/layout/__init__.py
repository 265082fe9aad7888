"""Procedural graph layout."""

from framekit.core.layout.models import Edge, GraphLayout, LayoutThresholds, Node, PlacementMode
from framekit.core.layout.proximity import DEFAULT_LAYOUT_SEED, build_layout, proximity_edges

__all__ = [
    "DEFAULT_LAYOUT_SEED",
    "Edge",
    "GraphLayout",
    "LayoutThresholds",
    "Node",
    "PlacementMode",
    "build_layout",
    "proximity_edges",
]
