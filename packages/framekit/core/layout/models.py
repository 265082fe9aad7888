"""Static geometry models for procedural graph layouts."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PlacementMode(str, Enum):
    """How nodes are placed on the canvas.

    Attributes:
        SCATTER: Every node drawn uniformly inside the padded canvas.
        RADIAL: First node pinned at the canvas center; the rest arranged on
            a jittered ring, or scattered once the count exceeds
            ``LayoutThresholds.radial_max_nodes``.
    """

    SCATTER = "scatter"
    RADIAL = "radial"


class LayoutThresholds(BaseModel):
    """Density-dependent layout constants.

    Tuned for legibility at specific node counts on a 1920x1080 canvas.
    Node counts are compared against ``sparse_max_nodes`` (<= 10) and
    ``dense_min_nodes`` (> 40); the middle band uses the ``medium`` values.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    # Strategy and density bands
    radial_max_nodes: int = Field(default=10, ge=1, description="Largest count arranged radially")
    sparse_max_nodes: int = Field(default=10, ge=1, description="Largest count in the sparse band")
    dense_min_nodes: int = Field(default=40, ge=1, description="Counts above this are dense")

    # Edge inclusion radius per band (strict < comparison)
    edge_distance_sparse: float = Field(default=400.0, gt=0.0)
    edge_distance_medium: float = Field(default=350.0, gt=0.0)
    edge_distance_dense: float = Field(default=250.0, gt=0.0)

    # Scatter margins
    padding: float = Field(default=150.0, ge=0.0)
    padding_dense: float = Field(default=50.0, ge=0.0)

    # Radial ring
    ring_radius: float = Field(default=200.0, ge=0.0)
    ring_jitter: float = Field(default=100.0, ge=0.0)

    # Node size hints: base + draw * spread
    center_size: float = Field(default=12.0, gt=0.0)
    center_size_single: float = Field(default=16.0, gt=0.0)
    ring_size_base: float = Field(default=8.0, gt=0.0)
    ring_size_spread: float = Field(default=4.0, ge=0.0)
    scatter_size_base: float = Field(default=6.0, gt=0.0)
    scatter_size_spread: float = Field(default=6.0, ge=0.0)
    dense_size_base: float = Field(default=3.0, gt=0.0)
    dense_size_spread: float = Field(default=3.0, ge=0.0)

    # Entry stagger
    radial_pair_interval: float = Field(default=10.0, ge=0.0)
    radial_pair_offset: float = Field(default=15.0, ge=0.0)
    scatter_stagger_span: float = Field(default=60.0, ge=0.0)

    @model_validator(mode="after")
    def _validate_bands(self) -> LayoutThresholds:
        if self.sparse_max_nodes > self.dense_min_nodes:
            raise ValueError("sparse_max_nodes must be <= dense_min_nodes")
        return self

    def is_dense(self, node_count: int) -> bool:
        return node_count > self.dense_min_nodes

    def edge_distance(self, node_count: int) -> float:
        """Edge inclusion radius for a layout of ``node_count`` nodes."""
        if node_count > self.dense_min_nodes:
            return self.edge_distance_dense
        if node_count > self.sparse_max_nodes:
            return self.edge_distance_medium
        return self.edge_distance_sparse

    def scatter_padding(self, node_count: int) -> float:
        return self.padding_dense if self.is_dense(node_count) else self.padding


class Node(BaseModel):
    """A placed node. Immutable once built.

    Attributes:
        id: Position in the layout's node sequence.
        x: Canvas x coordinate.
        y: Canvas y coordinate.
        size: Size hint (base radius in pixels).
        entry_frame: Global frame at which the node enters.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: int = Field(ge=0)
    x: float
    y: float
    size: float = Field(gt=0.0)
    entry_frame: float = Field(ge=0.0)


class Edge(BaseModel):
    """Unordered node pair stored as (source < target)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source: int = Field(ge=0)
    target: int = Field(ge=0)
    distance: float = Field(ge=0.0)

    @model_validator(mode="after")
    def _validate_order(self) -> Edge:
        if self.source >= self.target:
            raise ValueError(
                f"edge must satisfy source < target, got ({self.source}, {self.target})"
            )
        return self

    @property
    def pair(self) -> tuple[int, int]:
        return (self.source, self.target)


class GraphLayout(BaseModel):
    """Static geometry built once per composition.

    Attributes:
        nodes: Placed nodes in id order.
        edges: Proximity edges in (source, target) lexicographic order.
        edge_distance: Inclusion radius used to build the edges.
        strategy: Placement strategy actually applied.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    nodes: tuple[Node, ...] = ()
    edges: tuple[Edge, ...] = ()
    edge_distance: float = Field(default=0.0, ge=0.0)
    strategy: PlacementMode = PlacementMode.SCATTER

    def neighbors(self, node_id: int) -> list[int]:
        """Ids of nodes sharing an edge with ``node_id``, ascending."""
        result = []
        for edge in self.edges:
            if edge.source == node_id:
                result.append(edge.target)
            elif edge.target == node_id:
                result.append(edge.source)
        return sorted(result)

    def degree(self, node_id: int) -> int:
        return len(self.neighbors(node_id))
