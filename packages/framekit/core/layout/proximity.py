"""Procedural node placement with proximity-based edges.

Layout is built in one pass and never mutated afterwards:

1. Place nodes from a private DeterministicSequence (scatter or radial).
2. Connect every pair closer than a density-dependent radius.

Per-frame visual state is evaluated separately from the returned
GraphLayout, so the O(n^2) edge pass is paid once per composition.
"""

from __future__ import annotations

from collections.abc import Sequence
import logging
import math

import numpy as np

from framekit.core.errors import InvalidConfiguration
from framekit.core.layout.models import Edge, GraphLayout, LayoutThresholds, Node, PlacementMode
from framekit.core.motion.random import DeterministicSequence
from framekit.core.motion.timeline import paired_stagger, proportional_stagger
from framekit.core.utils.logging import log_performance
from framekit.core.utils.math import pairwise_distances

logger = logging.getLogger(__name__)

DEFAULT_LAYOUT_SEED = 42


def proximity_edges(
    points: Sequence[tuple[float, float]],
    threshold: float,
    inclusive: bool = False,
) -> tuple[Edge, ...]:
    """Connect every point pair closer than ``threshold``.

    Pairs at exactly the threshold are excluded unless ``inclusive`` is set.
    Coincident points produce zero-distance edges; they are kept.

    Args:
        points: (x, y) positions indexed by node id.
        threshold: Inclusion radius.
        inclusive: Use <= instead of <.

    Returns:
        Edges in (source, target) lexicographic order, source < target.
    """
    if len(points) < 2:
        return ()

    xs = np.array([p[0] for p in points], dtype=np.float64)
    ys = np.array([p[1] for p in points], dtype=np.float64)
    ii, jj, dist = pairwise_distances(xs, ys)

    mask = dist <= threshold if inclusive else dist < threshold
    return tuple(
        Edge(source=int(i), target=int(j), distance=float(d))
        for i, j, d in zip(ii[mask], jj[mask], dist[mask], strict=True)
    )


@log_performance
def build_layout(
    node_count: int,
    width: float,
    height: float,
    seed: int = DEFAULT_LAYOUT_SEED,
    mode: PlacementMode = PlacementMode.SCATTER,
    thresholds: LayoutThresholds | None = None,
) -> GraphLayout:
    """Place nodes and derive proximity edges.

    Scatter mode draws (x, y, size) per node from the seeded stream, with x
    and y inside ``[padding, extent - padding]``; padding shrinks for dense
    fields and is capped at half the extent on small canvases, which
    collapses that axis to its midpoint. Radial mode pins node 0 at the
    canvas center and spaces the remaining nodes at equal angles on a ring
    of jittered radius, drawing (radius, size) per node; above
    ``radial_max_nodes`` the remaining nodes are scattered instead.

    Args:
        node_count: Number of nodes (>= 0). Zero yields an empty layout.
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        seed: Seed for the layout's private random stream.
        mode: Placement mode.
        thresholds: Layout constants (defaults to LayoutThresholds()).

    Returns:
        Immutable GraphLayout.

    Raises:
        InvalidConfiguration: If node_count is negative, the canvas is not
            positive or the seed is invalid.
    """
    if isinstance(node_count, bool) or not isinstance(node_count, int) or node_count < 0:
        raise InvalidConfiguration(f"node_count must be a non-negative integer, got {node_count!r}")
    if not (width > 0 and height > 0):
        raise InvalidConfiguration(f"canvas must be positive, got {width}x{height}")

    thresholds = thresholds or LayoutThresholds()
    rand = DeterministicSequence(seed)

    if node_count == 0:
        return GraphLayout(edge_distance=thresholds.edge_distance(0), strategy=mode)

    if mode is PlacementMode.RADIAL:
        nodes, strategy = _place_radial(node_count, width, height, rand, thresholds)
    else:
        nodes = _place_scatter(node_count, width, height, rand, thresholds)
        strategy = PlacementMode.SCATTER

    edge_distance = thresholds.edge_distance(node_count)
    edges = proximity_edges([(n.x, n.y) for n in nodes], edge_distance)

    logger.debug(
        "Built %s layout: %d nodes, %d edges (edge_distance=%.1f, seed=%d)",
        strategy.value,
        len(nodes),
        len(edges),
        edge_distance,
        seed,
    )

    return GraphLayout(
        nodes=tuple(nodes),
        edges=edges,
        edge_distance=edge_distance,
        strategy=strategy,
    )


def _place_scatter(
    node_count: int,
    width: float,
    height: float,
    rand: DeterministicSequence,
    thresholds: LayoutThresholds,
) -> list[Node]:
    padding = thresholds.scatter_padding(node_count)
    size_base, size_spread = _scatter_size(node_count, thresholds)
    stagger = proportional_stagger(node_count, thresholds.scatter_stagger_span)

    nodes = []
    for item in stagger:
        x = _scatter_axis(rand.next(), width, padding)
        y = _scatter_axis(rand.next(), height, padding)
        size = size_base + rand.next() * size_spread
        nodes.append(Node(id=item.index, x=x, y=y, size=size, entry_frame=item.entry_delay_frames))
    return nodes


def _place_radial(
    node_count: int,
    width: float,
    height: float,
    rand: DeterministicSequence,
    thresholds: LayoutThresholds,
) -> tuple[list[Node], PlacementMode]:
    cx = width / 2
    cy = height / 2
    center_size = thresholds.center_size_single if node_count == 1 else thresholds.center_size
    nodes = [Node(id=0, x=cx, y=cy, size=center_size, entry_frame=0.0)]

    ring_count = node_count - 1
    stagger = paired_stagger(
        ring_count,
        interval=thresholds.radial_pair_interval,
        offset=thresholds.radial_pair_offset,
    )

    if node_count > thresholds.radial_max_nodes:
        logger.debug(
            "Radial layout of %d nodes exceeds radial_max_nodes=%d; scattering ring nodes",
            node_count,
            thresholds.radial_max_nodes,
        )
        padding = thresholds.scatter_padding(node_count)
        size_base, size_spread = _scatter_size(node_count, thresholds)
        for item in stagger:
            x = _scatter_axis(rand.next(), width, padding)
            y = _scatter_axis(rand.next(), height, padding)
            size = size_base + rand.next() * size_spread
            nodes.append(
                Node(id=item.index + 1, x=x, y=y, size=size, entry_frame=item.entry_delay_frames)
            )
        return nodes, PlacementMode.SCATTER

    for item in stagger:
        angle = (item.index / ring_count) * math.pi * 2
        radius = thresholds.ring_radius + rand.next() * thresholds.ring_jitter
        size = thresholds.ring_size_base + rand.next() * thresholds.ring_size_spread
        nodes.append(
            Node(
                id=item.index + 1,
                x=cx + math.cos(angle) * radius,
                y=cy + math.sin(angle) * radius,
                size=size,
                entry_frame=item.entry_delay_frames,
            )
        )
    return nodes, PlacementMode.RADIAL


def _scatter_size(node_count: int, thresholds: LayoutThresholds) -> tuple[float, float]:
    if thresholds.is_dense(node_count):
        return thresholds.dense_size_base, thresholds.dense_size_spread
    return thresholds.scatter_size_base, thresholds.scatter_size_spread


def _scatter_axis(r: float, extent: float, padding: float) -> float:
    """Map a draw in [0, 1] into ``[padding, extent - padding]``."""
    padding = min(padding, extent / 2)
    return padding + r * (extent - padding * 2)
