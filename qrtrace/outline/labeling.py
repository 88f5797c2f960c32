"""Connected-component labeling — two-pass raster labeling with union-find.

The foreground pass is 4-connected: diagonal modules are separate shapes.
The background pass is 8-connected so that a hole's boundary is one closed
loop, and every background region touching the grid border is merged into
the reserved OUTSIDE component. Everything that is not OUTSIDE in the
background labeling is a hole candidate.

Label maps use 0 for cells not selected by the pass. Fresh ids start at 2.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from qrtrace.outline.grid import Mask, Position, as_mask

logger = logging.getLogger(__name__)

NULL = 0
OUTSIDE = 1

_BACKWARD_4 = ((0, -1), (-1, 0))
_BACKWARD_8 = ((0, -1), (-1, 0), (-1, -1), (-1, 1))


class DisjointSet:
    """Union-find over sequential ids. A class is represented by its smallest id.

    Id 0 is never handed out and id 1 (OUTSIDE) always exists, so the first
    make() returns 2.
    """

    def __init__(self) -> None:
        self._parent: list[int] = [NULL, OUTSIDE]

    def __len__(self) -> int:
        return len(self._parent) - 1

    def make(self) -> int:
        new_id = len(self._parent)
        self._parent.append(new_id)
        return new_id

    def find(self, item: int) -> int:
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        # path compression
        while item != root:
            parent = self._parent[item]
            self._parent[item] = root
            item = parent
        return root

    def union(self, a: int, b: int) -> int:
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return root_a
        low, high = min(root_a, root_b), max(root_a, root_b)
        self._parent[high] = low
        return low


@dataclass
class LabelMap:
    """Resolved component ids for one labeling pass."""

    labels: NDArray[np.int32]
    starts: dict[int, Position] = field(default_factory=dict)
    connectivity: int = 4
    inverted: bool = False

    @property
    def shape(self) -> tuple[int, int]:
        return self.labels.shape  # type: ignore[return-value]

    @property
    def ids(self) -> list[int]:
        """Component ids in raster order of their first cell."""
        return list(self.starts)

    def at(self, row: int, col: int) -> int:
        """Component id at a cell; NULL out of bounds."""
        rows, cols = self.labels.shape
        if 0 <= row < rows and 0 <= col < cols:
            return int(self.labels[row, col])
        return NULL

    def cell_count(self, component_id: int) -> int:
        return int(np.count_nonzero(self.labels == component_id))

    def component_mask(self, component_id: int) -> Mask:
        return self.labels == component_id


def label_regions(
    mask,
    connectivity: int = 4,
    invert: bool = False,
    merge_border: bool = False,
) -> LabelMap:
    """Label the connected regions of a grid.

    Args:
        mask: 2D boolean grid.
        connectivity: 4 or 8.
        invert: label the False cells instead of the True ones.
        merge_border: union every region touching the grid edge into OUTSIDE.
    """
    if connectivity not in (4, 8):
        raise ValueError(f"connectivity must be 4 or 8, got {connectivity}")

    grid = as_mask(mask)
    selected = ~grid if invert else grid
    rows, cols = selected.shape
    offsets = _BACKWARD_8 if connectivity == 8 else _BACKWARD_4

    provisional = np.zeros((rows, cols), dtype=np.int32)
    classes = DisjointSet()

    for r in range(rows):
        for c in range(cols):
            if not selected[r, c]:
                continue
            neighbours = set()
            for dr, dc in offsets:
                nr, nc = r + dr, c + dc
                if 0 <= nr < rows and 0 <= nc < cols and provisional[nr, nc]:
                    neighbours.add(int(provisional[nr, nc]))

            if not neighbours:
                provisional[r, c] = classes.make()
                continue

            smallest = min(neighbours)
            provisional[r, c] = smallest
            for other in neighbours:
                classes.union(smallest, other)

    if merge_border:
        _merge_border(provisional, classes)

    result = _resolve(provisional, classes)
    result.connectivity = connectivity
    result.inverted = invert
    logger.debug(
        "Labeled %d %s-connected %s components in %dx%d grid",
        len(result.starts), connectivity, "background" if invert else "foreground", rows, cols,
    )
    return result


def label_foreground(mask) -> LabelMap:
    return label_regions(mask, connectivity=4)


def label_background(mask) -> LabelMap:
    return label_regions(mask, connectivity=8, invert=True, merge_border=True)


def _merge_border(provisional: NDArray[np.int32], classes: DisjointSet) -> None:
    border = np.concatenate([
        provisional[0, :],
        provisional[-1, :],
        provisional[:, 0],
        provisional[:, -1],
    ])
    for label in np.unique(border):
        if label:
            classes.union(OUTSIDE, int(label))


def _resolve(provisional: NDArray[np.int32], classes: DisjointSet) -> LabelMap:
    labels = np.zeros_like(provisional)
    starts: dict[int, Position] = {}
    rows, cols = provisional.shape
    for r in range(rows):
        for c in range(cols):
            label = int(provisional[r, c])
            if not label:
                continue
            component = classes.find(label)
            labels[r, c] = component
            if component not in starts:
                starts[component] = Position(r, c)
    return LabelMap(labels=labels, starts=starts)
