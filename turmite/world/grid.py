"""TileGrid — sparse, unbounded storage for painted tiles.

Only visited coordinates are stored.  Tiles are never removed; the engine
overwrites a tile's marker each time the ant revisits it.  Everything
except :meth:`TileGrid.set` is a read-only view for renderers and tests.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from turmite.pattern.table import Marker, PatternTable

Coord = tuple[int, int]


@dataclass(frozen=True)
class Bounds:
    """Inclusive bounding box of the visited region."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1


@dataclass
class TileGrid:
    """Mapping from integer grid coordinate to the marker painted there.

    Attributes:
        tiles: Painted tiles keyed by ``(x, y)``.
    """

    tiles: dict[Coord, Marker] = field(default_factory=dict)

    def get(self, coord: Coord) -> Marker | None:
        """Return the marker at ``coord``, or None if never visited."""
        return self.tiles.get(coord)

    def set(self, coord: Coord, marker: Marker) -> None:
        """Paint ``marker`` at ``coord``, creating the tile if needed."""
        self.tiles[coord] = marker

    def __contains__(self, coord: object) -> bool:
        return coord in self.tiles

    def __len__(self) -> int:
        return len(self.tiles)

    def items(self) -> Iterator[tuple[Coord, Marker]]:
        return iter(self.tiles.items())

    def coordinates(self) -> frozenset[Coord]:
        return frozenset(self.tiles)

    def bounds(self) -> Bounds | None:
        """Bounding box of all visited tiles, or None for an empty grid."""
        if not self.tiles:
            return None
        xs = [x for x, _ in self.tiles]
        ys = [y for _, y in self.tiles]
        return Bounds(min(xs), min(ys), max(xs), max(ys))

    def to_index_array(self, table: PatternTable) -> NDArray[np.int64]:
        """Rasterise the visited region as rule-table indices.

        Rows run from the top of the region (largest y) downward, so the
        array reads the way the grid looks on screen.  Unvisited cells are
        ``-1``.  Markers that appear more than once in the table map to
        their first index.

        Args:
            table: Table the markers were painted from.

        Returns:
            A ``(height, width)`` integer array; ``(0, 0)`` if empty.
        """
        box = self.bounds()
        if box is None:
            return np.zeros((0, 0), dtype=np.int64)

        raster = np.full((box.height, box.width), -1, dtype=np.int64)
        for (x, y), marker in self.tiles.items():
            index = table.index_of(marker)
            raster[box.max_y - y, x - box.min_x] = -1 if index is None else index
        return raster
