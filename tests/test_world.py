"""Tests for turmite.world (heading, grid) and turmite.agent.ant."""

import numpy as np
import pytest

from turmite.agent.ant import AntState
from turmite.errors import ConfigurationError
from turmite.pattern.table import Marker, PatternTable
from turmite.pattern.turns import TurnCommand
from turmite.world.grid import Bounds, TileGrid
from turmite.world.heading import Heading


class TestHeading:
    """Tests for heading transitions."""

    @pytest.mark.parametrize(
        ("start", "expected"),
        [
            (Heading.NORTH, Heading.WEST),
            (Heading.WEST, Heading.SOUTH),
            (Heading.SOUTH, Heading.EAST),
            (Heading.EAST, Heading.NORTH),
        ],
    )
    def test_turn_left(self, start: Heading, expected: Heading) -> None:
        assert start.turn(TurnCommand.LEFT) is expected

    @pytest.mark.parametrize(
        ("start", "expected"),
        [
            (Heading.NORTH, Heading.EAST),
            (Heading.EAST, Heading.SOUTH),
            (Heading.SOUTH, Heading.WEST),
            (Heading.WEST, Heading.NORTH),
        ],
    )
    def test_turn_right(self, start: Heading, expected: Heading) -> None:
        assert start.turn(TurnCommand.RIGHT) is expected

    @pytest.mark.parametrize("heading", list(Heading))
    def test_u_turn_is_involutive(self, heading: Heading) -> None:
        once = heading.turn(TurnCommand.U_TURN)
        assert once is heading.opposite()
        assert once is not heading
        assert once.turn(TurnCommand.U_TURN) is heading

    @pytest.mark.parametrize("heading", list(Heading))
    def test_no_turn_is_identity(self, heading: Heading) -> None:
        assert heading.turn(TurnCommand.NO_TURN) is heading

    @pytest.mark.parametrize("heading", list(Heading))
    def test_left_right_cancel(self, heading: Heading) -> None:
        assert heading.turn(TurnCommand.LEFT).turn(TurnCommand.RIGHT) is heading
        assert heading.turn(TurnCommand.RIGHT).turn(TurnCommand.LEFT) is heading

    def test_every_command_has_a_full_table(self) -> None:
        for command in TurnCommand:
            assert {h.turn(command) for h in Heading} == set(Heading)

    def test_from_name(self) -> None:
        assert Heading.from_name("East") is Heading.EAST
        with pytest.raises(ConfigurationError):
            Heading.from_name("up")

    def test_north_points_up(self) -> None:
        assert (Heading.NORTH.dx, Heading.NORTH.dy) == (0, 1)

    def test_angles(self) -> None:
        assert Heading.NORTH.angle == 0.0
        assert Heading.WEST.angle == 90.0
        assert Heading.SOUTH.angle == 180.0
        assert Heading.EAST.angle == 270.0


class TestTileGrid:
    """Tests for the sparse tile grid."""

    def test_starts_empty(self) -> None:
        grid = TileGrid()
        assert len(grid) == 0
        assert grid.get((0, 0)) is None
        assert grid.bounds() is None

    def test_set_and_overwrite(self) -> None:
        grid = TileGrid()
        grid.set((2, -3), Marker(0.1, 0.2, 0.3))
        grid.set((2, -3), Marker(0.4, 0.5, 0.6))
        assert (2, -3) in grid
        assert len(grid) == 1
        assert grid.get((2, -3)) == Marker(0.4, 0.5, 0.6)

    def test_bounds(self) -> None:
        grid = TileGrid()
        marker = Marker(0.1, 0.2, 0.3)
        for coord in [(0, 0), (-2, 1), (3, -4)]:
            grid.set(coord, marker)
        box = grid.bounds()
        assert box == Bounds(min_x=-2, min_y=-4, max_x=3, max_y=1)
        assert (box.width, box.height) == (6, 6)

    def test_to_index_array(self, langton_table: PatternTable) -> None:
        m0, m1 = langton_table.markers
        grid = TileGrid()
        grid.set((0, 0), m0)
        grid.set((1, 0), m1)
        grid.set((1, 1), m0)
        raster = grid.to_index_array(langton_table)
        expected = np.array([[-1, 0], [0, 1]])
        assert np.array_equal(raster, expected)

    def test_to_index_array_empty(self, langton_table: PatternTable) -> None:
        assert TileGrid().to_index_array(langton_table).shape == (0, 0)


class TestAntState:
    """Tests for the ant's movement and discretisation."""

    def test_defaults(self) -> None:
        ant = AntState()
        assert ant.position == (0.0, 0.0)
        assert ant.heading is Heading.NORTH
        assert ant.cell == (0, 0)

    def test_advance_moves_one_cell(self) -> None:
        ant = AntState(step_length=20.0)
        ant.advance()
        assert ant.position == (0.0, 20.0)
        assert ant.cell == (0, 1)

    def test_turn_updates_rotation(self) -> None:
        ant = AntState()
        ant.turn(TurnCommand.RIGHT)
        assert ant.heading is Heading.EAST
        assert ant.rotation == 270.0
        ant.turn(TurnCommand.U_TURN)
        assert ant.heading is Heading.WEST
        assert ant.rotation == 90.0

    @pytest.mark.parametrize("symbols", ["R", "L", "U", "N", "RRL", "LUNRRU", "ULLLR"])
    def test_rotation_tracks_heading_angle(self, symbols: str) -> None:
        ant = AntState()
        assert ant.rotation == ant.heading.angle
        for char in symbols:
            ant.turn(TurnCommand(char.lower()))
            assert ant.rotation == ant.heading.angle

    def test_walk_a_square(self) -> None:
        ant = AntState()
        for _ in range(4):
            ant.advance()
            ant.turn(TurnCommand.RIGHT)
        assert ant.cell == (0, 0)
        assert ant.heading is Heading.NORTH
        assert ant.rotation == 0.0
