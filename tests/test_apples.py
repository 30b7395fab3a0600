"""
Tests for domain/apples.py - spawning and clearing apples.
"""

import random
from unittest.mock import Mock

import pytest

from terminal_snake.domain.apples import Apples, should_spawn
from terminal_snake.domain.constants import MAX_COLUMNS, MAX_ROWS
from terminal_snake.domain.geometry import Cell


def scripted_rng(*values):
    rng = Mock(spec=random.Random)
    rng.randint.side_effect = list(values)
    return rng


class TestShouldSpawn:
    """Tests for the spawn predicate."""

    def test_draw_below_growth_speed_spawns(self):
        """Draw 0 with growth speed 2 always spawns."""
        assert should_spawn(0, 2) is True

    def test_draw_at_or_above_growth_speed_does_not_spawn(self):
        """Draw 5 (or 2) with growth speed 2 never spawns."""
        assert should_spawn(5, 2) is False
        assert should_spawn(2, 2) is False

    def test_spawn_chance_is_growth_speed_out_of_eleven(self):
        """Exactly growth_speed of the 11 possible draws spawn."""
        assert sum(should_spawn(draw, 2) for draw in range(11)) == 2


class TestApplesGrow:
    """Tests for Apples.grow()."""

    def test_successful_draw_adds_apple(self):
        """A low draw drops an apple at the drawn position."""
        apples = Apples(growth_speed=2, rng=scripted_rng(0, 3, 7))
        assert apples.grow() == Cell(3, 7)
        assert apples.cells == {Cell(3, 7)}

    def test_failed_draw_adds_nothing(self):
        """A high draw leaves the set alone and skips the position draw."""
        rng = scripted_rng(5)
        apples = Apples(growth_speed=2, rng=rng)
        assert apples.grow() is None
        assert len(apples) == 0
        rng.randint.assert_called_once_with(0, 10)

    def test_position_is_drawn_from_interior(self):
        """Positions exclude the border ring."""
        rng = scripted_rng(0, 1, 1)
        Apples(growth_speed=2, rng=rng).grow()
        rng.randint.assert_any_call(1, MAX_COLUMNS - 2)
        rng.randint.assert_any_call(1, MAX_ROWS - 2)

    def test_duplicate_position_is_absorbed(self):
        """Dropping on an existing apple keeps one apple there."""
        apples = Apples(cells={Cell(4, 4)}, growth_speed=2, rng=scripted_rng(1, 4, 4))
        apples.grow()
        assert apples.cells == {Cell(4, 4)}

    def test_real_rng_stays_inside_board(self):
        """Seeded runs only ever place apples in the interior."""
        apples = Apples(growth_speed=11, rng=random.Random(1234))
        for _ in range(200):
            apples.grow()

        assert len(apples) > 0
        for cell in apples.cells:
            assert 1 <= cell.x < MAX_COLUMNS - 1
            assert 1 <= cell.y < MAX_ROWS - 1

    def test_zero_growth_speed_never_spawns(self):
        """Growth speed 0 disables apples."""
        apples = Apples(growth_speed=0, rng=random.Random(7))
        for _ in range(50):
            apples.grow()
        assert len(apples) == 0

    @pytest.mark.parametrize("growth_speed", [-1, 12])
    def test_invalid_growth_speed_raises(self, growth_speed):
        """Growth speed must fit the 0..11 draw range."""
        with pytest.raises(ValueError):
            Apples(growth_speed=growth_speed)


class TestApplesClear:
    """Tests for Apples.clear()."""

    def test_clear_empties_the_set(self):
        """clear() removes every apple."""
        apples = Apples(cells={Cell(1, 1), Cell(2, 2)})
        apples.clear()
        assert apples.cells == set()
