"""
Tests for FoodSpawner.
"""

import os
import sys
from unittest.mock import patch

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.food import FoodItem, FoodSpawner  # noqa: E402
from domain.grid import Grid  # noqa: E402


class TestFoodSpawner:
    """Tests for FoodSpawner."""

    def test_spawn_initial_places_food_at_fixed_offset(self):
        spawner = FoodSpawner(Grid())
        item = spawner.spawn_initial()
        assert item == FoodItem(food_id=1, cell=(7, 6))
        assert spawner.positions() == [(1, (7, 6))]
        assert len(spawner) == 1

    def test_spawn_initial_only_once(self):
        spawner = FoodSpawner(Grid())
        spawner.spawn_initial()
        with pytest.raises(RuntimeError):
            spawner.spawn_initial()

    def test_on_consumed_replaces_item(self):
        spawner = FoodSpawner(Grid())
        spawner.spawn_initial()
        with patch("domain.food.random.randint", side_effect=[3, 4]):
            new_item = spawner.on_consumed(1)

        assert new_item == FoodItem(food_id=2, cell=(3, 4))
        assert spawner.items == [new_item]
        assert len(spawner) == 1

    def test_ids_are_never_reused(self):
        spawner = FoodSpawner(Grid())
        spawner.spawn_initial()
        seen = {1}
        current = 1
        for _ in range(20):
            current = spawner.on_consumed(current).food_id
            assert current not in seen
            seen.add(current)
        assert len(spawner) == 1

    def test_respawn_range_ignores_board_size(self):
        """Respawn always draws from [0, 10) on both axes."""
        spawner = FoodSpawner(Grid(5, 5))
        spawner.spawn_initial()
        with patch("domain.food.random.randint", return_value=8) as randint:
            item = spawner.on_consumed(1)
        assert item.cell == (8, 8)
        assert randint.call_count == 2
        for call in randint.call_args_list:
            assert call.args == (0, 9)

    def test_respawn_may_land_on_occupied_cell(self):
        spawner = FoodSpawner(Grid())
        spawner.spawn_initial()
        with patch("domain.food.random.randint", side_effect=[6, 5]):
            item = spawner.on_consumed(1)
        assert item.cell == (6, 5)

    def test_unknown_id_raises(self):
        spawner = FoodSpawner(Grid())
        spawner.spawn_initial()
        with pytest.raises(KeyError):
            spawner.on_consumed(99)
        assert spawner.positions() == [(1, (7, 6))]

    def test_positions_is_a_snapshot(self):
        spawner = FoodSpawner(Grid())
        spawner.spawn_initial()
        snapshot = spawner.positions()
        spawner.on_consumed(1)
        assert snapshot == [(1, (7, 6))]
