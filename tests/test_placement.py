"""
Tests for femtocell block placement.
"""

import unittest
import sys
import os

import numpy as np

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from hetnet_layout.geometry.box import Box
from hetnet_layout.geometry.errors import ConfigurationTooDense, InvalidAreaUsage
from hetnet_layout.placement.block_allocator import (
    FemtocellBlockAllocator, PlacementOutcome, MAX_PLACEMENT_ATTEMPTS
)
from hetnet_layout.placement.buildings import BuildingGridSpec, block_width, block_height


class ScriptedRng:
    """Random source returning a fixed sequence of values."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def uniform(self, low, high):
        self.calls.append((low, high))
        return self.values.pop(0)


class CountingRng:
    """Wraps a numpy Generator and counts draws."""

    def __init__(self, seed):
        self.generator = np.random.default_rng(seed)
        self.draws = 0

    def uniform(self, low, high):
        self.draws += 1
        return self.generator.uniform(low, high)


class TestBlockDimensions(unittest.TestCase):
    """Test block size derivation."""

    def test_block_width(self):
        self.assertEqual(block_width(5), 70)
        self.assertEqual(block_width(1), 30)
        self.assertEqual(block_width(10), 120)

    def test_block_height(self):
        self.assertEqual(block_height(), 70)

    def test_allocator_dimensions(self):
        allocator = FemtocellBlockAllocator(Box(0, 1000, 0, 500), 8, 2, seed=1)
        self.assertEqual(allocator.block_width, 100)
        self.assertEqual(allocator.block_height, 70)


class TestFemtocellBlockAllocator(unittest.TestCase):
    """Test rejection-sampling placement."""

    def setUp(self):
        self.area = Box(-250, 750, -250, 250, 1.0, 2.0)

    def test_non_overlap_invariant(self):
        allocator = FemtocellBlockAllocator(self.area, 5, 1, seed=42)
        blocks = allocator.place_many(10)

        self.assertEqual(len(blocks), 10)
        for i, first in enumerate(blocks):
            for second in blocks[i + 1:]:
                self.assertFalse(first.overlaps(second))

    def test_bounded_containment(self):
        allocator = FemtocellBlockAllocator(self.area, 5, 1, seed=7)
        for block in allocator.place_many(10):
            self.assertLessEqual(self.area.x_min, block.x_min)
            self.assertLessEqual(block.x_max, self.area.x_max)
            self.assertLessEqual(self.area.y_min, block.y_min)
            self.assertLessEqual(block.y_max, self.area.y_max)
            self.assertAlmostEqual(block.width, 70)
            self.assertAlmostEqual(block.height, 70)

    def test_history_is_append_only(self):
        allocator = FemtocellBlockAllocator(self.area, 5, 1, seed=3)
        first = allocator.place_many(3)
        second = allocator.place_many(2)

        self.assertEqual(allocator.blocks, tuple(first + second))
        for block in second:
            for previous in first:
                self.assertFalse(block.overlaps(previous))

    def test_same_seed_same_layout(self):
        first = FemtocellBlockAllocator(self.area, 5, 1, seed=11).place_many(5)
        second = FemtocellBlockAllocator(self.area, 5, 1, seed=11).place_many(5)
        self.assertEqual(first, second)

    def test_place_zero_blocks(self):
        allocator = FemtocellBlockAllocator(self.area, 5, 1, seed=1)
        self.assertEqual(allocator.place_many(0), [])
        self.assertEqual(allocator.blocks, ())

    def test_negative_block_count_rejected(self):
        allocator = FemtocellBlockAllocator(self.area, 5, 1, seed=1)
        with self.assertRaises(InvalidAreaUsage):
            allocator.place_many(-1)

    def test_scripted_rejection(self):
        """An overlapping candidate is discarded and the next one accepted."""
        rng = ScriptedRng([0.0, 0.0,      # first block at the origin
                           10.0, 10.0,    # overlaps the first
                           200.0, 0.0])   # free spot
        allocator = FemtocellBlockAllocator(Box(0, 500, 0, 300), 5, 1, rng=rng)

        first = allocator.try_place_one()
        self.assertEqual(first, PlacementOutcome(Box(0.0, 70.0, 0.0, 70.0), 1))

        second = allocator.try_place_one()
        self.assertTrue(second.success)
        self.assertEqual(second.attempts, 2)
        self.assertEqual(second.block, Box(200.0, 270.0, 0.0, 70.0))

    def test_draw_ranges(self):
        rng = ScriptedRng([0.0, 0.0])
        allocator = FemtocellBlockAllocator(Box(0, 500, 10, 300), 5, 1, rng=rng)
        allocator.place_one()
        self.assertEqual(rng.calls, [(0, 430), (10, 230)])

    def test_touching_candidate_rejected(self):
        rng = ScriptedRng([0.0, 0.0,
                           70.0, 0.0,     # shares an edge with the first
                           70.5, 0.0])
        allocator = FemtocellBlockAllocator(Box(0, 500, 0, 300), 5, 1, rng=rng)
        allocator.place_many(2)
        self.assertEqual(allocator.blocks[1].x_min, 70.5)

    def test_retry_exhaustion(self):
        """Two blocks cannot fit in an area barely larger than one."""
        area = Box(0, 71, 0, 71)
        rng = CountingRng(seed=5)
        allocator = FemtocellBlockAllocator(area, 5, 1, rng=rng)

        with self.assertRaises(ConfigurationTooDense) as ctx:
            allocator.place_many(2)

        error = ctx.exception
        self.assertEqual(error.attempts, MAX_PLACEMENT_ATTEMPTS)
        self.assertEqual(error.n_placed, 1)
        self.assertEqual(error.n_requested, 2)
        self.assertIs(error.area, area)
        self.assertIn("Too small area", str(error))
        # One successful draw for the first block, 100 failed ones for the second
        self.assertEqual(rng.draws, 2 * (1 + MAX_PLACEMENT_ATTEMPTS))
        self.assertEqual(len(allocator.blocks), 1)

    def test_try_place_one_reports_failure(self):
        allocator = FemtocellBlockAllocator(Box(0, 71, 0, 71), 5, 1, seed=2)
        self.assertTrue(allocator.try_place_one().success)

        outcome = allocator.try_place_one()
        self.assertFalse(outcome.success)
        self.assertIsNone(outcome.block)
        self.assertEqual(outcome.attempts, MAX_PLACEMENT_ATTEMPTS)
        self.assertEqual(len(allocator.blocks), 1)

    def test_custom_attempt_cap(self):
        allocator = FemtocellBlockAllocator(Box(0, 71, 0, 71), 5, 1, seed=2, max_attempts=5)
        allocator.place_one()
        with self.assertRaises(ConfigurationTooDense) as ctx:
            allocator.place_one()
        self.assertEqual(ctx.exception.attempts, 5)

    def test_invalid_attempt_cap_rejected(self):
        with self.assertRaises(InvalidAreaUsage):
            FemtocellBlockAllocator(self.area, 5, 1, seed=1, max_attempts=0)

    def test_area_smaller_than_block_rejected(self):
        with self.assertRaises(InvalidAreaUsage):
            FemtocellBlockAllocator(Box(0, 69, 0, 500), 5, 1, seed=1)
        with self.assertRaises(InvalidAreaUsage):
            FemtocellBlockAllocator(Box(0, 500, 0, 69.9), 5, 1, seed=1)

    def test_area_exactly_one_block(self):
        allocator = FemtocellBlockAllocator(Box(0, 70, 0, 70), 5, 1, seed=1)
        self.assertEqual(allocator.place_one(), Box(0.0, 70.0, 0.0, 70.0))

    def test_inverted_area_rejected(self):
        with self.assertRaises(InvalidAreaUsage):
            FemtocellBlockAllocator(Box(500, 0, 0, 500), 5, 1, seed=1)

    def test_invalid_apartments_rejected(self):
        with self.assertRaises(InvalidAreaUsage):
            FemtocellBlockAllocator(self.area, 0, 1, seed=1)


class TestBuildingGridSpec(unittest.TestCase):
    """Test building generator settings per block."""

    def test_for_block(self):
        block = Box(100, 170, 50, 120)
        spec = BuildingGridSpec.for_block(block, 5, 3)

        self.assertEqual(spec.min_x, 110)
        self.assertEqual(spec.min_y, 60)
        self.assertEqual(spec.length_x, 50)
        self.assertEqual(spec.length_y, 20)
        self.assertEqual(spec.delta_x, 10)
        self.assertEqual(spec.delta_y, 10)
        self.assertEqual(spec.height, 9)
        self.assertEqual(spec.n_rooms_x, 5)
        self.assertEqual(spec.n_rooms_y, 2)
        self.assertEqual(spec.n_floors, 3)
        self.assertEqual(spec.grid_width, 1)
        self.assertEqual(spec.n_buildings, 2)

    def test_footprints_inside_block(self):
        block = Box(100, 170, 50, 120)
        footprints = BuildingGridSpec.for_block(block, 5, 1).footprints()

        self.assertEqual(footprints, [
            Box(110, 160, 60, 80, 0.0, 3.0),
            Box(110, 160, 90, 110, 0.0, 3.0)
        ])
        for footprint in footprints:
            self.assertTrue(block.contains(footprint))
        self.assertFalse(footprints[0].overlaps(footprints[1]))

    def test_allocator_building_specs(self):
        allocator = FemtocellBlockAllocator(Box(0, 1000, 0, 500), 6, 2, seed=9)
        blocks = allocator.place_many(4)
        specs = allocator.building_specs()

        self.assertEqual(len(specs), 4)
        for block, spec in zip(blocks, specs):
            self.assertEqual(spec.min_x, block.x_min + 10)
            self.assertEqual(spec.min_y, block.y_min + 10)
            self.assertEqual(spec.height, 6)
            for footprint in spec.footprints():
                self.assertTrue(block.contains(footprint))


if __name__ == '__main__':
    unittest.main()
