import math
import random
import unittest

from generate_split import HORIZONTAL, VERTICAL, partition
from world_state import Horizontal, Region, Vertical

BOUNDS = Region(0, 0, 2047, 1023)


def interiors_overlap(a: Region, b: Region) -> bool:
    return a.x_min < b.x_max and b.x_min < a.x_max and a.y_min < b.y_max and b.y_min < a.y_max


class PartitionTest(unittest.TestCase):
    def test_rooms_tile_the_bounds(self):
        for seed in range(20):
            result = partition(BOUNDS, 500, VERTICAL, random.Random(seed))
            area = sum(room.width * room.height for room in result.rooms)
            self.assertEqual(area, BOUNDS.width * BOUNDS.height)
            for i, room in enumerate(result.rooms):
                self.assertGreater(room.width, 0)
                self.assertGreater(room.height, 0)
                self.assertGreaterEqual(room.x_min, BOUNDS.x_min)
                self.assertLessEqual(room.x_max, BOUNDS.x_max)
                self.assertGreaterEqual(room.y_min, BOUNDS.y_min)
                self.assertLessEqual(room.y_max, BOUNDS.y_max)
                for other in result.rooms[i + 1:]:
                    self.assertFalse(interiors_overlap(room, other), f"{room} overlaps {other}")

    def test_split_margin_keeps_rooms_usable(self):
        for seed in range(20):
            result = partition(BOUNDS, 500, VERTICAL, random.Random(seed))
            for room in result.rooms:
                self.assertGreaterEqual(room.width, 250)
                self.assertGreaterEqual(room.height, 250)

    def test_lines_stay_inside_bounds(self):
        result = partition(BOUNDS, 500, VERTICAL, random.Random(7))
        self.assertTrue(result.verticals)
        for line in result.verticals:
            self.assertIsInstance(line, Vertical)
            self.assertTrue(BOUNDS.x_min < line.x < BOUNDS.x_max)
        for line in result.horizontals:
            self.assertIsInstance(line, Horizontal)
            self.assertTrue(BOUNDS.y_min < line.y < BOUNDS.y_max)

    def test_depth_is_bounded(self):
        bound = math.ceil(math.log2(2048 / 500)) + 1
        for seed in range(200):
            result = partition(BOUNDS, 500, VERTICAL, random.Random(seed))
            self.assertLessEqual(result.depth, bound)
            self.assertGreaterEqual(result.depth, 1)

    def test_small_bounds_give_a_single_room(self):
        bounds = Region(0, 0, 400, 300)
        result = partition(bounds, 500, VERTICAL, random.Random(1))
        self.assertEqual(result.rooms, [bounds])
        self.assertEqual(result.verticals, [])
        self.assertEqual(result.horizontals, [])
        self.assertEqual(result.depth, 1)

    def test_narrow_first_axis_stops_even_if_other_axis_is_long(self):
        bounds = Region(0, 0, 400, 3000)
        result = partition(bounds, 500, VERTICAL, random.Random(1))
        self.assertEqual(result.rooms, [bounds])

    def test_horizontal_first_starts_with_a_horizontal_line(self):
        result = partition(Region(0, 0, 400, 1200), 500, HORIZONTAL, random.Random(3))
        self.assertEqual(result.verticals, [])
        self.assertGreaterEqual(len(result.horizontals), 1)
        self.assertEqual(result.horizontals[0].x0, 0)
        self.assertEqual(result.horizontals[0].x1, 400)

    def test_same_seed_same_map(self):
        first = partition(BOUNDS, 500, VERTICAL, random.Random(42))
        second = partition(BOUNDS, 500, VERTICAL, random.Random(42))
        self.assertEqual(first, second)

    def test_bad_input_fails_fast(self):
        with self.assertRaises(ValueError):
            partition(BOUNDS, 500, "diagonal")
        with self.assertRaises(ValueError):
            partition(BOUNDS, 1)
        with self.assertRaises(ValueError):
            Region(10, 0, 5, 100)
        with self.assertRaises(ValueError):
            Region(0, 0, 0, 100)
        with self.assertRaises(ValueError):
            Vertical(5, 10, 10)
        with self.assertRaises(ValueError):
            Horizontal(10, 3, 5)
