"""Tests for random speeds, sizes, safety positions and create/reset helpers."""

import random

import pytest

from driftbox.config import EnemyConfig, GameConfig, PlayerConfig, SpeedRange
from driftbox.spawner import (
    center_of,
    create_enemies,
    create_player,
    random_enemy_size,
    random_float,
    random_int,
    random_safety_position,
    random_sign,
    random_speed,
    reset_enemies,
    reset_player,
)
from driftbox.types import ENEMY, PLAYER, Bounds, Position, Size


class SequenceRandom:
    """Stand-in for random.Random that replays fixed values."""

    def __init__(self, *values: float) -> None:
        self._values = iter(values)

    def random(self) -> float:
        return next(self._values)


BOUNDS = Bounds(400, 400, border=4)
CENTER = Position(200, 200)
ZONE = Size(32, 32)


# --- Primitives ---

def test_random_float_in_half_open_range():
    rng = random.Random(0)
    for _ in range(1000):
        v = random_float(rng, 2.5, 7.5)
        assert 2.5 <= v < 7.5


def test_random_int_floors():
    assert random_int(SequenceRandom(0.0), 3, 9) == 3
    assert random_int(SequenceRandom(0.999), 3, 9) == 8
    assert random_int(SequenceRandom(0.5), 0, 5) == 2


def test_random_sign():
    assert random_sign(SequenceRandom(0.9), 4.0) == 4.0
    assert random_sign(SequenceRandom(0.1), 4.0) == -4.0
    assert random_sign(SequenceRandom(0.5), 4.0) == -4.0


# --- random_speed ---

class TestRandomSpeed:
    def test_magnitudes_in_range(self):
        rng = random.Random(7)
        for _ in range(2000):
            speed = random_speed(rng, 25, 75)
            assert 25 <= abs(speed.vx) < 75
            assert 25 <= abs(speed.vy) < 75

    def test_both_signs_occur_on_each_axis(self):
        rng = random.Random(7)
        samples = [random_speed(rng, 1, 2) for _ in range(500)]
        assert any(s.vx > 0 for s in samples)
        assert any(s.vx < 0 for s in samples)
        assert any(s.vy > 0 for s in samples)
        assert any(s.vy < 0 for s in samples)

    def test_signs_are_independent_per_axis(self):
        rng = random.Random(99)
        samples = [random_speed(rng, 1, 2) for _ in range(500)]
        mixed = [s for s in samples if (s.vx > 0) != (s.vy > 0)]
        assert mixed

    def test_degenerate_range_gives_fixed_magnitude(self):
        rng = random.Random(3)
        speed = random_speed(rng, 10, 10)
        assert abs(speed.vx) == 10
        assert abs(speed.vy) == 10


# --- random_enemy_size ---

def test_enemy_size_is_multiple_of_factor():
    rng = random.Random(5)
    widths = set()
    for _ in range(1000):
        size = random_enemy_size(rng, 2, 8, 4)
        assert size.w % 4 == 0 and size.h % 4 == 0
        assert 8 <= size.w <= 28
        assert 8 <= size.h <= 28
        widths.add(size.w)
    assert widths == {8, 12, 16, 20, 24, 28}


# --- random_safety_position ---

class TestRandomSafetyPosition:
    def test_never_overlaps_safety_zone(self):
        rng = random.Random(2024)
        for _ in range(2000):
            size = random_enemy_size(rng, 2, 8, 4)
            pos = random_safety_position(rng, size, ZONE, CENTER, BOUNDS)
            clear_x = (
                pos.x + size.w <= CENTER.x - ZONE.w or pos.x >= CENTER.x + ZONE.w
            )
            clear_y = (
                pos.y + size.h <= CENTER.y - ZONE.h or pos.y >= CENTER.y + ZONE.h
            )
            assert clear_x and clear_y

    def test_stays_inside_border(self):
        rng = random.Random(11)
        for _ in range(2000):
            size = random_enemy_size(rng, 2, 8, 4)
            pos = random_safety_position(rng, size, ZONE, CENTER, BOUNDS)
            assert BOUNDS.border <= pos.x
            assert pos.x + size.w <= BOUNDS.w - BOUNDS.border
            assert BOUNDS.border <= pos.y
            assert pos.y + size.h <= BOUNDS.h - BOUNDS.border

    def test_all_quadrants_are_used(self):
        rng = random.Random(8)
        quadrants = set()
        for _ in range(400):
            pos = random_safety_position(rng, Size(8, 8), ZONE, CENTER, BOUNDS)
            quadrants.add((pos.x < CENTER.x, pos.y < CENTER.y))
        assert quadrants == {(True, True), (True, False), (False, True), (False, False)}

    def test_returns_integers(self):
        rng = random.Random(1)
        pos = random_safety_position(rng, Size(12, 12), ZONE, CENTER, BOUNDS)
        assert isinstance(pos.x, int)
        assert isinstance(pos.y, int)

    def test_left_top_picks_from_border(self):
        # left, top, then the lowest value in each range
        rng = SequenceRandom(0.9, 0.9, 0.0, 0.0)
        pos = random_safety_position(rng, Size(8, 8), ZONE, CENTER, BOUNDS)
        assert pos == Position(4, 4)

    def test_right_bottom_starts_past_zone(self):
        rng = SequenceRandom(0.1, 0.1, 0.0, 0.0)
        pos = random_safety_position(rng, Size(8, 8), ZONE, CENTER, BOUNDS)
        assert pos == Position(232, 232)

    def test_oversized_entity_is_not_clamped(self):
        # left half is only 164px wide, a 300px box inverts the range
        rng = SequenceRandom(0.9, 0.9, 0.5, 0.0)
        pos = random_safety_position(rng, Size(300, 8), ZONE, CENTER, BOUNDS)
        assert pos.x == -64
        assert pos.x < BOUNDS.border


# --- center_of ---

def test_center_of():
    assert center_of(Size(16, 16), BOUNDS) == Position(192, 192)
    assert center_of(Size(10, 20), Bounds(100, 50)) == Position(45, 15)


# --- Player ---

def test_create_player_is_centered_with_player_speed():
    config = GameConfig()
    player = create_player(random.Random(0), config)
    assert player.kind == PLAYER
    assert (player.x, player.y) == (192, 192)
    assert (player.w, player.h) == (16, 16)
    assert player.color == "#EFC9FF"
    assert 50 <= abs(player.vx) < 100
    assert 50 <= abs(player.vy) < 100


def test_reset_player_recenters_in_place():
    config = GameConfig()
    rng = random.Random(0)
    player = create_player(rng, config)
    player.x = 5.0
    player.y = 390.0
    old_speed = (player.vx, player.vy)

    reset_player(player, rng, config)

    assert (player.x, player.y) == (192, 192)
    assert (player.vx, player.vy) != old_speed


# --- Enemies ---

def test_create_enemies_uses_configured_count():
    config = GameConfig(enemy=EnemyConfig(count=7))
    enemies = create_enemies(random.Random(3), config)
    assert len(enemies) == 7
    assert all(e.kind == ENEMY for e in enemies)


def test_create_enemies_explicit_count_overrides_config():
    enemies = create_enemies(random.Random(3), GameConfig(), count=2)
    assert len(enemies) == 2


def test_create_enemies_zero():
    assert create_enemies(random.Random(3), GameConfig(), count=0) == []


def test_created_enemies_respect_ranges():
    config = GameConfig()
    for enemy in create_enemies(random.Random(42), config, count=200):
        assert 8 <= enemy.w <= 28 and enemy.w % 4 == 0
        assert 25 <= abs(enemy.vx) < 75
        assert 25 <= abs(enemy.vy) < 75
        assert enemy.color == "#EFC9FF"


def test_reset_enemies_keeps_objects_and_count():
    config = GameConfig()
    rng = random.Random(42)
    enemies = create_enemies(rng, config)
    ids = [id(e) for e in enemies]
    before = [(e.x, e.y, e.w, e.h, e.vx, e.vy) for e in enemies]

    reset_enemies(enemies, rng, config)

    assert [id(e) for e in enemies] == ids
    after = [(e.x, e.y, e.w, e.h, e.vx, e.vy) for e in enemies]
    assert after != before


def test_same_seed_spawns_identically():
    config = GameConfig()
    a = create_enemies(random.Random(77), config)
    b = create_enemies(random.Random(77), config)
    assert a == b


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_spawned_enemies_clear_player_start(seed):
    config = GameConfig()
    rng = random.Random(seed)
    player = create_player(rng, config)
    for enemy in create_enemies(rng, config, count=50):
        overlap_x = enemy.x < player.x + player.w and player.x < enemy.x + enemy.w
        overlap_y = enemy.y < player.y + player.h and player.y < enemy.y + enemy.h
        assert not (overlap_x and overlap_y)


# --- Fallback speed ---

def test_player_without_own_speed_uses_game_speed():
    config = GameConfig(
        speed=SpeedRange(1000, 2000), player=PlayerConfig(speed=None)
    )
    player = create_player(random.Random(4), config)
    assert 1000 <= abs(player.vx) < 2000
    assert 1000 <= abs(player.vy) < 2000


def test_enemies_without_own_speed_use_game_speed():
    config = GameConfig(
        speed=SpeedRange(1000, 2000), enemy=EnemyConfig(speed=None)
    )
    for enemy in create_enemies(random.Random(4), config, count=50):
        assert 1000 <= abs(enemy.vx) < 2000
        assert 1000 <= abs(enemy.vy) < 2000


def test_own_speed_wins_over_game_speed():
    config = GameConfig(speed=SpeedRange(1000, 2000))
    player = create_player(random.Random(4), config)
    assert 50 <= abs(player.vx) < 100
