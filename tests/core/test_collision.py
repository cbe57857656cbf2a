"""
Unit tests for collision detection system

Tests the hitbox based collision checks including:
- Strict rectangle overlap (touching edges do not collide)
- Player/enemy checks with the configured hitbox sizes
- Reports of which enemies touched the player
"""

import pytest

from frogger.core.collision import CollisionDetector
from frogger.core.collision import CollisionReport
from frogger.core.collision import Hitbox
from frogger.core.collision import rects_overlap
from frogger.core.entities import Enemy
from frogger.core.entities import Player
from frogger.utils.config import GameConfig


class TestRectsOverlap:
    """Test the raw rectangle overlap test"""

    def test_overlapping_rects(self):
        assert rects_overlap((0, 0, 10, 10), (5, 5, 10, 10))

    def test_disjoint_rects(self):
        assert not rects_overlap((0, 0, 10, 10), (20, 20, 10, 10))

    def test_touching_edges_do_not_overlap(self):
        """Rectangles sharing an edge are not colliding"""
        assert not rects_overlap((0, 0, 10, 10), (10, 0, 10, 10))
        assert not rects_overlap((0, 0, 10, 10), (0, 10, 10, 10))

    def test_contained_rect(self):
        assert rects_overlap((0, 0, 100, 100), (40, 40, 5, 5))

    def test_symmetric(self):
        a = (200, 380, 37, 30)
        b = (180, 380, 60, 25)
        assert rects_overlap(a, b) == rects_overlap(b, a)


class TestHitbox:
    """Test hitbox rectangles"""

    def test_rect_anchored_at_position(self):
        hitbox = Hitbox(37, 30)
        assert hitbox.rect_at(200, 380) == (200, 380, 37, 30)


class TestCollisionDetector:
    """Test player/enemy collision checks"""

    @pytest.fixture
    def detector(self, config):
        return CollisionDetector.from_config(config)

    def test_hitboxes_from_config(self, detector):
        assert detector.player_hitbox == Hitbox(37, 30)
        assert detector.enemy_hitbox == Hitbox(60, 25)

    def test_enemy_overlapping_player(self, detector, config):
        """Player at (200, 380) and a bug at (180, 380) collide"""
        player = Player(config)
        enemy = Enemy(180, 380, 100, config)

        assert detector.check_player_enemy(player, enemy)

    def test_enemy_far_from_player(self, detector, config):
        """Player at (200, 380) and a bug at (400, 380) do not collide"""
        player = Player(config)
        enemy = Enemy(400, 380, 100, config)

        assert not detector.check_player_enemy(player, enemy)

    @pytest.mark.parametrize(
        "enemy_x,enemy_y,expected",
        [
            (140, 380, False),  # bug ends exactly where the player starts
            (141, 380, True),
            (237, 380, False),  # bug starts exactly where the player ends
            (236, 380, True),
            (200, 355, False),  # bug ends exactly at the player's top
            (200, 356, True),
            (200, 410, False),  # bug starts exactly at the player's bottom
            (200, 409, True),
        ],
    )
    def test_hitbox_edges(self, detector, config, enemy_x, enemy_y, expected):
        player = Player(config)
        enemy = Enemy(enemy_x, enemy_y, 100, config)

        assert detector.check_player_enemy(player, enemy) is expected

    def test_check_player_enemies_returns_hits(self, detector, config):
        player = Player(config)
        hit = Enemy(190, 370, 100, config)
        missed = Enemy(0, 60, 100, config)

        assert detector.check_player_enemies(player, [hit, missed]) == [hit]

    def test_custom_hitboxes(self, config):
        """The algorithm does not depend on the configured sizes"""
        detector = CollisionDetector(Hitbox(1, 1), Hitbox(1, 1))
        player = Player(config)

        assert not detector.check_player_enemy(player, Enemy(180, 380, 100, config))
        assert detector.check_player_enemy(player, Enemy(200.5, 380.5, 100, config))

    def test_config_hitbox_overrides(self):
        config = GameConfig(ENEMY_HITBOX_WIDTH=10)
        detector = CollisionDetector.from_config(config)
        player = Player(config)

        assert not detector.check_player_enemy(player, Enemy(180, 380, 100, config))


class TestCollisionReport:
    """Test the collision pass summary"""

    def test_empty_report(self):
        report = CollisionReport()
        assert report.hit_enemies == []
        assert not report.reached_goal
        assert not report.player_reset

    def test_hit_resets_player(self, config):
        report = CollisionReport(hit_enemies=[Enemy(0, 0, 1, config)])
        assert report.player_reset

    def test_goal_resets_player(self):
        assert CollisionReport(reached_goal=True).player_reset
