import pytest

from game.arena.collision import collides, first_collision
from game.arena.entities import Player

from conftest import make_big, make_homing, make_slash, make_trap


class TestSlash:
    def test_warning_slash_never_collides(self, player):
        for orientation in ("horizontal", "vertical", "diagonal-right", "diagonal-left"):
            slash = make_slash(orientation=orientation, x=380, y=380, width=40, height=40, warning=True)
            assert not collides(player, slash)

    def test_active_horizontal_overlap(self, player):
        assert collides(player, make_slash(y=390))

    def test_buffer_inflates_band(self, player):
        # Band bottom at 381 is 4 units above the player top (385)
        assert collides(player, make_slash(y=341))
        assert not collides(player, make_slash(y=300))

    def test_touching_buffer_edge_is_not_a_hit(self, player):
        # Band bottom + buffer == player top -> strict comparison
        assert not collides(player, make_slash(y=340))

    def test_active_vertical_overlap(self, player):
        slash = make_slash(orientation="vertical", x=410, y=0, width=40, height=800, active_vx=0, active_vy=5)
        assert collides(player, slash)
        slash.x = 500
        assert not collides(player, slash)

    def test_diagonal_uses_circle_around_center(self, player):
        # Centre of a 1200 x 40 rectangle at (-200, 380) is (400, 400)
        slash = make_slash(orientation="diagonal-right", x=-200, y=380, width=1200, height=40, rotation=45)
        assert collides(player, slash)

        slash.y = 380 + 39
        assert collides(player, slash)
        slash.y = 380 + 40
        assert not collides(player, slash)

    def test_diagonal_ignores_rotated_extent(self, player):
        # The rendered band would cross the player, the approximation does not
        slash = make_slash(orientation="diagonal-left", x=500, y=0, width=1200, height=40, rotation=-45)
        assert not collides(player, slash)


class TestProjectiles:
    @pytest.mark.parametrize("factory", [make_big, make_homing])
    def test_circle_overlap(self, player, factory):
        h = factory(x=400, y=400)
        assert collides(player, h)

    def test_combined_radius_is_strict(self, player):
        h = make_homing(x=400 + 15 + 7.5, y=400)
        assert not collides(player, h)
        h.x -= 0.01
        assert collides(player, h)

    def test_big_projectile_radius(self, player):
        assert collides(player, make_big(x=400, y=400 - 37, radius=22.5))
        assert not collides(player, make_big(x=400, y=400 - 38, radius=22.5))


class TestTrap:
    def test_inactive_trap_never_collides(self, player):
        assert not collides(player, make_trap(x=360, y=360, active=False))

    def test_active_trap_overlap(self, player):
        assert collides(player, make_trap(x=360, y=360, active=True, activated_at=0))

    def test_active_trap_edge(self, player):
        # Player right edge at 415
        assert not collides(player, make_trap(x=415, y=360, active=True, activated_at=0))
        assert collides(player, make_trap(x=414, y=360, active=True, activated_at=0))


def test_first_collision_returns_first_hit(player):
    far = make_big(x=50, y=50)
    hit = make_homing(x=400, y=400)
    also = make_trap(active=True, activated_at=0)
    assert first_collision(player, [far, hit, also]) is hit
    assert first_collision(player, [far]) is None


def test_player_edges():
    p = Player(15, 15)
    assert p.half == 15
