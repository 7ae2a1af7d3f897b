"""
Tests for the box, the heart and the goal.
"""
import pytest
from indieboxer.gameplay.enemy import Enemy
from indieboxer.gameplay.events import BoxDeliveredEvent, BoxDestroyedEvent, HeartCollectedEvent
from indieboxer.gameplay.items import Box, DamageTier, Heart, ItemKind
from indieboxer.gameplay.constants import OFFBOARD_CELL, STARTING_LIVES


def place_player(player, x, y):
    player.x = player.move_x = x
    player.y = player.move_y = y
    player.moving = False


class TestBox:
    """Tests for picking up, carrying and damaging the box."""

    def test_spawns_in_enemy_lanes(self, world):
        """A new box sits on the board in rows 1-3."""
        box = Box(world.rng)
        assert box.kind == ItemKind.CARGO
        assert 0 <= box.x <= 4
        assert box.y in (1, 2, 3)
        assert box.damage == 0
        assert not box.collected

    def test_collected_when_player_on_cell(self, world):
        """Standing on the box picks it up."""
        box = world.box
        box.x, box.y = 1, 2
        place_player(world.player, 1, 2)

        box.update(0.05, world)

        assert box.collected

    def test_follows_player(self, world):
        """A collected box tracks the player's position."""
        box = world.box
        box.collected = True
        world.player.x, world.player.y = 1.5, 3

        box.update(0.05, world)

        assert (box.x, box.y) == (1.5, 3)

    def test_dropped_when_hit(self, world):
        """A hit on the carrier drops the box somewhere on the lanes."""
        box = world.box
        box.collected = True
        world.session.hit = True

        box.update(0.05, world)

        assert not box.collected
        assert box.y in (1, 2, 3)

    @pytest.mark.parametrize("damage, points", [(0, 100), (1, 50), (2, 25)])
    def test_delivery_points(self, world, damage, points):
        """Delivery pays out by damage and resets the box."""
        goal = world.goal
        place_player(world.player, goal.x, 0)
        box = world.box
        box.collected = True
        box.damage = damage

        box.update(0.05, world)

        assert world.session.score == points
        assert box.damage == 0
        assert not box.collected
        assert box.y in (1, 2, 3)
        assert world.session.goal_reached
        assert len(world.player.deliveries) == 1
        assert (world.player.deliveries[0].x, world.player.deliveries[0].y) == (goal.x, 0)
        assert world.events == [BoxDeliveredEvent(points, damage)]

    def test_delivery_moves_rock(self, world):
        """The rock stays on its row when relocated after a delivery."""
        place_player(world.player, world.goal.x, 0)
        world.box.collected = True

        world.box.update(0.05, world)

        assert world.rocks[0].y == 4
        assert 0 <= world.rocks[0].x <= 4

    def test_no_delivery_off_goal(self, world):
        """Reaching the top row away from the goal does nothing."""
        world.goal.x = 0
        place_player(world.player, 3, 0)
        world.box.collected = True

        world.box.update(0.05, world)

        assert world.box.collected
        assert world.session.score == 0

    def test_destroyed_after_three_hits(self, world):
        """Three hits lose the box, cost points and clear enemy flags."""
        enemies = [Enemy(1, world.rng), Enemy(2, world.rng)]
        for enemy in enemies:
            enemy.hit_box = True
        world.enemies.extend(enemies)
        box = world.box
        box.x, box.y = 0, 1
        box.damage = 3

        box.update(0.05, world)

        assert world.session.score == -50
        assert len(world.session.boxes_lost) == 1
        assert box.damage == 0
        assert box.y in (1, 2, 3)
        assert all(not enemy.hit_box for enemy in enemies)
        assert world.events == [BoxDestroyedEvent(50)]

    @pytest.mark.parametrize("damage, tier, sprite", [
        (0, DamageTier.UNDAMAGED, 'gem-blue'),
        (1, DamageTier.FIRST_HIT, 'gem-green'),
        (2, DamageTier.SECOND_HIT, 'gem-orange'),
        (3, DamageTier.DESTROYED, 'gem-blue'),
    ])
    def test_damage_tier(self, world, damage, tier, sprite):
        """Sprite follows the damage tier."""
        world.box.damage = damage
        assert world.box.tier == tier
        assert world.box.sprite == sprite


class TestHeart:
    """Tests for the timed bonus heart."""

    def test_starts_hidden(self, world):
        """The heart starts parked off the board."""
        heart = world.heart
        assert heart.kind == ItemKind.BONUS
        assert (heart.x, heart.y) == OFFBOARD_CELL
        assert not heart.visible

    def test_appear_cell_in_lanes(self, world):
        """Appear cells are always in the enemy lanes."""
        heart = Heart(world.rng)
        for _ in range(200):
            heart.roll_appear_cell()
            assert 0 <= heart.appear_x <= 4
            assert heart.appear_y in (1, 2, 3)

    def test_hidden_at_zero(self, world):
        """Second 0 shows and hides in the same step."""
        world.heart.update(0.05, world)
        assert not world.heart.visible

    def test_appears_at_thirty_seconds(self, world):
        """At 30 seconds the heart moves to its appear cell."""
        heart = world.heart
        appear = (heart.appear_x, heart.appear_y)
        world.session.elapsed = 30.2

        heart.update(0.05, world)

        assert heart.visible
        assert (heart.x, heart.y) == appear

    def test_hides_at_multiple_of_nine(self, world):
        """The next multiple of nine seconds hides it again."""
        heart = world.heart
        world.session.elapsed = 30.0
        heart.update(0.05, world)
        world.session.elapsed = 35.9
        heart.update(0.05, world)
        assert heart.visible

        world.session.elapsed = 36.0
        heart.update(0.05, world)
        assert not heart.visible

    def test_window_skipped_when_both_divide(self, world):
        """At 90 seconds the heart is shown and hidden at once."""
        world.session.elapsed = 90.1
        world.heart.update(0.05, world)
        assert not world.heart.visible

    def test_collect_grants_life_and_points(self, world):
        """Picking up the heart adds a life and 50 points."""
        heart = world.heart
        world.session.elapsed = 30.0
        heart.update(0.05, world)
        place_player(world.player, heart.x, heart.y)

        world.session.elapsed = 30.5
        heart.update(0.05, world)

        assert world.player.lives == STARTING_LIVES + 1
        assert world.session.score == 50
        assert not heart.visible
        assert world.events == [HeartCollectedEvent(50, STARTING_LIVES + 1)]

    def test_not_reshown_within_same_second(self, world):
        """A collected heart stays hidden for the rest of its second."""
        heart = world.heart
        world.session.elapsed = 30.0
        heart.update(0.05, world)
        place_player(world.player, heart.x, heart.y)
        world.session.elapsed = 30.5
        heart.update(0.05, world)

        world.session.elapsed = 30.8
        heart.update(0.05, world)

        assert not heart.visible
        assert world.player.lives == STARTING_LIVES + 1


class TestGoal:
    """Tests for the goal zone."""

    def test_on_top_row(self, world):
        assert world.goal.y == 0
        assert 0 <= world.goal.x <= 4

    def test_relocates_after_delivery(self, world):
        """The goal consumes the delivery flag and stays on row 0."""
        world.session.goal_reached = True
        world.goal.update(0.05, world)
        assert not world.session.goal_reached
        assert world.goal.y == 0
        assert 0 <= world.goal.x <= 4


class TestBoxRearmsEnemies:
    """Every box reset lets enemies that already hit the old box hit the new one."""

    def flagged_enemy(self, world):
        enemy = Enemy(1, world.rng)
        enemy.hit_box = True
        enemy.visible = True
        world.enemies.append(enemy)
        return enemy

    def run_over_box(self, world, enemy):
        """Put the enemy on the box's lane just short of it and tick once."""
        enemy.y = world.box.y
        enemy.x = world.box.x - 0.1
        enemy.update(0.0, world)

    def test_delivery_rearms(self, world):
        """An enemy that ran over the delivered box can hit the next one."""
        enemy = self.flagged_enemy(world)
        place_player(world.player, world.goal.x, 0)
        world.box.collected = True

        world.box.update(0.05, world)

        assert not enemy.hit_box
        self.run_over_box(world, enemy)
        assert world.box.damage == 1

    def test_drop_on_hit_rearms(self, world):
        """Dropping the box on a hit re-arms every enemy."""
        enemy = self.flagged_enemy(world)
        world.box.collected = True
        world.session.hit = True

        world.box.update(0.05, world)

        assert not world.box.collected
        assert not enemy.hit_box
        self.run_over_box(world, enemy)
        assert world.box.damage == 1

    def test_destroy_rearms(self, world):
        """The replacement for a destroyed box takes damage from the same enemy."""
        enemy = self.flagged_enemy(world)
        world.box.damage = 3

        world.box.update(0.05, world)

        assert not enemy.hit_box
        self.run_over_box(world, enemy)
        assert world.box.damage == 1

    def test_reset_rearms_given_enemies(self, world):
        """reset() clears the flag on the enemies it is given."""
        enemy = self.flagged_enemy(world)
        world.box.reset(world.enemies)
        assert not enemy.hit_box
