import pytest

from langton_ca.config import SpawnConfig, SpawnVariant
from langton_ca.model.agent import Agent
from langton_ca.model.spawn import (CappedSpawnPolicy, PerCollisionSpawnPolicy,
                                    make_spawn_policy)


def _group():
    return [Agent(0, 0, 0), Agent(0, 0, 1)]


def test_per_collision_spawns_match_group_count(rng):
    policy = PerCollisionSpawnPolicy(rng)
    spawned = policy.spawn([_group(), _group(), _group()], roster_size=6)
    assert len(spawned) == 3
    for agent in spawned:
        assert -100 <= agent.x <= 100
        assert -100 <= agent.y <= 100
        assert agent.heading in (0, 1, 2, 3)


def test_per_collision_ignores_roster_size(rng):
    policy = PerCollisionSpawnPolicy(rng)
    assert len(policy.spawn([_group()], roster_size=10**6)) == 1


def test_per_collision_covers_box_edges(rng):
    policy = PerCollisionSpawnPolicy(rng, extent=1)
    seen = {a.position for a in policy.spawn([_group()] * 400, roster_size=2)}
    assert seen == {(x, y) for x in (-1, 0, 1) for y in (-1, 0, 1)}


def test_capped_radius_grows_after_each_spawn(rng):
    policy = CappedSpawnPolicy(rng)
    for n in range(1, 26):
        previous = policy.radius
        spawned = policy.spawn([_group(), _group()], roster_size=2)
        assert len(spawned) == 1
        assert abs(spawned[0].x) <= previous
        assert abs(spawned[0].y) <= previous
        assert policy.radius == 100 + 2 * n


def test_capped_suppressed_spawn_does_not_grow_radius(rng):
    policy = CappedSpawnPolicy(rng, max_agents=4)
    assert policy.spawn([_group()], roster_size=4) == []
    assert policy.spawn([_group()], roster_size=9) == []
    assert policy.radius == 100
    assert len(policy.spawn([_group()], roster_size=3)) == 1
    assert policy.radius == 102


def test_capped_without_collisions_is_noop(rng):
    policy = CappedSpawnPolicy(rng)
    assert policy.spawn([], roster_size=1) == []
    assert policy.radius == 100


def test_capped_zero_cap_is_unlimited(rng):
    policy = CappedSpawnPolicy(rng, max_agents=0)
    assert len(policy.spawn([_group()], roster_size=10**6)) == 1


@pytest.mark.parametrize("variant, cls", [
    (SpawnVariant.PER_COLLISION, PerCollisionSpawnPolicy),
    (SpawnVariant.CAPPED, CappedSpawnPolicy),
])
def test_make_spawn_policy(rng, variant, cls):
    policy = make_spawn_policy(variant, rng, SpawnConfig(), max_agents=7)
    assert isinstance(policy, cls)
    if cls is CappedSpawnPolicy:
        assert policy.max_agents == 7
        assert policy.radius == 100


def test_capped_many_groups_still_one_spawn(rng):
    policy = CappedSpawnPolicy(rng)
    spawned = policy.spawn([_group() for _ in range(5)], roster_size=10)
    assert len(spawned) == 1
    assert policy.radius == 102
