"""
test_entity_pool.py
-------------------
Tests for EntityPool spawning, updating and in-place compaction.
"""

import pytest

from cosmic_defender.entities.particle import Particle
from cosmic_defender.systems.entity_management.entity_pool import EntityPool


# ===========================================================
# Helpers
# ===========================================================

def make_particles(n):
    return [Particle(i, 0, vx=0, vy=0, size=2, decay=1, color="#ffffff") for i in range(n)]


def kill(pool, indices):
    for i in indices:
        pool[i].mark_dead()


# ===========================================================
# Container
# ===========================================================

def test_spawn_appends_in_order():
    pool = EntityPool("particles")
    items = make_particles(3)
    for p in items:
        assert pool.spawn(p) is p

    assert list(pool) == items
    assert len(pool) == 3
    assert pool
    assert pool.stats["spawned"] == 3


def test_empty_pool_is_falsy():
    assert not EntityPool("bullets")


def test_extend():
    pool = EntityPool("particles")
    pool.extend(make_particles(4))
    assert len(pool) == 4
    assert pool.stats["spawned"] == 4


# ===========================================================
# Compaction
# ===========================================================

def test_stable_compact_keeps_survivor_order():
    pool = EntityPool("particles", stable=True)
    items = make_particles(6)
    pool.extend(items)
    kill(pool, [0, 2, 5])

    removed = pool.compact()

    assert removed == 3
    assert list(pool) == [items[1], items[3], items[4]]
    assert pool.stats["removed"] == 3


def test_unstable_compact_keeps_every_survivor():
    pool = EntityPool("particles", stable=False)
    items = make_particles(6)
    pool.extend(items)
    kill(pool, [0, 2, 5])

    assert pool.compact() == 3
    assert set(map(id, pool)) == {id(items[1]), id(items[3]), id(items[4])}


@pytest.mark.parametrize("stable", [True, False])
def test_compact_everything_dead(stable):
    pool = EntityPool("particles", stable=stable)
    pool.extend(make_particles(5))
    kill(pool, range(5))
    assert pool.compact() == 5
    assert len(pool) == 0


@pytest.mark.parametrize("stable", [True, False])
def test_compact_nothing_dead(stable):
    pool = EntityPool("particles", stable=stable)
    pool.extend(make_particles(3))
    assert pool.compact() == 0
    assert len(pool) == 3


def test_compact_reuses_backing_list():
    pool = EntityPool("particles")
    pool.extend(make_particles(4))
    backing = pool._items
    kill(pool, [1])
    pool.compact()
    assert pool._items is backing


# ===========================================================
# Update Cycle
# ===========================================================

def test_update_forwards_dt_and_removes_expired():
    pool = EntityPool("particles")
    fast = Particle(0, 0, vx=10, vy=0, size=2, decay=10, color="#ffffff")
    slow = Particle(0, 0, vx=10, vy=0, size=2, decay=1, color="#ffffff")
    pool.extend([fast, slow])

    removed = pool.update(0.5)

    assert removed == 1
    assert list(pool) == [slow]
    assert slow.x == 5


def test_alive_and_count_alive():
    pool = EntityPool("particles")
    pool.extend(make_particles(4))
    kill(pool, [3])
    assert pool.count_alive() == 3
    assert len(pool.alive()) == 3
    assert len(pool) == 4  # not compacted yet


def test_clear_keeps_lifetime_counters():
    pool = EntityPool("particles")
    pool.extend(make_particles(2))
    pool.clear()
    assert len(pool) == 0
    assert pool.stats["spawned"] == 2
