"""
entity_pool.py
--------------
Arena-style storage for one entity type (bullets, enemies or particles).

Responsibilities
----------------
- Hold entities in a single backing list, appended in spawn order.
- Run the per-tick update over every member, then compact.
- Compact in place: dead members are dropped without allocating a new list.
- Keep lifetime counters for debugging and tests.

Compaction modes
----------------
stable=True   survivors keep their relative order (write-index sweep)
stable=False  dead members are swap-removed with the tail (order not kept)

The World uses stable pools; collision scans run in spawn order.
"""

from cosmic_defender.core.debug.debug_logger import DebugLogger


class EntityPool:
    """List-backed arena with explicit mark-then-compact removal."""

    # ===========================================================
    # Initialization
    # ===========================================================
    def __init__(self, name: str, stable: bool = True):
        """
        Args:
            name: Label used in logs (e.g. "bullets")
            stable: Preserve survivor order on compaction
        """
        self.name = name
        self.stable = stable
        self._items = []
        self.stats = {
            "spawned": 0,
            "removed": 0,
        }

    # ===========================================================
    # Container Protocol
    # ===========================================================
    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __bool__(self):
        return bool(self._items)

    # ===========================================================
    # Spawning
    # ===========================================================
    def spawn(self, entity):
        """Append an entity and return it."""
        self._items.append(entity)
        self.stats["spawned"] += 1
        return entity

    def extend(self, entities):
        for entity in entities:
            self.spawn(entity)

    # ===========================================================
    # Update Cycle
    # ===========================================================
    def update(self, dt: float, *args):
        """
        Update every member, then drop the ones flagged dead.

        Args:
            dt: Delta time in seconds
            *args: Extra arguments forwarded to each entity's update()

        Returns:
            int: Number of entities removed.
        """
        for entity in self._items:
            entity.update(dt, *args)
        return self.compact()

    def compact(self) -> int:
        """Remove dead members in place. Returns the number removed."""
        items = self._items
        before = len(items)

        if self.stable:
            write = 0
            for entity in items:
                if entity.alive:
                    items[write] = entity
                    write += 1
            del items[write:]
        else:
            i = 0
            while i < len(items):
                if items[i].alive:
                    i += 1
                    continue
                items[i] = items[-1]
                items.pop()

        removed = before - len(items)
        if removed:
            self.stats["removed"] += removed
            DebugLogger.trace(
                f"Compacted {removed} from [{self.name}] ({len(items)} alive)",
                category="entity_cleanup"
            )
        return removed

    # ===========================================================
    # Queries
    # ===========================================================
    def alive(self):
        """Return the members not flagged for deletion."""
        return [entity for entity in self._items if entity.alive]

    def count_alive(self) -> int:
        return sum(1 for entity in self._items if entity.alive)

    def clear(self):
        """Drop every member. Lifetime counters are kept."""
        self._items.clear()
