"""Resolve requested registry ids into their transitive closure."""

import logging
from collections.abc import Iterable

from borrowr.registry.models import HasRegistry, ResolvedTree

logger = logging.getLogger(__name__)


def resolve_tree(index: HasRegistry, requested_ids: Iterable[str]) -> ResolvedTree:
    """Return every entry reachable from requested_ids via registry dependencies.

    Requested ids are visited in order and each entry's registry dependencies
    depth-first in declared order. A single visited set covers the whole
    traversal, so each id appears once and cyclic dependencies terminate.
    Ids missing from the index are skipped without error.

    The traversal uses an explicit stack instead of recursion; the resulting
    order matches a recursive pre-order walk.

    Args:
        index: Registry index (full or top-level variant)
        requested_ids: Ids to resolve, in priority order

    Returns:
        Mapping of id to entry in first-discovery order
    """
    registry = index.registry
    tree: ResolvedTree = {}
    visited: set[str] = set()

    # Reversed so the first requested id is popped first
    stack = list(reversed(list(requested_ids)))
    while stack:
        entry_id = stack.pop()
        if entry_id in visited:
            continue
        if entry_id not in registry:
            logger.debug("Skipping %s: not present in registry", entry_id)
            continue

        visited.add(entry_id)
        entry = registry[entry_id]
        tree[entry_id] = entry

        stack.extend(reversed(entry.registry_dependencies))

    logger.debug("Resolved %d entries: %s", len(tree), ", ".join(tree))
    return tree
