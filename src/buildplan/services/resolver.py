"""Flattening of project dependency trees into weighted leaf resources.

A project's required resources are expanded depth-first in declaration order.
Quantities multiply along the path from the root, so a project needing two
tables, where each table needs four planks, contributes eight planks. Leaf
occurrences are appended as found and never merged, which keeps the output
order identical to the traversal order.

References to names that are not registered contribute nothing. When the
whole expansion yields no leaf at all the summary fails with
DanglingDependencyError; a project with one dangling and one valid branch
silently returns the valid branch only.
"""

import logging
import math
import operator
from collections.abc import Callable, Iterator, Mapping

from buildplan.context import ServerContext
from buildplan.errors import (
    BuildTimeOverflowError,
    CyclicDependencyError,
    DanglingDependencyError,
    NotAProjectError,
    ProjectNotFoundError,
)
from buildplan.models.entry import (
    Entry,
    Number,
    ProjectEntry,
    RequiredResource,
    ResourceEntry,
    ResourceLine,
    Summary,
)

logger = logging.getLogger(__name__)


def _checked(
    op: Callable[[Number, Number], Number],
    left: Number,
    right: Number,
    project_name: str,
) -> Number:
    # Large ints overflow on conversion, large floats become inf
    try:
        result = op(left, right)
        finite = math.isfinite(result)
    except OverflowError:
        finite = False
    if not finite:
        raise BuildTimeOverflowError(project_name)
    return result


def expand_project(
    entries: Mapping[str, Entry],
    project: ProjectEntry,
) -> tuple[list[ResourceLine], list[str]]:
    """Expand a project into its weighted leaf resources.

    Uses an explicit stack of child iterators instead of recursion, so deep
    acyclic chains are not limited by the interpreter's recursion limit.

    Args:
        entries: Registry snapshot (name -> Entry)
        project: Root project to expand

    Returns:
        Tuple of (leaf lines in traversal order, unknown reference names)

    Raises:
        BuildTimeOverflowError: If a propagated quantity is not a finite number
        CyclicDependencyError: If a project is reached again while it is
            still being expanded
    """
    resources: list[ResourceLine] = []
    missing: list[str] = []

    # Each frame: (project name, multiplier applied to its children, children)
    stack: list[tuple[str, Number, Iterator[RequiredResource]]] = [
        (project.name, 1, iter(project.required_resources))
    ]
    on_path = {project.name}

    while stack:
        parent_name, multiplier, children = stack[-1]
        ref = next(children, None)
        if ref is None:
            stack.pop()
            on_path.discard(parent_name)
            continue

        entry = entries.get(ref.name)

        if entry is None:
            logger.warning("Skipping unknown reference %r required by %r", ref.name, parent_name)
            missing.append(ref.name)
        elif isinstance(entry, ResourceEntry):
            quantity = _checked(operator.mul, multiplier, ref.quantity, project.name)
            resources.append(ResourceLine(name=ref.name, quantity=quantity))
        elif ref.name in on_path:
            cycle = [frame[0] for frame in stack] + [ref.name]
            start = cycle.index(ref.name)
            logger.warning("Cycle while expanding %r: %s", project.name, " -> ".join(cycle[start:]))
            raise CyclicDependencyError(cycle[start:])
        else:
            on_path.add(ref.name)
            quantity = _checked(operator.mul, multiplier, ref.quantity, project.name)
            stack.append((ref.name, quantity, iter(entry.required_resources)))

    return resources, missing


def total_build_time(entries: Mapping[str, Entry], name: str, resources: list[ResourceLine]) -> Number:
    """Sum of quantity * build_time over the flattened resources."""
    total: Number = 0
    for line in resources:
        resource = entries[line.name]
        assert isinstance(resource, ResourceEntry)
        line_time = _checked(operator.mul, line.quantity, resource.build_time, name)
        total = _checked(operator.add, total, line_time, name)
    return total


def summarize(entries: Mapping[str, Entry], name: str) -> Summary:
    """Summarize a project over a registry snapshot.

    Args:
        entries: Registry snapshot (name -> Entry)
        name: Name of the project to summarize

    Returns:
        Summary with flattened resources and total build time

    Raises:
        ProjectNotFoundError: If name is not registered
        NotAProjectError: If name is a resource
        CyclicDependencyError: If the project transitively requires itself
        DanglingDependencyError: If no leaf resource was reachable
        BuildTimeOverflowError: If a quantity or the total is not a finite number
    """
    entry = entries.get(name)
    if entry is None:
        raise ProjectNotFoundError(name)
    if not isinstance(entry, ProjectEntry):
        raise NotAProjectError(name)

    resources, missing = expand_project(entries, entry)
    if not resources:
        raise DanglingDependencyError(name, missing)

    return Summary(
        name=name,
        build_time=total_build_time(entries, name, resources),
        resources=tuple(resources),
    )


class SummaryService:
    """Resolves project summaries against the current registry."""

    def __init__(self, ctx: ServerContext) -> None:
        """Create SummaryService with server context.

        Args:
            ctx: Server context with injected dependencies
        """
        self._ctx = ctx

    def summarize(self, name: str) -> Summary:
        """Summarize a registered project.

        Reads one snapshot of the store, so entries registered while the
        expansion runs are not observed.

        Raises:
            ResolveError: See summarize()
        """
        return summarize(self._ctx.entry_store.snapshot(), name)
