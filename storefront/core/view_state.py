"""Browse view state and its transitions.

All browse controls (category path, search, category filter, sort, layout)
live in one immutable ViewState. ``reduce`` applies an action and returns a
new state; the old one is never mutated.
"""

from dataclasses import dataclass, replace
from typing import Union

from storefront.schemas.catalog import SORT_KEYS, Layout, SortKey


@dataclass(frozen=True)
class ViewState:
    """Immutable browse state for one catalog view."""

    selected_path: tuple[str, ...] = ()
    query: str = ""
    category_filter: str = ""
    sort_key: SortKey = "recent"
    layout: Layout = "grid"

    @property
    def at_root(self) -> bool:
        return not self.selected_path


@dataclass(frozen=True)
class EnterCategory:
    name: str


@dataclass(frozen=True)
class JumpToDepth:
    """Keep the first ``depth`` segments (breadcrumb click)."""

    depth: int


@dataclass(frozen=True)
class GoBack:
    pass


@dataclass(frozen=True)
class ResetPath:
    pass


@dataclass(frozen=True)
class SetQuery:
    query: str


@dataclass(frozen=True)
class SetCategoryFilter:
    category: str


@dataclass(frozen=True)
class SetSortKey:
    sort_key: SortKey


@dataclass(frozen=True)
class SetLayout:
    layout: Layout


ViewAction = Union[
    EnterCategory,
    JumpToDepth,
    GoBack,
    ResetPath,
    SetQuery,
    SetCategoryFilter,
    SetSortKey,
    SetLayout,
]


def reduce(state: ViewState, action: ViewAction) -> ViewState:
    """Apply ``action`` to ``state``.

    Args:
        state: Current state
        action: One of the ViewAction types

    Returns:
        New ViewState (``state`` itself when nothing changes)

    Raises:
        ValueError: If a sort key or layout is not recognized
        TypeError: If the action type is unknown
    """
    if isinstance(action, EnterCategory):
        return replace(state, selected_path=(*state.selected_path, action.name))

    if isinstance(action, JumpToDepth):
        depth = max(action.depth, 0)
        if depth >= len(state.selected_path):
            return state
        return replace(state, selected_path=state.selected_path[:depth])

    if isinstance(action, GoBack):
        if state.at_root:
            return state
        return replace(state, selected_path=state.selected_path[:-1])

    if isinstance(action, ResetPath):
        if state.at_root:
            return state
        return replace(state, selected_path=())

    if isinstance(action, SetQuery):
        return replace(state, query=action.query)

    if isinstance(action, SetCategoryFilter):
        return replace(state, category_filter=action.category)

    if isinstance(action, SetSortKey):
        if action.sort_key not in SORT_KEYS:
            raise ValueError(f"Unknown sort key: {action.sort_key}")
        return replace(state, sort_key=action.sort_key)

    if isinstance(action, SetLayout):
        if action.layout not in ("grid", "list"):
            raise ValueError(f"Unknown layout: {action.layout}")
        return replace(state, layout=action.layout)

    raise TypeError(f"Unsupported view action: {type(action).__name__}")


def reduce_all(state: ViewState, actions: list[ViewAction]) -> ViewState:
    """Apply several actions in order."""
    for action in actions:
        state = reduce(state, action)
    return state
