"""
Hierarchy Renderer.

Turns the flat bodies and officials payloads into the nested explorer tree.
The first two levels are built explicitly (tabs for top-level bodies, cards
for their children); everything below a card is built by open recursion
as sections.
"""

import math
from collections import defaultdict
from collections.abc import Sequence
from typing import Any

from modules.directory.schemas import (
    BodyNode,
    BodySchema,
    ExplorerFilters,
    HierarchyView,
    LeaderView,
    MemberRef,
    OfficialSchema,
)
from modules.directory.services.matching import (
    format_generation,
    matches_filters,
    matches_search,
)

NO_DATA_MESSAGE = "No organizational data available."
NO_TOP_LEVEL_MESSAGE = "No top-level organizations found."
EMPTY_CARD_MESSAGE = "No members or sub-committees listed."
EMPTY_TAB_MESSAGE = "No members or sub-committees listed for {name}."


def format_position(position: str | dict[str, Any]) -> str:
    """Positions are plain titles or {"title", "institution"} objects."""
    if isinstance(position, str):
        return position
    title = position.get("title") or ""
    institution = position.get("institution") or ""
    if title and institution:
        return f"{title}, {institution}"
    return title or institution


def build_leader_view(
    official: OfficialSchema,
    role_in_body: str | None,
    search_query: str,
    filters: ExplorerFilters,
) -> LeaderView:
    """Build the leader card for an official, with visibility and highlight flags."""
    search_match = matches_search(official, search_query)
    filter_match = matches_filters(official, filters)
    has_active_filters = filters.is_active

    return LeaderView(
        id=str(official.id),
        name=official.name_en,
        chinese_name=official.name_cn or None,
        age=str(official.age) if official.age is not None else None,
        generation=format_generation(official.generation),
        hometown=official.home_province or None,
        title="\n".join(format_position(p) for p in official.positions) or None,
        specific_title_in_body=role_in_body or None,
        education="\n".join(d.name or "N/A" for d in official.degrees) or None,
        visible=search_match and (not has_active_filters or filter_match),
        highlight=search_match and has_active_filters and filter_match,
    )


def _display_order(body: BodySchema) -> float:
    return body.order if body.order is not None else math.inf


class _HierarchyBuilder:
    def __init__(
        self,
        bodies: Sequence[BodySchema],
        officials: Sequence[OfficialSchema],
        search_query: str,
        filters: ExplorerFilters,
    ) -> None:
        self._search_query = search_query
        self._filters = filters
        self._officials: dict[int, OfficialSchema] = {}
        for official in officials:
            self._officials.setdefault(official.id, official)

        self._children: dict[int | None, list[BodySchema]] = defaultdict(list)
        for body in bodies:
            self._children[body.parent].append(body)
        for siblings in self._children.values():
            siblings.sort(key=_display_order)

    def top_level(self) -> list[BodySchema]:
        return self._children.get(None, [])

    def nested(self, body: BodySchema) -> list[BodySchema]:
        return self._children.get(body.id, [])

    def leaders(self, members: Sequence[MemberRef]) -> list[LeaderView]:
        # Members without an id, or whose id names no official, are dropped
        return [
            build_leader_view(self._officials[m.id], m.title, self._search_query, self._filters)
            for m in members
            if m.id in self._officials
        ]

    def tab(self, body: BodySchema) -> BodyNode:
        leaders = self.leaders(body.members)
        children = [self.card(child, {body.id}) for child in self.nested(body)]
        empty_message = None
        if not leaders and not children and not body.caption:
            empty_message = EMPTY_TAB_MESSAGE.format(name=body.name)
        return BodyNode(
            id=body.id,
            name=body.name,
            caption=body.caption,
            kind="tab",
            leaders=leaders,
            children=children,
            empty_message=empty_message,
        )

    def card(self, body: BodySchema, ancestors: set[int]) -> BodyNode:
        leaders = self.leaders(body.members)
        path = ancestors | {body.id}
        grandchildren = [b for b in self.nested(body) if b.id not in path]
        sections = [self.section(b, path) for b in grandchildren]
        return BodyNode(
            id=body.id,
            name=body.name,
            caption=body.caption,
            kind="card",
            leaders=leaders,
            children=[s for s in sections if s is not None],
            empty_message=EMPTY_CARD_MESSAGE if not leaders and not grandchildren else None,
        )

    def section(self, body: BodySchema, ancestors: set[int]) -> BodyNode | None:
        path = ancestors | {body.id}
        nested = [b for b in self.nested(body) if b.id not in path]
        leaders = self.leaders(body.members)

        if not body.name and not leaders and not nested:
            return None

        sections = [self.section(b, path) for b in nested]
        return BodyNode(
            id=body.id,
            name=body.name,
            caption=body.caption,
            kind="section",
            leaders=leaders,
            children=[s for s in sections if s is not None],
        )


def build_hierarchy(
    bodies: Sequence[BodySchema],
    officials: Sequence[OfficialSchema],
    search_query: str = "",
    filters: ExplorerFilters | None = None,
) -> HierarchyView:
    """
    Build the explorer tree from the bodies and officials payloads.

    Args:
        bodies: All bodies; parents reference other body ids or None.
        officials: All officials; looked up by Body.members ids.
        search_query: Name search text, empty to match everyone.
        filters: Active facet filters.

    Returns:
        HierarchyView with one tab per top-level body, ordered by ``order``.
    """
    filters = filters or ExplorerFilters()

    if not bodies:
        return HierarchyView(empty_message=NO_DATA_MESSAGE)

    builder = _HierarchyBuilder(bodies, officials, search_query, filters)
    top_level = builder.top_level()
    if not top_level:
        return HierarchyView(empty_message=NO_TOP_LEVEL_MESSAGE)

    tabs = [builder.tab(body) for body in top_level]
    return HierarchyView(tabs=tabs, default_tab=tabs[0].id)
