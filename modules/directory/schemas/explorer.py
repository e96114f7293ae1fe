"""
Explorer View Schemas.

View models produced by the hierarchy renderer and the facet computation.
They are never persisted; a new tree is built for every page render.
"""

from typing import Literal

from pydantic import BaseModel, Field

UNKNOWN = "Unknown"


class ExplorerFilters(BaseModel):
    """Facet filters selected on the explorer page. Empty string means unset."""

    hometown: str = ""
    education_level: str = ""
    education_type: str = ""
    generation: str = ""

    @property
    def is_active(self) -> bool:
        return bool(
            self.hometown or self.education_level or self.education_type or self.generation
        )


class LeaderView(BaseModel):
    """Leader card derived from an official within the context of one body."""

    id: str
    name: str
    chinese_name: str | None = None
    age: str | None = None
    generation: str | None = None
    hometown: str | None = None
    title: str | None = Field(default=None, description="All positions, newline-joined")
    specific_title_in_body: str | None = Field(
        default=None, description="Role held within the enclosing body"
    )
    education: str | None = Field(default=None, description="Degree names, newline-joined")
    visible: bool = True
    highlight: bool = False


class BodyNode(BaseModel):
    """
    Rendered body.

    ``kind`` records the nesting level: tabs for top-level bodies, cards for
    their direct children and sections for anything deeper.
    """

    id: int
    name: str
    caption: str | None = None
    kind: Literal["tab", "card", "section"]
    leaders: list[LeaderView] = Field(default_factory=list)
    children: list["BodyNode"] = Field(default_factory=list)
    empty_message: str | None = None


class HierarchyView(BaseModel):
    """Whole explorer tree: one tab per top-level body."""

    tabs: list[BodyNode] = Field(default_factory=list)
    default_tab: int | None = None
    empty_message: str | None = None

    def get_tab(self, tab_id: int | None) -> BodyNode | None:
        """Return the requested tab, falling back to the default one."""
        for tab in self.tabs:
            if tab.id == tab_id:
                return tab
        for tab in self.tabs:
            if tab.id == self.default_tab:
                return tab
        return None


class FacetOption(BaseModel):
    value: str
    count: int = 0


class Facets(BaseModel):
    """Derived filter options, each sorted with Unknown last."""

    hometowns: list[FacetOption] = Field(default_factory=list)
    education_levels: list[FacetOption] = Field(default_factory=list)
    education_types: list[FacetOption] = Field(default_factory=list)
    generations: list[FacetOption] = Field(default_factory=list)
