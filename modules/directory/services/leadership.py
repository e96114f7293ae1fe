"""
Leadership Aggregation Service.

Builds the branch -> body -> group -> leader tree served by GET /api/leaders
from the normalised people/groups/positions/education tables.

Flow:
    1. Distinct branches, (branch, body) pairs and (branch, body, group)
       triples give the skeleton, alphabetically ordered by SQL.
    2. One join of people with their groups, positions and education yields
       one row per combination; rows are folded into per-group leaders with
       repeated positions and degrees dropped.
    3. Accumulated lists are joined with newlines before serialisation.
"""

import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import DBSession
from modules.directory.core.config import DirectorySettings, get_directory_settings
from modules.directory.models import Education, GroupMembership, Person, Position
from modules.directory.schemas import (
    LeaderSchema,
    LeadershipBody,
    LeadershipBranch,
    LeadershipGroup,
)

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def slugify(value: str) -> str:
    """Lowercase and replace whitespace runs with '-'."""
    return _WHITESPACE.sub("-", value.lower())


def group_key(branch: str, body: str, group_name: str) -> str:
    return f"{branch}-{body}-{group_name}"


@dataclass
class _LeaderAccumulator:
    id: str
    name: str
    chinese_name: str
    hometown: str
    generation: str
    titles: list[str] = field(default_factory=list)
    degrees: list[str] = field(default_factory=list)

    def add(self, position: str | None, degree: str | None) -> None:
        if position and position not in self.titles:
            self.titles.append(position)
        if degree and degree not in self.degrees:
            self.degrees.append(degree)

    def to_schema(self, image: str) -> LeaderSchema:
        return LeaderSchema(
            id=self.id,
            name=self.name,
            chinese_name=self.chinese_name,
            title="\n".join(self.titles),
            image=image,
            hometown=self.hometown,
            education="\n".join(self.degrees),
            generation=self.generation,
            visible=True,
        )


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def build_leadership_tree(
    branches: Sequence[str],
    body_rows: Iterable[Any],
    group_rows: Iterable[Any],
    leader_rows: Iterable[Any],
    image: str = "",
) -> list[LeadershipBranch]:
    """
    Fold the four query results into the nested leaders payload.

    Args:
        branches: Distinct branch names, in output order.
        body_rows: Rows with ``branch`` and ``body`` attributes.
        group_rows: Rows with ``branch``, ``body`` and ``group_name``.
        leader_rows: Join rows with person columns plus ``branch``, ``body``,
            ``group_name``, ``position`` and ``degree``.
        image: Image URL attached to every leader.

    Returns:
        Branches with their bodies and groups; groups without leaders are
        kept with an empty list.
    """
    bodies_by_branch: dict[str, list[str]] = {}
    for row in body_rows:
        bodies_by_branch.setdefault(row.branch, []).append(row.body)

    groups_by_body: dict[str, list[str]] = {}
    for row in group_rows:
        groups_by_body.setdefault(f"{row.branch}-{row.body}", []).append(row.group_name)

    groups: dict[str, tuple[LeadershipGroup, dict[str, _LeaderAccumulator]]] = {}
    skipped = 0
    for row in leader_rows:
        if row.branch is None:
            # Person without any group membership
            skipped += 1
            continue

        key = group_key(row.branch, row.body, row.group_name)
        if key not in groups:
            groups[key] = (
                LeadershipGroup(id=slugify(key), name=row.group_name, type=row.branch.lower()),
                {},
            )
        _, leaders = groups[key]

        leader_id = slugify(row.name_en)
        leader = leaders.get(leader_id)
        if leader is None:
            leader = _LeaderAccumulator(
                id=leader_id,
                name=row.name_en,
                chinese_name=_text(row.name_cn),
                hometown=_text(row.hometown),
                generation=_text(row.generation),
            )
            leaders[leader_id] = leader
        leader.add(row.position, row.degree)

    if skipped:
        logger.debug(f"Skipped {skipped} leader row(s) without a group")

    for group, leaders in groups.values():
        group.leaders = [leader.to_schema(image) for leader in leaders.values()]

    tree: list[LeadershipBranch] = []
    for branch in branches:
        bodies: list[LeadershipBody] = []
        for body in bodies_by_branch.get(branch, []):
            body_groups: list[LeadershipGroup] = []
            for group_name in groups_by_body.get(f"{branch}-{body}", []):
                key = group_key(branch, body, group_name)
                if key in groups:
                    body_groups.append(groups[key][0])
                else:
                    body_groups.append(
                        LeadershipGroup(id=slugify(key), name=group_name, type=branch.lower())
                    )
            bodies.append(
                LeadershipBody(id=slugify(f"{branch}-{body}"), name=body, groups=body_groups)
            )
        tree.append(
            LeadershipBranch(id=branch.lower(), name=branch, type=branch.lower(), bodies=bodies)
        )

    return tree


class LeadershipService:
    """Runs the four aggregation queries on a single session."""

    def __init__(self, db: AsyncSession, settings: DirectorySettings | None = None) -> None:
        self._db = db
        self._settings = settings or get_directory_settings()

    async def _fetch_branches(self) -> list[str]:
        result = await self._db.execute(
            select(GroupMembership.branch).distinct().order_by(GroupMembership.branch)
        )
        return list(result.scalars().all())

    async def _fetch_bodies(self) -> list[Any]:
        result = await self._db.execute(
            select(GroupMembership.branch, GroupMembership.body)
            .distinct()
            .order_by(GroupMembership.branch, GroupMembership.body)
        )
        return list(result.all())

    async def _fetch_groups(self) -> list[Any]:
        result = await self._db.execute(
            select(GroupMembership.branch, GroupMembership.body, GroupMembership.group_name)
            .distinct()
            .order_by(GroupMembership.branch, GroupMembership.body, GroupMembership.group_name)
        )
        return list(result.all())

    async def _fetch_leader_rows(self) -> list[Any]:
        stmt = (
            select(
                Person.name_en,
                Person.name_cn,
                Person.age,
                Person.generation,
                Person.hometown,
                GroupMembership.branch,
                GroupMembership.body,
                GroupMembership.group_name,
                Position.position,
                Education.degree,
            )
            .select_from(Person)
            .outerjoin(GroupMembership, Person.name_en == GroupMembership.name_en)
            .outerjoin(Position, Person.name_en == Position.name_en)
            .outerjoin(Education, Person.name_en == Education.name_en)
            .order_by(
                GroupMembership.branch,
                GroupMembership.body,
                GroupMembership.group_name,
                Person.name_en,
            )
        )
        result = await self._db.execute(stmt)
        return list(result.all())

    async def get_leadership_tree(self) -> list[LeadershipBranch]:
        """Query the legacy tables and build the nested leaders payload."""
        branches = await self._fetch_branches()
        body_rows = await self._fetch_bodies()
        group_rows = await self._fetch_groups()
        leader_rows = await self._fetch_leader_rows()

        tree = build_leadership_tree(
            branches,
            body_rows,
            group_rows,
            leader_rows,
            image=self._settings.leader_image_placeholder,
        )
        logger.info(
            f"Aggregated {len(leader_rows)} leader row(s) into {len(tree)} branch(es)"
        )
        return tree


def get_leadership_service(db: DBSession) -> LeadershipService:
    """FastAPI dependency providing a request-scoped LeadershipService."""
    return LeadershipService(db)
