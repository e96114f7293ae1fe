"""
Seed the directory tables with a small sample data set.

Creates the tables if needed, then inserts a handful of officials and
bodies plus the matching rows of the legacy people/groups/positions/
education tables. Existing rows with the same keys are left untouched.

Usage:
    python scripts/seed_sample_data.py
"""

import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy import select

from core.database import close_db_connections, get_standalone_session, init_database
from modules.directory.models import Body, Education, GroupMembership, Official, Person, Position


OFFICIALS = [
    {
        "id": 1,
        "name_en": "Xi Jinping",
        "name_cn": "习近平",
        "age": 70,
        "generation": 5.0,
        "home_province": "Shaanxi",
        "positions": [
            {"title": "General Secretary", "institution": "Chinese Communist Party"},
            {"title": "President", "institution": "People's Republic of China"},
            {"title": "Chairman", "institution": "Central Military Commission"},
        ],
        "degrees": [
            {"name": "PhD in Law", "level": "doctoral", "type": "humanities"},
            {"name": "BS in Chemical Engineering", "level": "bachelors", "type": "stem"},
        ],
    },
    {
        "id": 2,
        "name_en": "Li Qiang",
        "name_cn": "李强",
        "age": 64,
        "generation": 5.0,
        "home_province": "Zhejiang",
        "positions": [{"title": "Premier", "institution": "State Council"}],
        "degrees": [
            {"name": "BS in Agricultural Engineering", "level": "bachelors", "type": "stem"},
        ],
    },
    {
        "id": 3,
        "name_en": "Zhao Leji",
        "name_cn": "赵乐际",
        "age": 67,
        "generation": 5.0,
        "home_province": "Qinghai",
        "positions": [
            {"title": "Chairman", "institution": "National People's Congress Standing Committee"},
        ],
        "degrees": [{"name": "BS in Economics", "level": "bachelors", "type": "humanities"}],
    },
]

# Parents must precede their children
BODIES = [
    {
        "id": 1,
        "name": "Chinese Communist Party",
        "members": [{"id": 1, "title": "General Secretary"}],
        "parent": None,
        "caption": "Party Leadership",
        "order": 1,
    },
    {
        "id": 3,
        "name": "State Council",
        "members": [{"id": 2, "title": "Premier"}],
        "parent": None,
        "caption": "Government",
        "order": 2,
    },
    {
        "id": 4,
        "name": "National People's Congress",
        "members": [{"id": 3, "title": "Chairman"}],
        "parent": None,
        "caption": "Legislature",
        "order": 3,
    },
    {
        "id": 2,
        "name": "Politburo Standing Committee",
        "members": [
            {"id": 1, "title": "General Secretary"},
            {"id": 2, "title": None},
            {"id": 3, "title": None},
        ],
        "parent": 1,
        "caption": "Top Leadership",
        "order": 1,
    },
]

# (branch, body, group_name) memberships per person for the legacy tables
MEMBERSHIPS = {
    "Xi Jinping": [("Party", "Politburo", "Standing Committee")],
    "Li Qiang": [
        ("Party", "Politburo", "Standing Committee"),
        ("Government", "State Council", "Premier"),
    ],
    "Zhao Leji": [
        ("Party", "Politburo", "Standing Committee"),
        ("Legislature", "National People's Congress", "Standing Committee"),
    ],
}


def _position_text(position: dict) -> str:
    return f"{position['title']}, {position['institution']}"


async def seed() -> None:
    """Insert the sample rows that are not present yet."""
    print("🔄 Creating tables...")
    await init_database()

    async with get_standalone_session() as session:
        existing_officials = set((await session.execute(select(Official.id))).scalars().all())
        for data in OFFICIALS:
            if data["id"] not in existing_officials:
                session.add(Official(**data))

        existing_bodies = set((await session.execute(select(Body.id))).scalars().all())
        for data in BODIES:
            if data["id"] not in existing_bodies:
                session.add(Body(**data))
                await session.flush()

        existing_people = set((await session.execute(select(Person.name_en))).scalars().all())
        for data in OFFICIALS:
            name = data["name_en"]
            if name in existing_people:
                continue
            session.add(Person(
                name_en=name,
                name_cn=data["name_cn"],
                age=data["age"],
                generation=str(int(data["generation"])),
                hometown=data["home_province"],
            ))
            await session.flush()
            for branch, body, group_name in MEMBERSHIPS.get(name, []):
                session.add(GroupMembership(name_en=name, branch=branch, body=body, group_name=group_name))
            for position in data["positions"]:
                session.add(Position(name_en=name, position=_position_text(position)))
            for degree in data["degrees"]:
                session.add(Education(name_en=name, degree=degree["name"]))

    print(f"✅ Seeded {len(OFFICIALS)} officials and {len(BODIES)} bodies")


async def main() -> None:
    try:
        await seed()
    finally:
        await close_db_connections()


if __name__ == "__main__":
    asyncio.run(main())
