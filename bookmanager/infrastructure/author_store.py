"""SQL Author Store: AuthorStore implementation over an AsyncSession.

Invariants:
    - Returns core Author snapshots, never ORM rows
    - insert/update commit before returning
"""

from collections.abc import Collection
from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bookmanager.core.domain_types import Author, AuthorId
from bookmanager.db.base import is_storable_id
from bookmanager.models.author import Author as AuthorRow


def _to_author(row: AuthorRow) -> Author:
    return Author(id=AuthorId(row.id), name=row.name, birthdate=row.birth_date)


class SqlAuthorStore:
    """Author persistence backed by the `authors` table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_id(self, author_id: AuthorId) -> Author | None:
        if not is_storable_id(author_id):
            return None
        result = await self.db.execute(
            select(AuthorRow).where(AuthorRow.id == author_id),
        )
        row = result.scalar_one_or_none()
        return _to_author(row) if row else None

    async def find_existing_ids(
        self, author_ids: Collection[AuthorId],
    ) -> set[AuthorId]:
        candidates = [a for a in author_ids if is_storable_id(a)]
        if not candidates:
            return set()
        result = await self.db.execute(
            select(AuthorRow.id).where(AuthorRow.id.in_(candidates)),
        )
        return {AuthorId(i) for i in result.scalars().all()}

    async def insert(self, name: str, birthdate: date) -> Author:
        row = AuthorRow(name=name, birth_date=birthdate)
        self.db.add(row)
        await self.db.commit()
        return _to_author(row)

    async def update(
        self, author_id: AuthorId, name: str, birthdate: date,
    ) -> Author:
        row = (
            await self.db.get(AuthorRow, author_id)
            if is_storable_id(author_id) else None
        )
        if row is None:
            raise LookupError(f"Author {author_id} does not exist")
        row.name = name
        row.birth_date = birthdate
        await self.db.commit()
        return _to_author(row)
