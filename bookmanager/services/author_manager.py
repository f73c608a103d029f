"""Author Manager: create/update rules for authors.

Invariants:
    - update() writes nothing when the author does not exist
    - Field constraints (non-blank name, past birthdate) are already enforced by
      the request schemas; the manager treats them as valid
"""

import logging
from datetime import date

from bookmanager.core.domain_types import Author, AuthorId
from bookmanager.core.outcome import Outcome, not_found_or_invalid
from bookmanager.core.repository_protocols import AuthorStore

logger = logging.getLogger(__name__)


class AuthorManager:
    """Enforces author invariants on top of an AuthorStore."""

    def __init__(self, authors: AuthorStore):
        self.authors = authors

    async def create(self, name: str, birthdate: date) -> Outcome[Author]:
        author = await self.authors.insert(name, birthdate)
        logger.info(
            f"Author {author.id} created", extra={"author_id": author.id},
        )
        return Outcome.ok(author)

    async def get(self, author_id: AuthorId) -> Outcome[Author]:
        author = await self.authors.find_by_id(author_id)
        if author is None:
            return Outcome.fail(not_found_or_invalid("Author", [author_id]))
        return Outcome.ok(author)

    async def update(
        self, author_id: AuthorId, name: str, birthdate: date,
    ) -> Outcome[Author]:
        """Full replace of name and birthdate for an existing author."""
        if await self.authors.find_by_id(author_id) is None:
            logger.warning(
                f"Author update rejected: author {author_id} does not exist",
                extra={"author_id": author_id, "error_code": "NOT_FOUND_OR_INVALID"},
            )
            return Outcome.fail(not_found_or_invalid("Author", [author_id]))

        author = await self.authors.update(author_id, name, birthdate)
        logger.info(
            f"Author {author_id} updated", extra={"author_id": author_id},
        )
        return Outcome.ok(author)
