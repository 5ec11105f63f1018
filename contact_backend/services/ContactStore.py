"""Storage gateway for contact page submissions."""

import logging
from datetime import datetime, timezone
from typing import List

from sqlalchemy import delete, select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from contact_backend.core.database import DatabaseSessionManager, session_manager
from contact_backend.core.exceptions import ClearTableError, SequenceResetError, StorageError
from contact_backend.models.pagecontact import PAGE_CONTACTS_TABLE, PageContact
from contact_backend.schemas.pagecontactSchema import ContactEntry

logger = logging.getLogger(__name__)

# Table names in raw SQL are constants; never build them from request input.
RESET_SEQUENCE_SQL = text("DELETE FROM sqlite_sequence WHERE name = :name")

# SQLite INTEGER is a signed 64-bit value
SQLITE_INTEGER_MIN = -(2 ** 63)
SQLITE_INTEGER_MAX = 2 ** 63 - 1


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ContactStore:
    """Insert, list, delete and clear operations over the page_contacts table."""

    def __init__(self, sessions: DatabaseSessionManager):
        self._sessions = sessions

    async def insert(self, name: str, email: str, subject: str, message: str) -> int:
        """Store a new submission and return its id."""
        entry = PageContact(
            name=name,
            email=email,
            subject=subject,
            message=message,
            submitted_at=utc_timestamp(),
        )
        try:
            async with self._sessions.get_session() as session:
                session.add(entry)
                await session.flush()
                entry_id = entry.id
        except SQLAlchemyError as e:
            raise StorageError(f"insert failed: {e}") from e
        return entry_id

    async def list_all(self) -> List[ContactEntry]:
        """All submissions, newest first; equal timestamps fall back to the higher id first."""
        query = select(PageContact).order_by(
            PageContact.submitted_at.desc(),
            PageContact.id.desc()
        )
        try:
            async with self._sessions.get_session() as session:
                result = await session.execute(query)
                rows = result.scalars().all()
        except SQLAlchemyError as e:
            raise StorageError(f"list failed: {e}") from e
        return [ContactEntry.model_validate(row) for row in rows]

    async def delete_by_id(self, contact_id: int) -> bool:
        """Delete one submission. Returns False when no row had that id."""
        if not SQLITE_INTEGER_MIN <= contact_id <= SQLITE_INTEGER_MAX:
            return False
        try:
            async with self._sessions.get_session() as session:
                result = await session.execute(
                    delete(PageContact).where(PageContact.id == contact_id)
                )
                deleted = result.rowcount > 0
        except SQLAlchemyError as e:
            raise StorageError(f"delete failed: {e}") from e
        return deleted

    async def clear_all(self) -> None:
        """
        Delete every submission and reset the id counter so the next insert gets id 1.
        Both steps share one transaction; a failure in either rolls back both.
        """
        try:
            async with self._sessions.get_session() as session:
                await self._delete_rows(session)
                await self._reset_sequence(session)
        except StorageError:
            raise
        except SQLAlchemyError as e:
            raise ClearTableError(f"clear failed: {e}") from e
        logger.info(f"All entries from {PAGE_CONTACTS_TABLE} cleared")

    async def _delete_rows(self, session: AsyncSession) -> None:
        try:
            await session.execute(delete(PageContact))
        except SQLAlchemyError as e:
            raise ClearTableError(f"clear failed: {e}") from e

    async def _reset_sequence(self, session: AsyncSession) -> None:
        try:
            await session.execute(RESET_SEQUENCE_SQL, {"name": PAGE_CONTACTS_TABLE})
        except SQLAlchemyError as e:
            raise SequenceResetError(f"sequence reset failed: {e}") from e


contact_store = ContactStore(session_manager)


def get_contact_store() -> ContactStore:
    """FastAPI dependency returning the process-wide contact store."""
    return contact_store
