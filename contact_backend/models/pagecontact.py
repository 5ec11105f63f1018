from sqlalchemy import Column, Integer, String, Text

from contact_backend.models.base import Base

PAGE_CONTACTS_TABLE = "page_contacts"


class PageContact(Base):
    """Model for contact page form submissions."""

    __tablename__ = PAGE_CONTACTS_TABLE

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text)
    email = Column(Text)
    subject = Column(Text)
    message = Column(Text)
    submitted_at = Column(String)  # ISO-8601 UTC, e.g. 2024-05-01T10:22:33.123Z

    # AUTOINCREMENT keeps ids of deleted rows from being reused
    __table_args__ = {"sqlite_autoincrement": True}
