"""SQLAlchemy table definitions for the quotes catalog.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# QUOTES TABLE
# ============================================================================
quotes_table = Table(
    "quotes",
    metadata,
    Column("id", UUID, primary_key=True),  # Generated by the service
    Column("text", Text, nullable=False),
    Column("author", Text, nullable=False),
    Column("likes_count", Integer, nullable=False, server_default="0"),  # Denormalized
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("likes_count >= 0", name="likes_count_non_negative"),
)

Index("idx_quotes_created_at", quotes_table.c.created_at.desc())
Index(
    "idx_quotes_likes_count",
    quotes_table.c.likes_count.desc(),
    quotes_table.c.created_at.desc(),
)

# ============================================================================
# LIKES TABLE (ledger, one row per visitor per quote)
# ============================================================================
likes_table = Table(
    "likes",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "quote_id", UUID, ForeignKey("quotes.id", ondelete="CASCADE"), nullable=False
    ),
    Column("visitor_id", Text, nullable=False),  # Usually the client IP
    Column("user_agent", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("quote_id", "visitor_id", name="uq_likes_quote_visitor"),
)

Index("idx_likes_visitor_id", likes_table.c.visitor_id)
