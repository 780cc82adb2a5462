"""initial_schema

Create the quotes catalog schema:
- Quotes (with a denormalized likes_count)
- Likes (ledger, one row per visitor per quote)

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-10-19 10:12:44.381920

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "quotes",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("author", sa.Text(), nullable=False),
        sa.Column("likes_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("likes_count >= 0", name="likes_count_non_negative"),
    )
    op.create_index(
        "idx_quotes_created_at", "quotes", [sa.text("created_at DESC")]
    )
    # Serves both top-quote rankings
    op.create_index(
        "idx_quotes_likes_count",
        "quotes",
        [sa.text("likes_count DESC"), sa.text("created_at DESC")],
    )

    op.create_table(
        "likes",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("quote_id", sa.UUID(), nullable=False),
        sa.Column("visitor_id", sa.Text(), nullable=False),
        sa.Column("user_agent", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["quote_id"], ["quotes.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("quote_id", "visitor_id", name="uq_likes_quote_visitor"),
    )
    op.create_index("idx_likes_visitor_id", "likes", ["visitor_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_likes_visitor_id", table_name="likes")
    op.drop_table("likes")
    op.drop_index("idx_quotes_likes_count", table_name="quotes")
    op.drop_index("idx_quotes_created_at", table_name="quotes")
    op.drop_table("quotes")
