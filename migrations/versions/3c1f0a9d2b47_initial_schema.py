"""initial_schema

Create the schema for the thanks service:
- Thank yous (author, description, creation date)
- Thanked entities (snapshot per thank you, in request order)
- Recipients (users reached by each thank you)
- Tags (case-insensitively unique names) and thank you tag links
- Feature flags (key/value)

Revision ID: 3c1f0a9d2b47
Revises:
Create Date: 2026-10-18 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b47"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # THANK_YOUS table
    # ========================================================================
    op.create_table(
        "thank_yous",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("author_id", sa.Integer(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column(
            "date_created",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_thank_yous_date_created",
        "thank_yous",
        [sa.text("date_created DESC")],
    )
    op.create_index("idx_thank_yous_author_id", "thank_yous", ["author_id"])

    # ========================================================================
    # THANK_YOU_THANKED table
    # ========================================================================
    op.create_table(
        "thank_you_thanked",
        sa.Column("thank_you_id", sa.Integer(), nullable=False),
        sa.Column("owner_class", sa.Integer(), nullable=False),
        sa.Column("item_id", sa.Integer(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("profile_url", sa.Text(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("extranet_area_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(
            ["thank_you_id"], ["thank_yous.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("thank_you_id", "owner_class", "item_id"),
    )
    op.create_index(
        "idx_thank_you_thanked_item",
        "thank_you_thanked",
        ["owner_class", "item_id"],
    )

    # ========================================================================
    # THANK_YOU_USERS table
    # ========================================================================
    op.create_table(
        "thank_you_users",
        sa.Column("thank_you_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["thank_you_id"], ["thank_yous.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("thank_you_id", "user_id"),
    )
    op.create_index("idx_thank_you_users_user_id", "thank_you_users", ["user_id"])

    # ========================================================================
    # TAGS table
    # ========================================================================
    op.create_table(
        "tags",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column(
            "active", sa.Boolean(), server_default=sa.text("true"), nullable=False
        ),
        sa.Column("bg_colour", sa.Text(), nullable=True),
        sa.Column("created_by", sa.Integer(), nullable=False),
        sa.Column(
            "created_date",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column("modified_by", sa.Integer(), nullable=False),
        sa.Column(
            "modified_date",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "uq_tags_name_lower", "tags", [sa.text("lower(name)")], unique=True
    )

    # ========================================================================
    # THANK_YOU_TAGS table
    # ========================================================================
    op.create_table(
        "thank_you_tags",
        sa.Column("thank_you_id", sa.Integer(), nullable=False),
        sa.Column("tag_id", sa.Integer(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["thank_you_id"], ["thank_yous.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"]),
        sa.PrimaryKeyConstraint("thank_you_id", "tag_id"),
    )
    op.create_index("idx_thank_you_tags_tag_id", "thank_you_tags", ["tag_id"])

    # ========================================================================
    # FEATURE_FLAGS table
    # ========================================================================
    op.create_table(
        "feature_flags",
        sa.Column("name", sa.String(64), nullable=False),
        sa.Column("value", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("name"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("feature_flags")
    op.drop_index("idx_thank_you_tags_tag_id", table_name="thank_you_tags")
    op.drop_table("thank_you_tags")
    op.drop_index("uq_tags_name_lower", table_name="tags")
    op.drop_table("tags")
    op.drop_index("idx_thank_you_users_user_id", table_name="thank_you_users")
    op.drop_table("thank_you_users")
    op.drop_index("idx_thank_you_thanked_item", table_name="thank_you_thanked")
    op.drop_table("thank_you_thanked")
    op.drop_index("idx_thank_yous_author_id", table_name="thank_yous")
    op.drop_index("idx_thank_yous_date_created", table_name="thank_yous")
    op.drop_table("thank_yous")
