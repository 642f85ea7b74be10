"""SQLAlchemy table definitions for the thanks service.

Tables are used with SQLAlchemy core; rows are mapped to domain models by
hand in ``thanks.persistence.mappers``. They match the schema defined in
the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    func,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# THANK YOUS TABLE
# ============================================================================
thank_yous_table = Table(
    "thank_yous",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("author_id", Integer, nullable=False),  # Directory user id
    Column("description", Text, nullable=False),
    Column(
        "date_created", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_thank_yous_date_created", thank_yous_table.c.date_created.desc())
Index("idx_thank_yous_author_id", thank_yous_table.c.author_id)

# ============================================================================
# THANKED TABLE (snapshot of each thanked entity, in request order)
# ============================================================================
thank_you_thanked_table = Table(
    "thank_you_thanked",
    metadata,
    Column(
        "thank_you_id",
        Integer,
        ForeignKey("thank_yous.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("owner_class", Integer, primary_key=True),
    Column("item_id", Integer, primary_key=True),
    Column("position", Integer, nullable=False),
    Column("name", String(255), nullable=False),
    Column("profile_url", Text, nullable=True),
    Column("image_url", Text, nullable=True),
    Column("extranet_area_id", Integer, nullable=True),
)

Index(
    "idx_thank_you_thanked_item",
    thank_you_thanked_table.c.owner_class,
    thank_you_thanked_table.c.item_id,
)

# ============================================================================
# RECIPIENTS TABLE (users reached by a thank you)
# ============================================================================
thank_you_users_table = Table(
    "thank_you_users",
    metadata,
    Column(
        "thank_you_id",
        Integer,
        ForeignKey("thank_yous.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("user_id", Integer, primary_key=True),
)

Index("idx_thank_you_users_user_id", thank_you_users_table.c.user_id)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("active", Boolean, nullable=False, server_default="true"),
    Column("bg_colour", Text, nullable=True),
    Column("created_by", Integer, nullable=False),
    Column(
        "created_date", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("modified_by", Integer, nullable=False),
    Column(
        "modified_date",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
)

# Case-insensitive name uniqueness
Index("uq_tags_name_lower", func.lower(tags_table.c.name), unique=True)

# ============================================================================
# THANK YOU TAGS TABLE
# ============================================================================
thank_you_tags_table = Table(
    "thank_you_tags",
    metadata,
    Column(
        "thank_you_id",
        Integer,
        ForeignKey("thank_yous.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("tag_id", Integer, ForeignKey("tags.id"), primary_key=True),
    Column("position", Integer, nullable=False),
)

Index("idx_thank_you_tags_tag_id", thank_you_tags_table.c.tag_id)

# ============================================================================
# FEATURE FLAGS TABLE (key/value)
# ============================================================================
feature_flags_table = Table(
    "feature_flags",
    metadata,
    Column("name", String(64), primary_key=True),
    Column("value", Boolean, nullable=False),
)
