"""SQLAlchemy table definitions for the marketplace.

They match the schema defined in the Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    ForeignKey,
    Index,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

metadata = MetaData()

# ============================================================================
# USERS TABLE (identity lives with the auth provider; kept for foreign keys)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("handle", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# FILES TABLE
# ============================================================================
files_table = Table(
    "files",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "owner_id", BigInteger, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("owner_handle", String(255), nullable=False),  # Denormalized from users
    Column("title", String(255), nullable=False),
    Column("overview_short", String(300), nullable=False, server_default=""),
    Column("overview", Text, nullable=False, server_default=""),
    Column("price", Numeric(10, 2), nullable=False, server_default="0"),
    Column("live", Boolean, nullable=False, server_default="false"),
    Column("approved", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_files_owner_id", files_table.c.owner_id)
Index("idx_files_created_at", files_table.c.created_at.desc())

# ============================================================================
# UPLOADS TABLE
# ============================================================================
uploads_table = Table(
    "uploads",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "file_id", BigInteger, ForeignKey("files.id", ondelete="CASCADE"), nullable=False
    ),
    Column("filename", String(255), nullable=False),
    Column("size", BigInteger, nullable=False, server_default="0"),
    Column("approved", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_uploads_file_id", uploads_table.c.file_id)

# ============================================================================
# SALES TABLE (written by the payment flow)
# ============================================================================
sales_table = Table(
    "sales",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "file_id", BigInteger, ForeignKey("files.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "buyer_id", BigInteger, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("sale_price", Numeric(10, 2), nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_sales_file_buyer", sales_table.c.file_id, sales_table.c.buyer_id)

# ============================================================================
# COMMENTS TABLE (polymorphic subject, self-referencing parent)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("subject_kind", String(50), nullable=False),  # 'file'
    Column("subject_id", BigInteger, nullable=False),
    Column(
        "parent_id",
        BigInteger,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "author_id", BigInteger, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("author_handle", String(255), nullable=False),  # Denormalized from users
    Column("body", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_comments_subject",
    comments_table.c.subject_kind,
    comments_table.c.subject_id,
)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_created_at", comments_table.c.created_at)
