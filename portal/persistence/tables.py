"""SQLAlchemy table definitions for the portal.

These table definitions are used with manual mappers into frozen domain
models. They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Enum,
    Index,
    MetaData,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

user_role_enum = Enum(
    "super_admin", "admin", "client", name="user_role", create_type=False
)

# ============================================================================
# PROFILES TABLE (1:1 with auth.users, created by the handle_new_user trigger)
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True),  # Same id as the auth identity
    Column("email", String(255), nullable=False),
    Column("role", user_role_enum, nullable=False),
    Column("full_name", Text, nullable=True),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_profiles_email", profiles_table.c.email)

# ============================================================================
# INVITES TABLE
# ============================================================================
invites_table = Table(
    "invites",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("email", String(255), nullable=False),  # Normalized (lowercased)
    Column("role", user_role_enum, nullable=False),
    Column("token", String(255), nullable=False, unique=True),  # URL-safe token
    Column("invited_by", UUID, nullable=False),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=False),
    Column("used", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("used_at", TIMESTAMP(timezone=True), nullable=True),
    Column("superseded_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_invites_invited_by", invites_table.c.invited_by)
Index("idx_invites_email", invites_table.c.email)

# At most one live invite per email. Expiry cannot appear in an index
# predicate, so expired invites leave the index by being superseded.
Index(
    "idx_invites_unique_active_email",
    invites_table.c.email,
    unique=True,
    postgresql_where=text("used = false AND superseded_at IS NULL"),
)
