"""initial_schema

Create the portal schema:
- profiles (1:1 with auth.users)
- invites (single-use, seven day tokens)
- partial unique index: one live invite per email
- handle_new_user trigger creating the profile from the matching invite

Revision ID: 3f9c2a7d1e04
Revises:
Create Date: 2026-10-19 09:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f9c2a7d1e04"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

user_role = postgresql.ENUM(
    "super_admin", "admin", "client", name="user_role", create_type=False
)


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE user_role AS ENUM ('super_admin', 'admin', 'client');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # PROFILES table
    # ========================================================================
    op.create_table(
        "profiles",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("role", user_role, nullable=False),
        sa.Column("full_name", sa.Text(), nullable=True),
        sa.Column(
            "is_active", sa.Boolean(), server_default=sa.text("true"), nullable=False
        ),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_profiles_email", "profiles", ["email"])

    # ========================================================================
    # INVITES table
    # ========================================================================
    op.create_table(
        "invites",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("role", user_role, nullable=False),
        sa.Column("token", sa.String(length=255), nullable=False),
        sa.Column("invited_by", sa.UUID(), nullable=False),
        sa.Column("expires_at", postgresql.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("used", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column("used_at", postgresql.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("superseded_at", postgresql.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("token", name="uq_invites_token"),
        sa.CheckConstraint("email = lower(email)", name="ck_invites_email_lowercase"),
    )
    op.create_index("idx_invites_invited_by", "invites", ["invited_by"])
    op.create_index("idx_invites_email", "invites", ["email"])

    # One live invite per email; expired invites leave the index when superseded
    op.create_index(
        "idx_invites_unique_active_email",
        "invites",
        ["email"],
        unique=True,
        postgresql_where=sa.text("used = false AND superseded_at IS NULL"),
    )

    # ========================================================================
    # handle_new_user trigger (hosted auth platform only)
    # ========================================================================
    op.execute("""
        DO $$ BEGIN
            IF EXISTS (SELECT 1 FROM pg_namespace WHERE nspname = 'auth') THEN
                CREATE OR REPLACE FUNCTION public.handle_new_user()
                RETURNS trigger
                LANGUAGE plpgsql
                SECURITY DEFINER
                SET search_path = public
                AS $fn$
                DECLARE
                    invited_role user_role;
                BEGIN
                    SELECT role INTO invited_role
                    FROM public.invites
                    WHERE email = lower(NEW.email)
                      AND used = false
                      AND superseded_at IS NULL
                    ORDER BY created_at DESC
                    LIMIT 1;

                    -- Identities without an invite get no profile
                    IF invited_role IS NOT NULL THEN
                        INSERT INTO public.profiles (id, email, role, full_name)
                        VALUES (
                            NEW.id,
                            lower(NEW.email),
                            invited_role,
                            NEW.raw_user_meta_data ->> 'full_name'
                        )
                        ON CONFLICT (id) DO NOTHING;
                    END IF;
                    RETURN NEW;
                END;
                $fn$;

                DROP TRIGGER IF EXISTS on_auth_user_created ON auth.users;
                CREATE TRIGGER on_auth_user_created
                    AFTER INSERT ON auth.users
                    FOR EACH ROW EXECUTE FUNCTION public.handle_new_user();
            END IF;
        END $$;
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.execute("""
        DO $$ BEGIN
            IF EXISTS (SELECT 1 FROM pg_namespace WHERE nspname = 'auth') THEN
                DROP TRIGGER IF EXISTS on_auth_user_created ON auth.users;
            END IF;
        END $$;
    """)
    op.execute("DROP FUNCTION IF EXISTS public.handle_new_user()")

    op.drop_index("idx_invites_unique_active_email", table_name="invites")
    op.drop_index("idx_invites_email", table_name="invites")
    op.drop_index("idx_invites_invited_by", table_name="invites")
    op.drop_table("invites")

    op.drop_index("idx_profiles_email", table_name="profiles")
    op.drop_table("profiles")

    op.execute("DROP TYPE IF EXISTS user_role")
