"""PostgreSQL implementation of Profile repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from portal.domain.model import Profile
from portal.domain.repository import ProfileRepository
from portal.domain.value import ProfileId
from portal.persistence.database import db_errors
from portal.persistence.mappers import profile_to_dict, row_to_profile
from portal.persistence.tables import profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, profile_id: ProfileId) -> Optional[Profile]:
        """Find a profile by identity ID."""
        stmt = select(profiles_table).where(profiles_table.c.id == profile_id)
        with db_errors("profiles.find_by_id"):
            result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    async def save(self, profile: Profile) -> Profile:
        """Save a profile (create or update)."""
        values = profile_to_dict(profile)
        stmt = insert(profiles_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[profiles_table.c.id],
            set_={
                "email": stmt.excluded.email,
                "role": stmt.excluded.role,
                "full_name": stmt.excluded.full_name,
                "is_active": stmt.excluded.is_active,
            },
        )
        with db_errors("profiles.save"):
            await self.session.execute(stmt)
            await self.session.flush()
        return profile
