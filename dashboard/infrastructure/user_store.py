"""User Store — single-row user lookup by email for sign-in.

Invariants:
    - Exact email match, bound parameter
    - Store errors (SQLAlchemyError or a raw driver OSError) raise LookupFailure;
      they are never reported as "no such user"
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from dashboard.core.errors import LookupFailure
from dashboard.infrastructure.database import STORE_ERRORS
from dashboard.models.user import User

logger = logging.getLogger(__name__)


class UserStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_email(self, email: str) -> User | None:
        try:
            result = await self.db.execute(select(User).where(User.email == email))
            return result.scalars().first()
        except STORE_ERRORS as e:
            logger.error(f"Failed to fetch user: {e}", extra={"operation": "lookup"})
            raise LookupFailure() from e
