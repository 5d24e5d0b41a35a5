"""FastAPI dependencies for dependency injection."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from salary_tracker.database import init_db
from salary_tracker.services import SalaryRecordService


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency."""
    _, factory = init_db()
    async with factory() as session:
        try:
            yield session
        finally:
            await session.close()


def get_salary_record_service(
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> SalaryRecordService:
    return SalaryRecordService(db)


# Type aliases for cleaner dependency injection
DbSession = Annotated[AsyncSession, Depends(get_db_session)]
RecordService = Annotated[SalaryRecordService, Depends(get_salary_record_service)]
