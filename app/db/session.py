from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import declarative_base
from app.core.config import settings

engine = create_async_engine(settings.MYSQL_DSN, pool_pre_ping=True, pool_recycle=3600)
AsyncSessionLocal = async_sessionmaker(engine, expire_on_commit=False)
Base = declarative_base()

# one session per request; routers commit/rollback themselves
async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session
