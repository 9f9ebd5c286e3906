import os
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

DATABASE_URL = os.getenv('DATABASE_URL') or 'sqlite+aiosqlite:///./bloglist.db'
if DATABASE_URL.startswith('postgresql://') and not DATABASE_URL.startswith('postgresql+asyncpg://'):
    DATABASE_URL = DATABASE_URL.replace('postgresql://', 'postgresql+asyncpg://', 1)


def make_engine(url: str):
    """Create an async engine; sqlite needs thread sharing, and in-memory sqlite a single connection."""
    kwargs = {'future': True, 'echo': False}
    if url.startswith('sqlite'):
        kwargs['connect_args'] = {'check_same_thread': False}
        if ':memory:' in url or url.rstrip('/').endswith('sqlite+aiosqlite:'):
            kwargs['poolclass'] = StaticPool
    return create_async_engine(url, **kwargs)


engine = make_engine(DATABASE_URL)
AsyncSessionLocal = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
Base = declarative_base()


async def get_session():
    """Request-scoped session, injected into routes with Depends(get_session)."""
    async with AsyncSessionLocal() as session:
        yield session


async def init_models(bind=None):
    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

# Import models to register tables
from .users import User  # noqa: F401,E402
from .blogs import Blog  # noqa: F401,E402
