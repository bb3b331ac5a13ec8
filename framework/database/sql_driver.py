from sqlmodel import SQLModel
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel.ext.asyncio.session import AsyncSession
from .base import BaseDatabaseDriver

class SQLDriver(BaseDatabaseDriver):
    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.engine = create_async_engine(url, echo=echo, future=True, **self._engine_options(url))
        # autobegin off: writes need an explicit begin from the unit of work
        self.session_factory = sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False, autobegin=False
        )

    @staticmethod
    def _engine_options(url: str) -> dict:
        """In-memory SQLite lives in one connection, so share it across sessions."""
        parsed = make_url(url)
        if parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:"):
            return {
                "connect_args": {"check_same_thread": False},
                "poolclass": StaticPool,
            }
        return {}

    async def connect(self):
        """Check the database is reachable."""
        from sqlalchemy import text
        async with self.engine.begin() as conn:
            await conn.execute(text("SELECT 1"))

    async def disconnect(self):
        """Dispose the engine and its pooled connections."""
        await self.engine.dispose()

    async def create_schema(self):
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    async def drop_schema(self):
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.drop_all)

    def new_session(self) -> AsyncSession:
        return self.session_factory()
