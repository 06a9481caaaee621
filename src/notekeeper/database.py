# Database connection setup
import asyncio
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool
from sqlalchemy.sql import Executable

from .core.logging import get_logger
from .core.models.base import BaseModel

logger = get_logger("database")


@dataclass(frozen=True)
class ExecuteResult:
    """Outcome of a mutating statement."""

    last_insert_id: Optional[int]
    rows_affected: int


def _engine_options(url: str) -> Dict[str, Any]:
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return {}
    options: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if parsed.database in (None, "", ":memory:"):
        # keep the same memory DB across connections
        options["poolclass"] = StaticPool
    return options


class Database:
    """Persistence gateway over an async SQLAlchemy engine.

    Every call takes a SQLAlchemy Core statement, so user supplied values are
    always sent as bound parameters. Mutations run in their own transaction.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, echo=echo, **_engine_options(url))
        self._init_lock = asyncio.Lock()
        self._initialized = False

        if self.engine.dialect.name == "sqlite":
            # Ensure SQLite enforces foreign key constraints (required for CASCADE)
            @event.listens_for(self.engine.sync_engine, "connect")
            def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
                cursor = dbapi_connection.cursor()
                try:
                    cursor.execute("PRAGMA foreign_keys=ON")
                finally:
                    cursor.close()

    @property
    def initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        """Create tables if absent. Safe to call concurrently and repeatedly."""
        if self._initialized:
            return
        async with self._init_lock:
            if self._initialized:
                return
            async with self.engine.begin() as conn:
                await conn.run_sync(BaseModel.metadata.create_all)
            self._initialized = True
            logger.info("Database schema created/verified", extra={"backend": self.engine.dialect.name})

    async def close(self) -> None:
        """Release the engine and its pooled connections."""
        await self.engine.dispose()
        self._initialized = False
        logger.info("Database connection closed")

    async def execute(
        self, statement: Executable, params: Optional[Mapping[str, Any]] = None
    ) -> ExecuteResult:
        """Run an INSERT/UPDATE/DELETE and report the generated key and row count."""
        async with self.engine.begin() as conn:
            result = await conn.execute(statement, params)
            last_insert_id = None
            if result.is_insert and result.inserted_primary_key:
                last_insert_id = result.inserted_primary_key[0]
            return ExecuteResult(last_insert_id=last_insert_id, rows_affected=result.rowcount)

    async def query_one(
        self, statement: Executable, params: Optional[Mapping[str, Any]] = None
    ) -> Optional[Dict[str, Any]]:
        """Fetch the first matching row as a dict, or None."""
        async with self.engine.connect() as conn:
            result = await conn.execute(statement, params)
            row = result.mappings().first()
            return dict(row) if row is not None else None

    async def query_all(
        self, statement: Executable, params: Optional[Mapping[str, Any]] = None
    ) -> List[Dict[str, Any]]:
        """Fetch every matching row as a list of dicts."""
        async with self.engine.connect() as conn:
            result = await conn.execute(statement, params)
            return [dict(row) for row in result.mappings().all()]

    async def ping(self) -> None:
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))


def get_database(request: Request) -> Database:
    """FastAPI dependency returning the gateway created at startup."""
    return request.app.state.database
