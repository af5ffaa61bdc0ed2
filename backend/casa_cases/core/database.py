"""
database.py — SQLAlchemy async engine, session factory, and base class.

The case views never write: this module only exists so the API can read
casa_cases / case_contacts rows and hand them to the pure view functions
as immutable entities.

ASYNCPG URL NOTE:
  Hosted Postgres dashboards hand out libpq-style URLs that end in
    ?sslmode=require&channel_binding=require
  asyncpg rejects those keywords, so prepare_asyncpg_url() strips them
  and turns sslmode into connect_args={"ssl": True}.  The DATABASE_URL can
  then be pasted into .env unchanged.

HOW IT FLOWS:
  1. `engine`            – single async engine backed by asyncpg.
  2. `AsyncSessionLocal` – session factory; one short-lived session per request.
  3. `Base`              – declarative base for the ORM rows in models/tables.py.
  4. `get_db()`          – FastAPI dependency yielding a read session.
"""

from urllib.parse import urlencode, urlparse, urlunparse, parse_qs

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from casa_cases.core.config import settings

_SSL_MODES = ("require", "verify-ca", "verify-full")


def prepare_asyncpg_url(url: str) -> tuple[str, dict]:
    """
    Split a libpq-style DATABASE_URL into (clean_url, connect_args).

    `sslmode` and `channel_binding` are removed from the query string;
    any other query params survive untouched.
    """
    parsed = urlparse(url)
    params = parse_qs(parsed.query, keep_blank_values=True)

    sslmode = params.pop("sslmode", ["disable"])[0]
    params.pop("channel_binding", None)

    clean_url = urlunparse(
        parsed._replace(query=urlencode({k: v[0] for k, v in params.items()}))
    )

    connect_args: dict = {}
    if sslmode in _SSL_MODES:
        connect_args["ssl"] = True

    return clean_url, connect_args


_db_url, _connect_args = prepare_asyncpg_url(settings.DATABASE_URL)


# ------------------------------------------------------------------ #
# Engine
# ------------------------------------------------------------------ #
# pool_pre_ping=True tests stale connections before use; serverless
# Postgres drops idle connections.
engine = create_async_engine(
    _db_url,
    echo=False,
    pool_pre_ping=True,
    pool_size=5,
    max_overflow=10,
    connect_args=_connect_args,
)

# ------------------------------------------------------------------ #
# Session factory
# ------------------------------------------------------------------ #
AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
    autocommit=False,
)


# ------------------------------------------------------------------ #
# Declarative base
# ------------------------------------------------------------------ #
class Base(DeclarativeBase):
    """All ORM models inherit from this class."""
    pass


# ------------------------------------------------------------------ #
# FastAPI dependency
# ------------------------------------------------------------------ #
async def get_db():
    """
    Yield an async SQLAlchemy session for the duration of one HTTP request.

    Nothing in the case API writes, so the session is rolled back rather
    than committed when the request finishes.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.rollback()
