"""Alembic environment for the assessment schema.

Only the tables declared in ``assessment.db.models`` are managed here; the
Supabase project also carries its own ``auth`` and ``storage`` schemas which
autogenerate must never touch.
"""
import sys
from logging.config import fileConfig
from pathlib import Path
from urllib.parse import parse_qsl, urlencode, urlparse, urlunparse

from alembic import context
from sqlalchemy import engine_from_config, pool

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from assessment.core.config import get_settings  # noqa: E402
from assessment.db.models import Base  # noqa: E402

MANAGED_TABLES = frozenset(Base.metadata.tables)
VERSION_TABLE = "assessment_alembic_version"


def migrations_url(raw: str) -> str:
    """psycopg2 driver plus ``sslmode=require`` unless the URL says otherwise."""
    if not raw:
        raise RuntimeError("DATABASE_URL is not set; migrations need a direct Postgres connection.")
    scheme, sep, rest = raw.partition("://")
    if scheme in ("postgres", "postgresql"):
        raw = f"postgresql+psycopg2{sep}{rest}"
    parts = urlparse(raw)
    query = dict(parse_qsl(parts.query, keep_blank_values=True))
    query.setdefault("sslmode", "require")
    return urlunparse(parts._replace(query=urlencode(query)))


def include_object(obj, name, type_, reflected, compare_to):
    if type_ == "table":
        return name in MANAGED_TABLES
    return True


config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

URL = migrations_url(get_settings().get_database_url())
config.set_main_option("sqlalchemy.url", URL.replace("%", "%%"))

CONFIGURE_OPTS = dict(
    target_metadata=Base.metadata,
    include_object=include_object,
    version_table=VERSION_TABLE,
    compare_type=True,
)


def run_offline() -> None:
    context.configure(url=URL, literal_binds=True, dialect_opts={"paramstyle": "named"}, **CONFIGURE_OPTS)
    with context.begin_transaction():
        context.run_migrations()


def run_online() -> None:
    engine = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with engine.connect() as connection:
        context.configure(connection=connection, **CONFIGURE_OPTS)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_offline()
else:
    run_online()
