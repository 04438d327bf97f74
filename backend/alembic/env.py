from pathlib import Path
from logging.config import fileConfig

from sqlalchemy import engine_from_config
from sqlalchemy import pool

from alembic import context
from fishpoles.core.settings import get_settings
from fishpoles.db import Base, import_all_models

import_all_models()

# this is the Alembic Config object, which provides
# access to the values within the .ini file in use.
config = context.config


# --- garante Alembic usando o MESMO DATABASE_URL do app ---
def _normalize_sqlite_url(url: str) -> str:
    if not url.startswith("sqlite"):
        return url
    # sqlite:///./foo.db -> absoluto baseado em backend/
    if url.startswith("sqlite:///./"):
        rel = url[len("sqlite:///./"):]
        base = Path(__file__).resolve().parents[1]  # backend/
        abs_path = (base / rel).resolve()
        return "sqlite:////" + abs_path.as_posix().lstrip("/")
    return url


config.set_main_option("sqlalchemy.url", _normalize_sqlite_url(get_settings().DATABASE_URL))
# --- end ---


# Interpret the config file for Python logging.
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode (emite SQL, sem Engine)."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode."""
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=connection.dialect.name == "sqlite",
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
