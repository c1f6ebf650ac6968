from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

from vacation_api.core.config import settings
from vacation_api.models.user import Base
import vacation_api.models.department  # noqa: F401
import vacation_api.models.vacation_request  # noqa: F401
import vacation_api.models.revoked_token  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _configure(**kwargs) -> None:
    # SQLite cannot ALTER most constraints in place; batch mode rebuilds tables.
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,
        render_as_batch=settings.database_url.startswith("sqlite"),
        **kwargs,
    )


def run_migrations_offline() -> None:
    _configure(
        url=settings.database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    engine = create_engine(settings.database_url, poolclass=pool.NullPool)
    with engine.connect() as connection:
        _configure(connection=connection)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
