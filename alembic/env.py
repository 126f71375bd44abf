import sys
import os
from logging.config import fileConfig

from sqlalchemy import engine_from_config, pool
from alembic import context

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from app.config import settings
from app.db.session import Base
from app.db import models  # noqa: F401  registers users, tasks, labels, task_labels

config = context.config

if config.config_file_name:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

# Read straight from settings; alembic.ini never holds the URL
DATABASE_URL = settings.DATABASE_URL

# SQLite can't ALTER most columns in place, so let alembic copy tables instead
RENDER_AS_BATCH = DATABASE_URL.startswith("sqlite")


def _configure(**kwargs):
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,
        render_as_batch=RENDER_AS_BATCH,
        **kwargs,
    )


def run_migrations_offline():
    """Emit the task board schema as SQL without connecting."""
    _configure(url=DATABASE_URL, literal_binds=True)
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    connectable = engine_from_config(
        {"sqlalchemy.url": DATABASE_URL},
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        _configure(connection=connection)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
