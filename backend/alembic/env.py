import os
from logging.config import fileConfig

from alembic import context
from dotenv import load_dotenv
from sqlalchemy import create_engine, pool

from backoffice.database.database import get_base_metadata

load_dotenv()

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

url = os.getenv("DATABASE_URL") or config.get_main_option("sqlalchemy.url")
connectable = create_engine(url, poolclass=pool.NullPool)

# SQLite cannot ALTER most constraints in place
with connectable.connect() as connection:
    context.configure(
        connection=connection,
        target_metadata=get_base_metadata(),
        render_as_batch=connection.dialect.name == "sqlite",
    )
    with context.begin_transaction():
        context.run_migrations()
