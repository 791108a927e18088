from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from backoffice.core.config import settings
from backoffice.models.base import Base
import backoffice.models

connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_base_metadata():
    return Base.metadata


def init_db():
    Base.metadata.create_all(bind=engine)
