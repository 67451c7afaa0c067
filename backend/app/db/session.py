from __future__ import annotations

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.config import get_settings

settings = get_settings()
database_url = settings.resolved_database_url
is_sqlite = database_url.startswith('sqlite')

if database_url.startswith('sqlite:///'):
    settings.data_dir.mkdir(parents=True, exist_ok=True)

engine = create_engine(
    database_url,
    connect_args={'check_same_thread': False} if is_sqlite else {},
    pool_pre_ping=not is_sqlite,
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
