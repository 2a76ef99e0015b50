# cat_api/database.py

import logging
from pathlib import Path
from sqlalchemy import create_engine, inspect
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker
from cat_api.core.config import settings
from cat_api.core.seed import seed_sample_cats
from cat_api.models import Base, Adoption


logger = logging.getLogger(__name__)

ADOPTED_COLUMNS = {"id", "cat_id", "user_id", "adoption_date"}


def build_engine(database_url: str) -> Engine:
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False}
        )
    return create_engine(database_url, pool_pre_ping=True)


engine = build_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)


def _ensure_sqlite_dir(bind: Engine):
    url = bind.url
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)


def _upgrade_adopted_table(bind: Engine):
    """
    Recreates an `adopted` table left behind by an older layout.
    Its rows cannot be mapped onto the current columns, so they are dropped.
    """
    inspector = inspect(bind)
    if not inspector.has_table(Adoption.__tablename__):
        return

    columns = {c["name"] for c in inspector.get_columns(Adoption.__tablename__)}
    if ADOPTED_COLUMNS <= columns:
        return

    logger.warning("Recreating legacy adopted table (found columns: %s)", sorted(columns))
    Adoption.__table__.drop(bind=bind)
    Adoption.__table__.create(bind=bind)


def init_db(bind: Engine | None = None, seed: bool | None = None):
    bind = bind or engine
    seed = settings.SEED_SAMPLE_DATA if seed is None else seed

    _ensure_sqlite_dir(bind)
    Base.metadata.create_all(bind=bind)
    _upgrade_adopted_table(bind)
    logger.info("Database schema ready (%s)", bind.url.render_as_string(hide_password=True))

    if seed:
        Session = sessionmaker(bind=bind)
        with Session() as db:
            seed_sample_cats(db)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
