import logging
from sqlalchemy import Table
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from . import models
from .seed import ensure_seeded

logger = logging.getLogger("villalux.db")


def create_table(table: Table, bind: Engine):
    table.create(bind=bind, checkfirst=True)


def init_db(bind: Engine):
    """
    Creates any missing tables one at a time and seeds the villa catalog.

    Failures are logged and never raised: a table that cannot be created
    is skipped and the service keeps running with whatever exists.
    """
    try:
        with bind.connect():
            pass
    except SQLAlchemyError as e:
        logger.error(f"Error connecting to the database: {e}")
        return
    logger.info(f"Successfully connected to the database at {bind.url}.")

    for table in models.Base.metadata.sorted_tables:
        try:
            create_table(table, bind)
        except SQLAlchemyError as e:
            logger.error(f"Error creating {table.name} table: {e}")
            continue

        if table.name == models.Villa.__tablename__:
            _seed_villas(bind)


def _seed_villas(bind: Engine):
    with Session(bind) as db:
        try:
            ensure_seeded(db)
        except SQLAlchemyError as e:
            logger.error(f"Error seeding villas table: {e}")
            db.rollback()
