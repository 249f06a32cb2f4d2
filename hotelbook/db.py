import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import func, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, create_engine, select

from .exceptions.custom import StorageError
from .models import Hotel, Room
from .seed import SEED_HOTELS, SEED_ROOMS

logger = logging.getLogger(__name__)

# columns added after the first release; (table, column, DDL)
ADDITIVE_COLUMNS = [
    ("hotels", "has_pool", "ALTER TABLE hotels ADD COLUMN has_pool BOOLEAN NOT NULL DEFAULT FALSE"),
]


def create_store_engine(url: str) -> Engine:
    connect_args = {}
    if url.startswith("sqlite"):
        # one engine is shared by FastAPI's worker threads
        connect_args["check_same_thread"] = False
    return create_engine(url, pool_pre_ping=True, connect_args=connect_args)


class HotelStore:
    """Shared handle to the relational store. One per app, passed to every request."""

    def __init__(self, engine: Engine):
        self.engine = engine

    @contextmanager
    def session(self) -> Iterator[Session]:
        s = Session(self.engine)
        try:
            yield s
        except SQLAlchemyError as e:
            s.rollback()
            logger.exception("Storage operation failed")
            raise StorageError(str(e)) from e
        finally:
            s.close()

    def init(self) -> "HotelStore":
        """Create missing tables, apply additive migrations, seed an empty catalog."""
        logger.info(
            "Initializing store at %s",
            self.engine.url.render_as_string(hide_password=True),
        )
        try:
            SQLModel.metadata.create_all(self.engine)
            self._migrate()
        except SQLAlchemyError as e:
            logger.exception("Could not prepare schema")
            raise StorageError(str(e)) from e

        with self.session() as s:
            count = s.exec(select(func.count()).select_from(Hotel)).one()
            if count == 0:
                self._seed(s)
        return self

    def _migrate(self) -> None:
        insp = inspect(self.engine)
        for table, column, ddl in ADDITIVE_COLUMNS:
            existing = {c["name"] for c in insp.get_columns(table)}
            if column in existing:
                continue
            try:
                with self.engine.begin() as conn:
                    conn.execute(text(ddl))
                logger.info("Added column %s.%s", table, column)
            except SQLAlchemyError:
                # another process may have added it in the meantime
                logger.warning("Could not add %s.%s, assuming it exists", table, column)

    def _seed(self, s: Session) -> None:
        hotels = [Hotel(**row) for row in SEED_HOTELS]
        s.add_all(hotels)
        s.flush()
        for hotel_idx, row in SEED_ROOMS:
            s.add(Room(hotel_id=hotels[hotel_idx].id, **row))
        s.commit()
        logger.info("Seeded %d hotels and %d rooms", len(SEED_HOTELS), len(SEED_ROOMS))

    def dispose(self) -> None:
        self.engine.dispose()
