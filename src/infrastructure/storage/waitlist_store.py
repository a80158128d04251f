import psycopg2
from psycopg2 import errors as pg_errors
from typing import Callable, Optional

from src.core.errors import StoreError
from src.db.base import get_db, get_db_connection
from src.db.queries.waitlist import create_waitlist_table, insert_waitlist_entry, ping
from src.schemas.waitlist import InsertResult, WaitlistEntry
from src.utils.metrics import DB_OPERATION_DURATION, track_time

from src.utils.logger import get_logger
logger = get_logger(__name__)

class WaitlistStore:
    """Postgres-backed waitlist table with insert-or-detect-duplicate semantics"""

    def __init__(self, connection_factory: Optional[Callable] = None):
        self.connection_factory = connection_factory or get_db_connection

    @track_time(DB_OPERATION_DURATION.labels(operation='insert_waitlist_entry'))
    def insert(self, email: str, source: str) -> InsertResult:
        """Insert email; an existing row is reported as created=False"""
        try:
            with get_db(self.connection_factory) as conn:
                try:
                    row = insert_waitlist_entry(conn, email, source)
                except pg_errors.UniqueViolation:
                    conn.rollback()
                    row = None
                except psycopg2.Error:
                    conn.rollback()
                    raise
        except psycopg2.Error as e:
            logger.error(f"Waitlist insert failed: {str(e)}")
            raise StoreError(f"Failed to insert waitlist entry: {str(e)}") from e

        if row is None:
            logger.info("Waitlist email already registered", extra={"source": source})
            return InsertResult(created=False)

        logger.info("Waitlist entry created", extra={"source": source})
        return InsertResult(created=True, entry=WaitlistEntry(**row))

    def ping(self) -> bool:
        """Check the database answers a trivial query"""
        try:
            with get_db(self.connection_factory) as conn:
                ping(conn)
            return True
        except psycopg2.Error as e:
            logger.error(f"Database ping failed: {str(e)}")
            raise StoreError(f"Database unavailable: {str(e)}") from e

    def create_table(self) -> None:
        try:
            with get_db(self.connection_factory) as conn:
                create_waitlist_table(conn)
            logger.info("Waitlist table ready")
        except psycopg2.Error as e:
            logger.error(f"Waitlist table creation failed: {str(e)}")
            raise StoreError(f"Failed to create waitlist table: {str(e)}") from e
