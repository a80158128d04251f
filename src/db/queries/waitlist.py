from typing import Optional, Dict
from src.db.base import execute_query_single, execute_query

WAITLIST_TABLE_DDL = """
    CREATE TABLE IF NOT EXISTS waitlist (
        id BIGSERIAL PRIMARY KEY,
        email TEXT NOT NULL UNIQUE,
        source TEXT NOT NULL,
        created_at TIMESTAMPTZ NOT NULL DEFAULT now()
    )
"""

def create_waitlist_table(conn) -> None:
    """Create the waitlist table if it does not exist"""
    execute_query(conn, WAITLIST_TABLE_DDL, ())
    conn.commit()

def insert_waitlist_entry(conn, email: str, source: str) -> Optional[Dict]:
    """
    Insert a waitlist entry.

    Returns the new row, or None when the email is already registered.
    """
    result = execute_query_single(
        conn,
        """
        INSERT INTO waitlist (email, source)
        VALUES (%s, %s)
        ON CONFLICT (email) DO NOTHING
        RETURNING email, source, created_at
        """,
        (email, source)
    )
    conn.commit()
    return result

def ping(conn) -> Optional[Dict]:
    return execute_query_single(conn, "SELECT 1 AS ok", ())
