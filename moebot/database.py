"""Database connection settings and limits shared by stored records."""

from __future__ import annotations

DB_MAX_UID_LENGTH = 20
MAX_MESSAGE_LENGTH = 1900


def create_conn_string(host: str, user: str, password: str, dbname: str) -> str:
    """Build a key/value connection string for the database server."""
    return (
        "host=" + host + " user=" + user + " password=" + password
        + " dbname=" + dbname + " sslmode=disable"
    )