"""Re-export the singleton engine from postboard.db and register SQLite pragmas."""
from sqlalchemy import event
from postboard.db import engine          # singleton; created once at postboard.db import
import postboard.models  # noqa: F401   # registers the table mappers


def _set_wal_mode(dbapi_conn, _):
    cur = dbapi_conn.cursor()
    cur.execute("PRAGMA journal_mode=WAL")
    cur.execute("PRAGMA synchronous=NORMAL")
    cur.close()


if engine.dialect.name == "sqlite":
    event.listen(engine, "connect", _set_wal_mode)

__all__ = ["engine"]
