"""SQL Builder script to demonstrate building a select query with optional filters."""
import sqlite3
import sqlbuilder as sb

db_file = "igneous_rocks.db"


def select_rocks(conn, grain_size=None, limit=None):
    builder = sb.Builder()
    builder.append("SELECT name, grain_size FROM igneous_rocks")
    builder.append("WHERE 1 = 1")
    if grain_size:
        builder.append("AND grain_size = ?", grain_size)
    builder.append("ORDER BY name")
    if limit:
        builder.append("LIMIT ?", limit)

    query, args = builder.build()
    return conn.execute(query, args).fetchall()


with sqlite3.connect(db_file) as conn:
    # Note that table must already exist
    print(select_rocks(conn, grain_size="fine", limit=10))
