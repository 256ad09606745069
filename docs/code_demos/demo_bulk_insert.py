"""SQL Builder script to demonstrate a multi-row insert."""
import sqlite3
import sqlbuilder as sb

db_file = "igneous_rocks.db"

# Template ends with a single (?) marker for the row placeholders
insert_sql = "INSERT INTO igneous_rocks (name, grain_size) VALUES (?)"

rows = [("basalt", "fine"), ("granite", "coarse"), ("gabbro", "coarse")]

sb.log_to_console()

with sqlite3.connect(db_file) as conn:
    # Note that table must already exist
    # Each query holds at most 500 rows
    for query, args in sb.iter_bulk_queries(insert_sql, rows, chunk_size=500):
        conn.execute(query, args)
