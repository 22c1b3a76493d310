# loxtestgen/database.py
import os
import sqlite3
from pathlib import Path

DB_VERSION = 2


def get_db_path():
    override = os.environ.get('LOXTESTGEN_DB')
    if override:
        return Path(override)
    return Path.home() / '.loxtestgen' / 'history.db'


def get_db_connection():
    """Creates the directory if needed and returns a connection to the history database."""
    db_file = get_db_path()
    db_file.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(db_file)
    conn.row_factory = sqlite3.Row
    return conn


def init_db():
    """Creates or migrates the schema to the latest version."""
    conn = get_db_connection()
    cursor = conn.cursor()

    try:
        cursor.execute("CREATE TABLE IF NOT EXISTS schema_version (version INTEGER NOT NULL);")

        cursor.execute("SELECT COUNT(*) FROM schema_version")
        if cursor.fetchone()[0] == 0:
            cursor.execute("INSERT INTO schema_version (version) VALUES (0);")

        cursor.execute("SELECT version FROM schema_version;")
        current_version = cursor.fetchone()['version']

        if current_version >= DB_VERSION:
            return

        if current_version < 1:
            cursor.execute("""
            CREATE TABLE IF NOT EXISTS events (
                id INTEGER PRIMARY KEY AUTOINCREMENT, timestamp TEXT NOT NULL, version TEXT,
                command TEXT NOT NULL, project_path TEXT NOT NULL, execution_time_ms REAL, status TEXT
            );
            """)
            cursor.execute("""
            CREATE TABLE IF NOT EXISTS findings (
                id INTEGER PRIMARY KEY AUTOINCREMENT, event_id INTEGER NOT NULL, severity TEXT NOT NULL,
                message TEXT NOT NULL, details TEXT, file TEXT, category TEXT,
                FOREIGN KEY (event_id) REFERENCES events (id)
            );
            """)

        if current_version < 2:
            try:
                cursor.execute("ALTER TABLE events ADD COLUMN arguments TEXT;")
            except sqlite3.OperationalError as e:
                if "duplicate column name" not in str(e): raise e

        cursor.execute("UPDATE schema_version SET version = ?;", (DB_VERSION,))
        conn.commit()
    finally:
        conn.close()
