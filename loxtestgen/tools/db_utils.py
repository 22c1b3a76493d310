# loxtestgen/tools/db_utils.py
import os
import json
import sqlite3
from datetime import datetime, timezone
from loxtestgen import __version__
from loxtestgen.database import get_db_connection, init_db


def _log_execution(command_name, path, results, arguments, execution_time_ms=0):
    timestamp = datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')
    project_path_abs = os.path.abspath(path)
    serializable_args = {k: str(v) for k, v in (arguments or {}).items()}
    status = "failed" if results['summary'].get('critical') or results['summary'].get('errors') else "completed"
    conn = None
    try:
        init_db()
        conn = get_db_connection()
        cursor = conn.cursor()
        cursor.execute(
            "INSERT INTO events (timestamp, version, command, project_path, arguments, execution_time_ms, status) VALUES (?, ?, ?, ?, ?, ?, ?)",
            (timestamp, __version__, command_name, project_path_abs, json.dumps(serializable_args, sort_keys=True), round(execution_time_ms, 2), status)
        )
        event_id = cursor.lastrowid
        for finding in results.get('findings', []):
            cursor.execute(
                "INSERT INTO findings (event_id, severity, message, details, file, category) VALUES (?, ?, ?, ?, ?, ?)",
                (event_id, finding.get('severity'), finding.get('message'), finding.get('details'),
                 finding.get('file'), finding.get('category'))
            )
        conn.commit()
    except (sqlite3.Error, OSError):
        # The history is best effort; a broken database never fails a run.
        pass
    finally:
        if conn: conn.close()


def _recent_events(limit=20, command=None):
    init_db()
    conn = get_db_connection()
    try:
        query = "SELECT * FROM events"
        params = []
        if command:
            query += " WHERE command = ?"
            params.append(command)
        query += " ORDER BY id DESC LIMIT ?"
        params.append(limit)
        events = [dict(row) for row in conn.execute(query, params).fetchall()]
        for event in events:
            rows = conn.execute("SELECT * FROM findings WHERE event_id = ? ORDER BY id", (event['id'],)).fetchall()
            event['findings'] = [dict(row) for row in rows]
        return events
    finally:
        conn.close()
