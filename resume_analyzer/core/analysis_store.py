from __future__ import annotations

import json
import os
import secrets
import sqlite3
import threading
from datetime import datetime, timezone
from typing import Any

from resume_analyzer.core.config import settings
from resume_analyzer.schemas.analysis import AnalysisResult

_conn: sqlite3.Connection | None = None
_conn_lock = threading.Lock()


class AnalysisStoreError(RuntimeError):
    pass


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _get_connection() -> sqlite3.Connection:
    global _conn
    with _conn_lock:
        if _conn is not None:
            return _conn

        db_path = settings.analysis_store_db_path
        directory = os.path.dirname(db_path)
        conn: sqlite3.Connection | None = None
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)

            conn = sqlite3.connect(
                db_path,
                check_same_thread=False,
                timeout=5,
                isolation_level=None,
            )
            conn.execute("PRAGMA journal_mode=WAL;")
            conn.execute("PRAGMA synchronous=NORMAL;")
            conn.execute("PRAGMA busy_timeout=5000;")
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS analysis_records (
                    analysis_id TEXT PRIMARY KEY,
                    source TEXT NOT NULL,
                    result_payload_json TEXT NOT NULL,
                    created_at TEXT NOT NULL
                );
                """
            )
            conn.execute(
                """
                CREATE INDEX IF NOT EXISTS idx_analysis_records_created
                ON analysis_records (created_at);
                """
            )
        except (OSError, sqlite3.Error) as exc:
            if conn is not None:
                conn.close()
            raise AnalysisStoreError(f"Unable to open analysis store at '{db_path}': {exc}") from exc

        _conn = conn
        return _conn


def _row_to_record(row: tuple[Any, ...]) -> dict[str, Any]:
    return {
        "analysis_id": row[0],
        "source": row[1],
        "analysis": json.loads(row[2]) if row[2] else {},
        "created_at": datetime.fromisoformat(row[3]),
    }


def save_analysis(result: AnalysisResult, *, source: str) -> str:
    conn = _get_connection()
    analysis_id = secrets.token_urlsafe(9)
    payload_json = json.dumps(result.model_dump(mode="json", by_alias=True), ensure_ascii=False)

    with _conn_lock:
        try:
            conn.execute(
                """
                INSERT INTO analysis_records (
                    analysis_id, source, result_payload_json, created_at
                ) VALUES (?, ?, ?, ?)
                """,
                (analysis_id, source, payload_json, _utc_now().isoformat()),
            )
            conn.commit()
        except sqlite3.Error as exc:
            raise AnalysisStoreError(f"Could not save analysis: {exc}") from exc
    return analysis_id


def get_analysis(analysis_id: str) -> dict[str, Any] | None:
    conn = _get_connection()
    with _conn_lock:
        try:
            cur = conn.execute(
                """
                SELECT analysis_id, source, result_payload_json, created_at
                FROM analysis_records
                WHERE analysis_id = ?
                """,
                (analysis_id,),
            )
            row = cur.fetchone()
        except sqlite3.Error as exc:
            raise AnalysisStoreError(f"Could not load analysis '{analysis_id}': {exc}") from exc

    if not row:
        return None
    return _row_to_record(row)


def get_latest_analysis() -> dict[str, Any] | None:
    conn = _get_connection()
    with _conn_lock:
        try:
            cur = conn.execute(
                """
                SELECT analysis_id, source, result_payload_json, created_at
                FROM analysis_records
                ORDER BY created_at DESC, rowid DESC
                LIMIT 1
                """
            )
            row = cur.fetchone()
        except sqlite3.Error as exc:
            raise AnalysisStoreError(f"Could not load latest analysis: {exc}") from exc

    if not row:
        return None
    return _row_to_record(row)


def clear_analysis_store() -> None:
    conn = _get_connection()
    with _conn_lock:
        try:
            conn.execute("DELETE FROM analysis_records")
            conn.commit()
        except sqlite3.Error as exc:
            raise AnalysisStoreError(f"Could not clear analysis store: {exc}") from exc
