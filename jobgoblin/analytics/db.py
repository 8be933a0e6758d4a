from __future__ import annotations

import sqlite3
from contextlib import closing
from datetime import datetime, timedelta, timezone
from pathlib import Path

from jobgoblin.core.config import settings


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _get_db_path() -> Path:
    return Path(settings.analytics_db_path)


def _connect() -> sqlite3.Connection:
    db_path = _get_db_path()
    db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(db_path)
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS ai_runs (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            created_at TEXT NOT NULL,
            run_id TEXT NOT NULL,
            operation TEXT NOT NULL,
            model TEXT NOT NULL,
            status TEXT NOT NULL,
            error_code TEXT,
            latency_ms INTEGER,
            prompt_chars INTEGER
        )
        """
    )
    conn.execute(
        """
        CREATE INDEX IF NOT EXISTS idx_ai_runs_created_at
        ON ai_runs (created_at)
        """
    )
    return conn


def init_db() -> None:
    if not settings.analytics_enabled:
        return
    with closing(_connect()) as conn:
        conn.commit()


def log_ai_run(
    *,
    run_id: str,
    operation: str,
    model: str,
    status: str,
    error_code: str | None = None,
    latency_ms: int | None = None,
    prompt_chars: int | None = None,
) -> None:
    if not settings.analytics_enabled:
        return
    with closing(_connect()) as conn:
        conn.execute(
            """
            INSERT INTO ai_runs (
                created_at, run_id, operation, model, status, error_code,
                latency_ms, prompt_chars
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                _utc_now().isoformat(),
                run_id,
                operation,
                model,
                status,
                error_code,
                latency_ms,
                prompt_chars,
            ),
        )
        conn.commit()


def purge_old_records() -> dict[str, int]:
    if not settings.analytics_enabled:
        return {"ai_runs": 0}

    retention = max(1, int(settings.analytics_retention_days))
    cutoff = (_utc_now() - timedelta(days=retention)).isoformat()
    with closing(_connect()) as conn:
        cur = conn.execute("DELETE FROM ai_runs WHERE created_at < ?", (cutoff,))
        conn.commit()
        return {"ai_runs": int(cur.rowcount or 0)}
