import dataclasses
import sqlite3
import tempfile
import unittest
from datetime import datetime, timedelta, timezone
from pathlib import Path
from unittest.mock import patch

from jobgoblin.analytics import db
from jobgoblin.core.config import settings


class AnalyticsDbTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.db_path = Path(self._tmp.name) / "nested" / "analytics.db"
        enabled = dataclasses.replace(
            settings,
            analytics_enabled=True,
            analytics_db_path=str(self.db_path),
            analytics_retention_days=30,
        )
        patcher = patch("jobgoblin.analytics.db.settings", enabled)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self._tmp.cleanup)

    def _rows(self):
        with sqlite3.connect(self.db_path) as conn:
            return conn.execute("SELECT run_id, status, error_code FROM ai_runs ORDER BY id").fetchall()

    def test_log_and_read_back(self):
        db.init_db()
        db.log_ai_run(run_id="r1", operation="tailor_resume", model="m", status="success", latency_ms=12)
        db.log_ai_run(run_id="r2", operation="tailor_resume", model="m", status="error", error_code="llm_exception")
        self.assertEqual(self._rows(), [("r1", "success", None), ("r2", "error", "llm_exception")])

    def test_purge_drops_only_expired_rows(self):
        old = datetime.now(timezone.utc) - timedelta(days=45)
        with patch("jobgoblin.analytics.db._utc_now", return_value=old):
            db.log_ai_run(run_id="old", operation="tailor_resume", model="m", status="success")
        db.log_ai_run(run_id="new", operation="tailor_resume", model="m", status="success")

        self.assertEqual(db.purge_old_records(), {"ai_runs": 1})
        self.assertEqual([row[0] for row in self._rows()], ["new"])

    def test_disabled_analytics_writes_nothing(self):
        disabled = dataclasses.replace(settings, analytics_enabled=False, analytics_db_path=str(self.db_path))
        with patch("jobgoblin.analytics.db.settings", disabled):
            db.log_ai_run(run_id="r1", operation="tailor_resume", model="m", status="success")
            self.assertEqual(db.purge_old_records(), {"ai_runs": 0})
        self.assertFalse(self.db_path.exists())


if __name__ == "__main__":
    unittest.main()
