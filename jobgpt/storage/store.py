from __future__ import annotations

import json
import logging
import math
import os
import sqlite3
import threading
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any

from jobgpt.core.config import settings
from jobgpt.schemas.records import JobStatus

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS: dict[JobStatus, frozenset[JobStatus]] = {
    JobStatus.INTERESTED: frozenset({JobStatus.APPLIED, JobStatus.DISMISSED}),
    JobStatus.APPLIED: frozenset(),
    JobStatus.DISMISSED: frozenset(),
}

_SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS resumes (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id TEXT NOT NULL,
        title TEXT NOT NULL,
        content TEXT NOT NULL,
        ai_analysis_json TEXT,
        skills_json TEXT NOT NULL,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL,
        UNIQUE (user_id, title)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS career_paths (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id TEXT NOT NULL,
        current_role TEXT NOT NULL,
        target_role TEXT NOT NULL,
        timeline_months INTEGER NOT NULL,
        required_skills_json TEXT NOT NULL,
        milestones_json TEXT NOT NULL,
        learning_resources_json TEXT,
        ai_recommendations_json TEXT NOT NULL,
        created_at TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS job_matches (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        user_id TEXT NOT NULL,
        job_title TEXT NOT NULL,
        company TEXT,
        job_description TEXT,
        match_score REAL,
        match_reasons_json TEXT NOT NULL,
        salary_range TEXT,
        location TEXT,
        job_url TEXT,
        status TEXT NOT NULL,
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS profiles (
        user_id TEXT PRIMARY KEY,
        full_name TEXT,
        phone TEXT,
        location TEXT,
        linkedin_url TEXT,
        github_url TEXT,
        portfolio_url TEXT,
        updated_at TEXT NOT NULL
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_resumes_user ON resumes (user_id)",
    "CREATE INDEX IF NOT EXISTS idx_career_paths_user ON career_paths (user_id)",
    "CREATE INDEX IF NOT EXISTS idx_job_matches_user ON job_matches (user_id)",
)

PROFILE_FIELDS = ("full_name", "phone", "location", "linkedin_url", "github_url", "portfolio_url")


class RecordNotFound(LookupError):
    pass


class InvalidStatusTransition(ValueError):
    def __init__(self, current: JobStatus, requested: JobStatus):
        super().__init__(f"Cannot change job status from '{current.value}' to '{requested.value}'.")
        self.current = current
        self.requested = requested


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _dumps(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)


def _loads(raw: str | None, default: Any = None) -> Any:
    if not raw:
        return default
    return json.loads(raw)


def check_transition(current: JobStatus, requested: JobStatus) -> None:
    if current == requested:
        return
    if requested not in ALLOWED_TRANSITIONS[current]:
        raise InvalidStatusTransition(current, requested)


def _coerce_score(value: Any) -> float | None:
    """Read a match score such as 82, 82.5, "82" or "82%"; anything else is None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().rstrip("%").strip()
    elif not isinstance(value, (int, float)):
        return None
    try:
        score = float(value)
    except (ValueError, OverflowError):
        return None
    return score if math.isfinite(score) else None


def _coerce_reasons(value: Any) -> list[Any]:
    if isinstance(value, list):
        return value
    if isinstance(value, str) and value.strip():
        return [value]
    return []


class RecordStore:
    """Per-user records for résumés, career paths, saved jobs and profiles."""

    def __init__(self, db_path: str):
        self._db_path = db_path
        self._conn: sqlite3.Connection | None = None
        self._lock = threading.Lock()

    def _connection(self) -> sqlite3.Connection:
        if self._conn is not None:
            return self._conn

        directory = os.path.dirname(self._db_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        conn = sqlite3.connect(
            self._db_path,
            check_same_thread=False,
            timeout=5,
            isolation_level=None,
        )
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA busy_timeout=5000;")
        for statement in _SCHEMA:
            conn.execute(statement)
        self._conn = conn
        logger.info("record_store_ready path=%s", self._db_path)
        return conn

    def init_schema(self) -> None:
        with self._lock:
            self._connection()

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None

    def _execute(self, sql: str, params: tuple[Any, ...] = ()) -> sqlite3.Cursor:
        with self._lock:
            return self._connection().execute(sql, params)

    def _fetchone(self, sql: str, params: tuple[Any, ...]) -> sqlite3.Row | None:
        with self._lock:
            return self._connection().execute(sql, params).fetchone()

    def _fetchall(self, sql: str, params: tuple[Any, ...]) -> list[sqlite3.Row]:
        with self._lock:
            return self._connection().execute(sql, params).fetchall()

    # Résumés

    @staticmethod
    def _resume_row(row: sqlite3.Row) -> dict[str, Any]:
        return {
            "id": row["id"],
            "user_id": row["user_id"],
            "title": row["title"],
            "content": row["content"],
            "ai_analysis": _loads(row["ai_analysis_json"]),
            "skills_extracted": _loads(row["skills_json"], []),
            "created_at": datetime.fromisoformat(row["created_at"]),
            "updated_at": datetime.fromisoformat(row["updated_at"]),
        }

    def save_resume(
        self,
        user_id: str,
        *,
        title: str,
        content: str,
        analysis: dict[str, Any] | None = None,
        skills: list[Any] | None = None,
    ) -> dict[str, Any]:
        if skills is None:
            derived = (analysis or {}).get("skills")
            skills = derived if isinstance(derived, list) else []
        now = _utc_now()
        self._execute(
            """
            INSERT INTO resumes (user_id, title, content, ai_analysis_json, skills_json, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT (user_id, title) DO UPDATE SET
                content = excluded.content,
                ai_analysis_json = excluded.ai_analysis_json,
                skills_json = excluded.skills_json,
                updated_at = excluded.updated_at
            """,
            (
                user_id,
                title,
                content,
                _dumps(analysis) if analysis is not None else None,
                _dumps(skills),
                now,
                now,
            ),
        )
        row = self._fetchone(
            "SELECT * FROM resumes WHERE user_id = ? AND title = ?",
            (user_id, title),
        )
        if row is None:  # pragma: no cover - written just above
            raise RecordNotFound(title)
        return self._resume_row(row)

    def list_resumes(self, user_id: str) -> list[dict[str, Any]]:
        rows = self._fetchall(
            "SELECT * FROM resumes WHERE user_id = ? ORDER BY updated_at DESC, id DESC",
            (user_id,),
        )
        return [self._resume_row(row) for row in rows]

    # Career paths

    @staticmethod
    def _career_row(row: sqlite3.Row) -> dict[str, Any]:
        return {
            "id": row["id"],
            "user_id": row["user_id"],
            "current_role": row["current_role"],
            "target_role": row["target_role"],
            "timeline_months": row["timeline_months"],
            "required_skills": _loads(row["required_skills_json"], []),
            "milestones": _loads(row["milestones_json"], []),
            "learning_resources": _loads(row["learning_resources_json"]),
            "ai_recommendations": _loads(row["ai_recommendations_json"], {}),
            "created_at": datetime.fromisoformat(row["created_at"]),
        }

    def save_career_path(
        self,
        user_id: str,
        *,
        current_role: str,
        target_role: str,
        timeline_months: int,
        plan: dict[str, Any],
    ) -> dict[str, Any]:
        skills = plan.get("skills")
        milestones = plan.get("milestones")
        cursor = self._execute(
            """
            INSERT INTO career_paths (
                user_id, current_role, target_role, timeline_months, required_skills_json,
                milestones_json, learning_resources_json, ai_recommendations_json, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                user_id,
                current_role,
                target_role,
                timeline_months,
                _dumps(skills if isinstance(skills, list) else []),
                _dumps(milestones if isinstance(milestones, list) else []),
                _dumps(plan.get("resources")),
                _dumps(plan),
                _utc_now(),
            ),
        )
        row = self._fetchone("SELECT * FROM career_paths WHERE id = ?", (cursor.lastrowid,))
        if row is None:  # pragma: no cover
            raise RecordNotFound(str(cursor.lastrowid))
        return self._career_row(row)

    def list_career_paths(self, user_id: str) -> list[dict[str, Any]]:
        rows = self._fetchall(
            "SELECT * FROM career_paths WHERE user_id = ? ORDER BY created_at DESC, id DESC",
            (user_id,),
        )
        return [self._career_row(row) for row in rows]

    # Saved jobs

    @staticmethod
    def _job_row(row: sqlite3.Row) -> dict[str, Any]:
        return {
            "id": row["id"],
            "user_id": row["user_id"],
            "job_title": row["job_title"],
            "company": row["company"],
            "job_description": row["job_description"],
            "match_score": row["match_score"],
            "match_reasons": _loads(row["match_reasons_json"], []),
            "salary_range": row["salary_range"],
            "location": row["location"],
            "job_url": row["job_url"],
            "status": JobStatus(row["status"]),
            "created_at": datetime.fromisoformat(row["created_at"]),
            "updated_at": datetime.fromisoformat(row["updated_at"]),
        }

    def save_job_match(
        self,
        user_id: str,
        *,
        title: str,
        company: str | None = None,
        description: str | None = None,
        match_score: Any = None,
        match_reasons: Any = None,
        salary: str | None = None,
        location: str | None = None,
        url: str | None = None,
    ) -> dict[str, Any]:
        now = _utc_now()
        cursor = self._execute(
            """
            INSERT INTO job_matches (
                user_id, job_title, company, job_description, match_score, match_reasons_json,
                salary_range, location, job_url, status, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                user_id,
                title,
                company,
                description,
                _coerce_score(match_score),
                _dumps(_coerce_reasons(match_reasons)),
                salary,
                location,
                url,
                JobStatus.INTERESTED.value,
                now,
                now,
            ),
        )
        return self.get_job_match(user_id, int(cursor.lastrowid))

    def get_job_match(self, user_id: str, job_id: int) -> dict[str, Any]:
        row = self._fetchone(
            "SELECT * FROM job_matches WHERE id = ? AND user_id = ?",
            (job_id, user_id),
        )
        if row is None:
            raise RecordNotFound(f"Job match {job_id} not found.")
        return self._job_row(row)

    def list_job_matches(self, user_id: str) -> list[dict[str, Any]]:
        rows = self._fetchall(
            "SELECT * FROM job_matches WHERE user_id = ? ORDER BY created_at DESC, id DESC",
            (user_id,),
        )
        return [self._job_row(row) for row in rows]

    def update_job_status(self, user_id: str, job_id: int, status: JobStatus) -> dict[str, Any]:
        select = "SELECT * FROM job_matches WHERE id = ? AND user_id = ?"
        with self._lock:
            conn = self._connection()
            row = conn.execute(select, (job_id, user_id)).fetchone()
            if row is None:
                raise RecordNotFound(f"Job match {job_id} not found.")
            current = JobStatus(row["status"])
            check_transition(current, status)
            if current == status:
                return self._job_row(row)
            cursor = conn.execute(
                """
                UPDATE job_matches SET status = ?, updated_at = ?
                WHERE id = ? AND user_id = ? AND status = ?
                """,
                (status.value, _utc_now(), job_id, user_id, current.value),
            )
            if cursor.rowcount == 0:
                raise InvalidStatusTransition(current, status)
            row = conn.execute(select, (job_id, user_id)).fetchone()

        logger.info(
            "job_status_updated job_id=%s from=%s to=%s",
            job_id,
            current.value,
            status.value,
        )
        return self._job_row(row)

    # Profiles

    def get_profile(self, user_id: str) -> dict[str, Any]:
        row = self._fetchone("SELECT * FROM profiles WHERE user_id = ?", (user_id,))
        if row is None:
            raise RecordNotFound("Profile not found.")
        profile = {field: row[field] for field in PROFILE_FIELDS}
        profile["user_id"] = row["user_id"]
        profile["updated_at"] = datetime.fromisoformat(row["updated_at"])
        return profile

    def upsert_profile(self, user_id: str, fields: dict[str, Any]) -> dict[str, Any]:
        values = {field: fields.get(field) for field in PROFILE_FIELDS}
        columns = ", ".join(PROFILE_FIELDS)
        placeholders = ", ".join("?" for _ in PROFILE_FIELDS)
        updates = ", ".join(f"{field} = excluded.{field}" for field in PROFILE_FIELDS)
        self._execute(
            f"""
            INSERT INTO profiles (user_id, {columns}, updated_at)
            VALUES (?, {placeholders}, ?)
            ON CONFLICT (user_id) DO UPDATE SET {updates}, updated_at = excluded.updated_at
            """,
            (user_id, *values.values(), _utc_now()),
        )
        return self.get_profile(user_id)


@lru_cache(maxsize=1)
def get_store() -> RecordStore:
    return RecordStore(settings.database_path)
