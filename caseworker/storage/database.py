"""Database storage layer using SQLite."""
import logging
import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Optional
from caseworker.exceptions import TaskStoreError
from caseworker.models.task import Task, TaskStatus

logger = logging.getLogger(__name__)


class TaskStore:
    """Storage for tasks."""

    def __init__(self, db_path: str = "tasks.db"):
        self.db_path = db_path
        self._init_db()

    def _init_db(self):
        """Initialize database tables."""
        try:
            with self._get_conn() as conn:
                conn.execute("""
                    CREATE TABLE IF NOT EXISTS tasks (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        title TEXT NOT NULL,
                        description TEXT,
                        status TEXT NOT NULL,
                        due_date TEXT NOT NULL,
                        created_at TEXT NOT NULL,
                        updated_at TEXT NOT NULL
                    )
                """)
                conn.commit()
        except sqlite3.Error as e:
            raise TaskStoreError(f"Unable to initialise task store at {self.db_path}") from e

    @contextmanager
    def _get_conn(self):
        """Get database connection."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
        finally:
            conn.close()

    def save(self, task: Task) -> Task:
        """
        Insert a draft task.

        Assigns a new id and sets created_at and updated_at to the same
        current UTC time.

        Returns:
            The saved task
        """
        now = datetime.now(timezone.utc)
        try:
            with self._get_conn() as conn:
                cursor = conn.execute("""
                    INSERT INTO tasks (title, description, status, due_date, created_at, updated_at)
                    VALUES (?, ?, ?, ?, ?, ?)
                """, (
                    task.title,
                    task.description,
                    task.status.value,
                    task.due_date.isoformat(),
                    now.isoformat(),
                    now.isoformat(),
                ))
                conn.commit()
                task_id = cursor.lastrowid
        except sqlite3.Error as e:
            logger.error("Failed to save task", exc_info=True)
            raise TaskStoreError("Failed to save task") from e

        return task.model_copy(update={"id": task_id, "created_at": now, "updated_at": now})

    def get(self, task_id: int) -> Optional[Task]:
        """Get a task by id."""
        try:
            with self._get_conn() as conn:
                row = conn.execute("SELECT * FROM tasks WHERE id = ?", (task_id,)).fetchone()
        except sqlite3.Error as e:
            raise TaskStoreError(f"Failed to read task {task_id}") from e

        if not row:
            return None

        return Task(
            id=row["id"],
            title=row["title"],
            description=row["description"],
            status=TaskStatus(row["status"]),
            due_date=datetime.fromisoformat(row["due_date"]),
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )

    def count(self) -> int:
        """Number of stored tasks."""
        try:
            with self._get_conn() as conn:
                return conn.execute("SELECT COUNT(*) FROM tasks").fetchone()[0]
        except sqlite3.Error as e:
            raise TaskStoreError("Failed to count tasks") from e
