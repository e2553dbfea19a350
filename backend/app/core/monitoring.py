"""Health and version information for the ambient endpoints."""

from __future__ import annotations

import subprocess
import time
from datetime import datetime
from importlib.metadata import PackageNotFoundError, version
from typing import Any

from sqlalchemy import text
from sqlalchemy.orm import Session

DISTRIBUTION_NAME = "trainer-coaching-api"

# Server version query per SQLAlchemy dialect name
VERSION_QUERIES = {
    "postgresql": "SELECT version()",
    "sqlite": "SELECT sqlite_version()",
    "mysql": "SELECT version()",
}


def _git(*args: str) -> str:
    try:
        result = subprocess.run(
            ["git", *args],
            capture_output=True,
            text=True,
            timeout=5
        )
        return result.stdout.strip() if result.returncode == 0 else "unknown"
    except (OSError, subprocess.SubprocessError):
        return "unknown"


def get_git_revision() -> str:
    """Get the current Git revision hash."""
    return _git("rev-parse", "--short", "HEAD")


def get_git_branch() -> str:
    """Get the current Git branch."""
    return _git("branch", "--show-current")


def get_app_version() -> str:
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "1.0.0"


def check_database_health(db: Session) -> dict[str, Any]:
    """Run a trivial query and report connectivity, server version and latency."""
    started = time.perf_counter()
    try:
        db.execute(text("SELECT 1")).scalar()
    except Exception as e:
        return {
            "status": "unhealthy",
            "connected": False,
            "error": str(e)
        }
    elapsed_ms = round((time.perf_counter() - started) * 1000, 2)

    dialect = db.get_bind().dialect.name
    db_version = "unknown"
    query = VERSION_QUERIES.get(dialect)
    if query:
        try:
            db_version = db.execute(text(query)).scalar()
        except Exception:
            db_version = "unknown"

    return {
        "status": "healthy",
        "connected": True,
        "dialect": dialect,
        "version": db_version,
        "response_time_ms": elapsed_ms,
    }


def get_version_info() -> dict[str, Any]:
    """Get application version information."""
    return {
        "git_commit": get_git_revision(),
        "git_branch": get_git_branch(),
        "build_date": datetime.utcnow().isoformat(),
        "version": get_app_version(),
    }
