from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from ..models import Report

logger = logging.getLogger(__name__)


def add_report(db: Session, user_id: int, description: str) -> Report:
    report = Report(user_id=user_id, description=description)
    db.add(report)
    db.commit()
    db.refresh(report)
    logger.info(f"User {user_id} filed report {report.id}")
    return report
