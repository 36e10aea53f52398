# app/services/retention.py
"""Housekeeping rules for orders and feedback.

Orders only matter for the current service day, so anything older than the
retention window is deleted before the order list is served. Feedback is a
rolling window of the newest entries; inserting past the cap evicts the
oldest rows.
"""
import logging
from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy.orm import Session

from app.core.config import settings
from app.models.sql_models import Feedback, Order, utcnow

logger = logging.getLogger(__name__)


def order_cutoff(now: Optional[datetime] = None, hours: Optional[int] = None) -> datetime:
    hours = settings.ORDER_RETENTION_HOURS if hours is None else hours
    return (now or utcnow()) - timedelta(hours=hours)


def purge_expired_orders(db: Session, now: Optional[datetime] = None, hours: Optional[int] = None) -> int:
    """Delete orders created before the retention cutoff. Returns how many went."""
    cutoff = order_cutoff(now, hours)
    deleted = (
        db.query(Order)
        .filter(Order.created_at < cutoff)
        .delete(synchronize_session=False)
    )
    db.commit()
    if deleted:
        logger.info("Purged %d orders created before %s", deleted, cutoff.isoformat())
    return deleted


def trim_feedback(db: Session, limit: Optional[int] = None) -> int:
    """Keep only the newest ``limit`` feedback rows, oldest by createdAt go first."""
    limit = settings.FEEDBACK_MAX_ENTRIES if limit is None else limit
    total = db.query(Feedback).count()
    excess = total - limit
    if excess <= 0:
        return 0

    oldest_ids = [
        row.id
        for row in db.query(Feedback.id)
        .order_by(Feedback.created_at.asc(), Feedback.id.asc())
        .limit(excess)
        .all()
    ]
    db.query(Feedback).filter(Feedback.id.in_(oldest_ids)).delete(synchronize_session=False)
    db.commit()
    logger.info("Evicted %d old feedback entries (cap %d)", len(oldest_ids), limit)
    return len(oldest_ids)
