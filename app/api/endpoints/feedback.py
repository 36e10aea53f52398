# app/api/endpoints/feedback.py
import logging
from datetime import timezone
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import ApiError
from app.models.schemas import FeedbackCreate, FeedbackResponse
from app.models.sql_models import Feedback, utcnow
from app.services.retention import trim_feedback

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[FeedbackResponse])
def list_feedback(db: Session = Depends(get_db)):
    return db.query(Feedback).order_by(Feedback.created_at.desc(), Feedback.id.desc()).all()


@router.post("", response_model=FeedbackResponse, status_code=201)
def create_feedback(payload: FeedbackCreate, db: Session = Depends(get_db)):
    if not (payload.name and payload.name.strip()) or not (payload.message and payload.message.strip()):
        raise ApiError(400, "Name and message are required")

    created_at = payload.created_at or utcnow()
    if created_at.tzinfo is not None:
        created_at = created_at.astimezone(timezone.utc).replace(tzinfo=None)

    entry = Feedback(
        name=payload.name.strip(),
        email=payload.email or None,
        type=payload.type,
        message=payload.message.strip(),
        rating=payload.rating,
        created_at=created_at,
    )
    db.add(entry)
    db.commit()
    db.refresh(entry)
    logger.info("Feedback %s received (%s, rating=%s)", entry.id, entry.type, entry.rating)

    # Snapshot first, a back-dated entry can be the one the cap evicts
    created = FeedbackResponse.model_validate(entry)
    trim_feedback(db)
    return created
