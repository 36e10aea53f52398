# app/api/endpoints/orders.py
import json
import math
import logging
from typing import List

from fastapi import APIRouter, BackgroundTasks, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import ApiError, NotFoundError
from app.models.schemas import OrderCreate, OrderResponse, OrderUpdate, SuccessResponse
from app.models.sql_models import Order, utcnow
from app.services.notifier import notify_new_order
from app.services.retention import purge_expired_orders

logger = logging.getLogger(__name__)

router = APIRouter()

# Kitchen workflow used by the dashboard buttons. Status stays free text.
STATUS_NEW = "yeni"
STATUS_PREPARING = "hazırlanır"
STATUS_READY = "hazırdır"
STATUS_DELIVERED = "təhvil verilib"
ORDER_STATUSES = (STATUS_NEW, STATUS_PREPARING, STATUS_READY, STATUS_DELIVERED)


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def get_order_or_404(order_id: int, db: Session) -> Order:
    order = db.get(Order, order_id)
    if order is None:
        raise NotFoundError("Order not found")
    return order


@router.get("", response_model=List[OrderResponse])
def list_orders(db: Session = Depends(get_db)):
    purge_expired_orders(db)
    return db.query(Order).order_by(Order.created_at.desc(), Order.id.desc()).all()


@router.post("", response_model=OrderResponse, status_code=201)
def create_order(payload: OrderCreate, background_tasks: BackgroundTasks, db: Session = Depends(get_db)):
    if (
        not payload.items
        or _is_blank(payload.customer_name)
        or _is_blank(payload.table_number)
        or _is_blank(payload.total_price)
    ):
        raise ApiError(400, "All fields are required")

    try:
        total = float(payload.total_price)
    except (TypeError, ValueError):
        raise ApiError(400, "Total price invalid")
    if not math.isfinite(total) or total < 0:
        raise ApiError(400, "Total price invalid")

    order = Order(
        items=json.dumps([item.model_dump() for item in payload.items], ensure_ascii=False),
        customer_name=payload.customer_name.strip(),
        table_number=str(payload.table_number).strip(),
        table_description=payload.table_description,
        total_price=total,
        status=STATUS_NEW,
        created_at=utcnow(),
    )
    db.add(order)
    db.commit()
    db.refresh(order)
    logger.info("Order %s placed for table %s (%.2f)", order.id, order.table_number, total)

    background_tasks.add_task(notify_new_order, order)
    return order


@router.put("/{order_id}", response_model=OrderResponse)
def update_order(order_id: int, payload: OrderUpdate, db: Session = Depends(get_db)):
    order = get_order_or_404(order_id, db)
    if _is_blank(payload.status) and payload.table_description is None:
        raise ApiError(400, "Status is required")

    if not _is_blank(payload.status):
        status = payload.status.strip()
        if status not in ORDER_STATUSES:
            logger.info("Order %s moved to non-standard status %r", order_id, status)
        order.status = status
    if payload.table_description is not None:
        order.table_description = payload.table_description
    db.commit()
    db.refresh(order)
    return order


@router.delete("/{order_id}", response_model=SuccessResponse)
def delete_order(order_id: int, db: Session = Depends(get_db)):
    order = get_order_or_404(order_id, db)
    db.delete(order)
    db.commit()
    logger.info("Order %s deleted", order_id)
    return SuccessResponse()
