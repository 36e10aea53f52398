# app/api/endpoints/menu.py
import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import NotFoundError
from app.models.schemas import MenuItemCreate, MenuItemResponse, MenuItemUpdate
from app.models.sql_models import MenuItem

logger = logging.getLogger(__name__)

router = APIRouter()

# Columns a null in a partial update must not clear
REQUIRED_FIELDS = ("name", "price")


def get_menu_item_or_404(item_id: int, db: Session) -> MenuItem:
    item = db.get(MenuItem, item_id)
    if item is None:
        raise NotFoundError("Menu item not found")
    return item


@router.get("", response_model=List[MenuItemResponse])
def list_menu(db: Session = Depends(get_db)):
    return db.query(MenuItem).order_by(MenuItem.category, MenuItem.id).all()


@router.get("/{item_id}", response_model=MenuItemResponse)
def get_menu_item(item_id: int, db: Session = Depends(get_db)):
    return get_menu_item_or_404(item_id, db)


@router.post("", response_model=MenuItemResponse, status_code=201)
def create_menu_item(payload: MenuItemCreate, db: Session = Depends(get_db)):
    item = MenuItem(**payload.model_dump())
    db.add(item)
    db.commit()
    db.refresh(item)
    logger.info("Menu item %s created: %s", item.id, item.name)
    return item


@router.put("/{item_id}", response_model=MenuItemResponse)
def update_menu_item(item_id: int, payload: MenuItemUpdate, db: Session = Depends(get_db)):
    item = get_menu_item_or_404(item_id, db)
    for field, value in payload.model_dump(exclude_unset=True).items():
        if value is None and field in REQUIRED_FIELDS:
            continue
        setattr(item, field, value)
    db.commit()
    db.refresh(item)
    return item


@router.delete("/{item_id}", response_model=MenuItemResponse)
def delete_menu_item(item_id: int, db: Session = Depends(get_db)):
    item = get_menu_item_or_404(item_id, db)
    deleted = MenuItemResponse.model_validate(item)
    db.delete(item)
    db.commit()
    logger.info("Menu item %s deleted", item_id)
    return deleted
