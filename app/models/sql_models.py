# app/models/sql_models.py
import json
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Numeric, Text, DateTime
from app.core.database import Base


def utcnow() -> datetime:
    # Naive UTC, SQLite drops tzinfo on the way back anyway
    return datetime.now(timezone.utc).replace(tzinfo=None)


class MenuItem(Base):
    __tablename__ = "menu_items"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    price = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    description = Column(Text)
    category = Column(String(100), index=True)
    image_url = Column(String(500))


class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    items = Column(Text, nullable=False)  # JSON list of {name, quantity, price}
    customer_name = Column(String(200), nullable=False)
    table_number = Column(String(50), nullable=False)
    table_description = Column(String(500))
    total_price = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    status = Column(String(50), nullable=False, default="yeni")
    created_at = Column(DateTime, nullable=False, default=utcnow, index=True)

    @property
    def item_list(self) -> list:
        return json.loads(self.items) if self.items else []


class Feedback(Base):
    __tablename__ = "feedback"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    email = Column(String(320))
    type = Column(String(20), nullable=False, default="comment")
    message = Column(Text, nullable=False)
    rating = Column(Integer)
    created_at = Column(DateTime, nullable=False, default=utcnow, index=True)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(150), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)  # argon2 hash
    language = Column(String(10), default="en")
    role = Column(String(50), default="admin")
