# app/models/schemas.py
from datetime import datetime, timezone
from typing import Annotated, List, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, Field, PlainSerializer


def _as_utc_iso(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat().replace("+00:00", "Z")


# Stored naive UTC, sent with an explicit Z so browsers don't read it as local time
UtcDatetime = Annotated[datetime, PlainSerializer(_as_utc_iso, return_type=str)]

FeedbackType = Literal["comment", "suggestion", "complaint"]


# --- MENU ---
class MenuItemCreate(BaseModel):
    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0, allow_inf_nan=False)
    description: Optional[str] = None
    category: Optional[str] = None
    image_url: Optional[str] = Field(None, validation_alias=AliasChoices("imageUrl", "image_url", "image"))


class MenuItemUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    price: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    description: Optional[str] = None
    category: Optional[str] = None
    image_url: Optional[str] = Field(None, validation_alias=AliasChoices("imageUrl", "image_url", "image"))


class MenuItemResponse(BaseModel):
    id: int
    name: str
    price: float
    description: Optional[str] = None
    category: Optional[str] = None
    image_url: Optional[str] = Field(None, serialization_alias="imageUrl")

    model_config = {"from_attributes": True}


# --- ORDERS ---
class OrderItem(BaseModel):
    name: str
    quantity: int = Field(..., ge=1)
    price: float = Field(..., ge=0, allow_inf_nan=False)


class OrderCreate(BaseModel):
    # Presence is checked by the endpoint so the error matches the other clients
    items: Optional[List[OrderItem]] = None
    customer_name: Optional[str] = Field(None, validation_alias=AliasChoices("customerName", "customer_name"))
    table_number: Optional[Union[str, int]] = Field(None, validation_alias=AliasChoices("tableNumber", "table_number"))
    table_description: Optional[str] = Field(
        None, validation_alias=AliasChoices("tableDescription", "table_description")
    )
    total_price: Optional[Union[float, str]] = Field(None, validation_alias=AliasChoices("totalPrice", "total_price"))


class OrderUpdate(BaseModel):
    status: Optional[str] = None
    table_description: Optional[str] = Field(
        None, validation_alias=AliasChoices("tableDescription", "table_description")
    )


class OrderResponse(BaseModel):
    id: int
    items: List[OrderItem] = Field(validation_alias="item_list")
    customer_name: str = Field(serialization_alias="customerName")
    table_number: str = Field(serialization_alias="tableNumber")
    table_description: Optional[str] = Field(None, serialization_alias="tableDescription")
    total_price: float = Field(serialization_alias="totalPrice")
    status: str
    created_at: UtcDatetime = Field(serialization_alias="createdAt")

    model_config = {"from_attributes": True}


# --- FEEDBACK ---
class FeedbackCreate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    type: FeedbackType = "comment"
    message: Optional[str] = None
    rating: Optional[int] = Field(None, ge=1, le=5)
    created_at: Optional[datetime] = Field(None, validation_alias=AliasChoices("createdAt", "created_at"))


class FeedbackResponse(BaseModel):
    id: int
    name: str
    email: Optional[str] = None
    type: str
    message: str
    rating: Optional[int] = None
    created_at: UtcDatetime = Field(serialization_alias="createdAt")

    model_config = {"from_attributes": True}


# --- AUTH ---
class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


class RegisterRequest(LoginRequest):
    language: Optional[str] = "en"


class UserResponse(BaseModel):
    id: int
    username: str
    language: Optional[str] = None
    role: Optional[str] = None

    model_config = {"from_attributes": True}


class AuthResponse(BaseModel):
    token: str
    user: UserResponse


# --- EMAIL ---
class ThankYouEmailRequest(BaseModel):
    email: Optional[str] = None
    name: Optional[str] = None


class SuccessResponse(BaseModel):
    success: bool = True
