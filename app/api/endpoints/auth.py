# app/api/endpoints/auth.py
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import ApiError
from app.core.security import create_access_token, hash_password, verify_password
from app.models.schemas import AuthResponse, LoginRequest, RegisterRequest, SuccessResponse, UserResponse
from app.models.sql_models import User

logger = logging.getLogger(__name__)

router = APIRouter()


def _auth_response(user: User) -> AuthResponse:
    token = create_access_token(user.id, user.username, user.role)
    return AuthResponse(token=token, user=UserResponse.model_validate(user))


@router.post("/register", response_model=AuthResponse, status_code=201)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    if not payload.username or not payload.password:
        raise ApiError(400, "Username and password required")

    if db.query(User).filter(User.username == payload.username).first():
        raise ApiError(409, "Username already exists")

    user = User(
        username=payload.username,
        password=hash_password(payload.password),
        language=payload.language or "en",
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration
        db.rollback()
        raise ApiError(409, "Username already exists")
    db.refresh(user)
    logger.info("Registered user %s", user.username)
    return _auth_response(user)


@router.post("/login", response_model=AuthResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    if not payload.username or not payload.password:
        raise ApiError(400, "Username and password required")

    user = db.query(User).filter(User.username == payload.username).first()
    if not user or not verify_password(payload.password, user.password):
        logger.info("Failed login for %s", payload.username)
        raise ApiError(401, "Invalid credentials")
    return _auth_response(user)


@router.post("/logout", response_model=SuccessResponse)
def logout():
    # Tokens are stateless, the client just drops its copy
    return SuccessResponse()
