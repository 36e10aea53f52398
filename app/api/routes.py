# app/api/routes.py
from fastapi import APIRouter

from app.api.endpoints import auth, email, feedback, menu, orders

router = APIRouter(prefix="/api")

router.include_router(menu.router, prefix="/menu", tags=["Menu"])
router.include_router(orders.router, prefix="/orders", tags=["Orders"])
router.include_router(feedback.router, prefix="/feedback", tags=["Feedback"])
router.include_router(auth.router, prefix="/auth", tags=["Auth"])
router.include_router(email.router, tags=["Email"])


@router.get("/health")
def health():
    return {"status": "ok"}
