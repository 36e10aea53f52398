# main.py
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import router as api_router
from app.core.config import settings
from app.core.database import Base, SessionLocal, engine
from app.core.errors import register_error_handlers
from app.core.log_config import setup_logging
from app.services.seed import seed_default_menu

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Local runs work without `alembic upgrade head`
    Base.metadata.create_all(bind=engine)
    if settings.SEED_DEFAULT_MENU:
        db = SessionLocal()
        try:
            seed_default_menu(db)
        finally:
            db.close()
    logger.info("%s started", settings.PROJECT_NAME)
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Menu, orders, feedback and admin API for the restaurant web app",
    version="1.0",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials="*" not in settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_error_handlers(app)

app.include_router(api_router)


@app.get("/")
def read_root():
    return {"status": "Restaurant backend running"}

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=settings.PORT, reload=True)
