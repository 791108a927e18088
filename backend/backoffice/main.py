from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from backoffice.api.v1.api import api_router
from backoffice.core.config import settings
from backoffice.core.logger import setup_logger
from backoffice.database.database import init_db

logger = setup_logger("main")

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Back-office API for accounts, products, prices, orders and notifications",
    version="1.0.0",
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")

@app.on_event("startup")
def on_startup():
    logger.info("Starting application, ensuring database tables exist...")
    init_db()
    logger.info("Database ready")
