import logging

from fastapi import FastAPI
from contextlib import asynccontextmanager
from app.database import create_db_and_tables
from app.api import accounts, auth, dashboard, expenses, income, profile, recommendations
from app.core.config import CORS_ORIGINS, LOG_LEVEL
from app.core.logging import setup_logging
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(LOG_LEVEL)
    create_db_and_tables()
    logger.info("Base de datos lista")
    yield

app = FastAPI(title="Finances personnelles", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(profile.router)
app.include_router(accounts.router)
app.include_router(income.router)
app.include_router(expenses.router)
app.include_router(dashboard.router)
app.include_router(recommendations.router)

@app.get("/")
def root():
    return {"message": "Servidor de finanzas personales"}
