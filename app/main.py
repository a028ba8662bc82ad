# app/main.py
# Role: Application entry point for the expense tracker.
#       Configures logging, initializes the database on startup,
#       mounts static assets, and registers all route modules.

"""
Main FastAPI app for the expense tracker.

Here we only:
- configure logging
- create the FastAPI app (tables are created on startup)
- set up middleware and static files
- include route modules

Run with:  uvicorn app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

import config
from db import init_db
from app.deps import STATIC_DIR
from app.middleware import setup_middleware
from app.routes_root import router as root_router
from app.routes_expenses import router as expenses_router
from app.routes_dashboard import router as dashboard_router
from app.routes_monthly import router as monthly_router


# -------------------------------------------------------------------
# Logging
# -------------------------------------------------------------------

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# App & DB setup
# -------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create database tables (only if they don't exist yet)
    init_db()
    logger.info("Expense tracker started")
    yield
    logger.info("Expense tracker shutting down")


# FastAPI application instance
app = FastAPI(title="Expense Tracker", lifespan=lifespan)

setup_middleware(app)

# Serve static files (CSS/JS) from /static
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

# -------------------------------------------------------------------
# Include routers
# -------------------------------------------------------------------

# Expense list (landing page) + health check
app.include_router(root_router)

# Add / edit / update / delete
app.include_router(expenses_router)

# Totals by description
app.include_router(dashboard_router)

# Monthly report page + chart data
app.include_router(monthly_router)
