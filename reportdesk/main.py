"""
FastAPI application: JSON API for reports, comments and profiles plus the
server-rendered dashboard.
"""

import logging

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from reportdesk.config import get_settings
from reportdesk.logging_config import configure_logging
from reportdesk.errors.handlers import register_exception_handlers
from reportdesk.authentication.router import router as auth_router
from reportdesk.reports.router import router as reports_router
from reportdesk.comments.router import router as comments_router
from reportdesk.profiles.router import router as profiles_router
from reportdesk.dashboard.router import router as dashboard_router

settings = get_settings()
configure_logging(log_level=settings.log_level, json_output=settings.json_logs)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Reports Dashboard",
    version="1.0.0",
    description="Reports and threaded comments backed by a hosted Supabase project.",
)

register_exception_handlers(app)

app.include_router(auth_router)
app.include_router(reports_router)
app.include_router(comments_router)
app.include_router(profiles_router)
app.include_router(dashboard_router)


@app.get("/", include_in_schema=False)
def root():
    return RedirectResponse("/dashboard")


@app.get("/health")
def health():
    return {"status": "ok"}
