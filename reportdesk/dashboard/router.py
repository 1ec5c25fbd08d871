"""
Server-rendered dashboard: report list, report creation form and the comment
thread of a single report. Every action is a form POST that redirects back to
the page with a notification in the query string, except a failed report or
comment submission, which renders its form again with the submitted values.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Form, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from reportdesk.authentication.schemas import UserContext
from reportdesk.authentication.security import get_dashboard_user
from reportdesk.comments import utils as comment_utils
from reportdesk.errors.exceptions import ReportDeskError
from reportdesk.reports import schemas as report_schemas
from reportdesk.reports import utils as report_utils

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

STATUS_LABELS = {
    "open": "Open",
    "in_progress": "In Progress",
    "resolved": "Resolved",
    "closed": "Closed",
}


def _redirect(request: Request, **params) -> RedirectResponse:
    url = request.url_for("dashboard").include_query_params(
        **{k: v for k, v in params.items() if v is not None}
    )
    return RedirectResponse(str(url), status_code=303)


def _status_counts(reports: List[Dict]) -> Dict[str, int]:
    counts = {status: 0 for status in STATUS_LABELS}
    for report in reports:
        if report.get("status") in counts:
            counts[report["status"]] += 1
    return counts


# ---------------- Page ----------------
@router.get("", response_class=HTMLResponse, name="dashboard")
def dashboard(
    request: Request,
    report: Optional[str] = Query(None, description="Show the comment thread of this report"),
    tab: str = Query("reports", description="reports or create"),
    toast: Optional[str] = None,
    variant: str = "default",
    user: UserContext = Depends(get_dashboard_user),
):
    """Thread view when a report is selected, otherwise the list/create tabs."""
    notice = {"message": toast, "variant": variant} if toast else None

    if report:
        return _thread_page(request, report, notice, user)

    return _index_page(request, "create" if tab == "create" else "reports", notice, user)


def _failure(message: str) -> Dict:
    return {"message": message, "variant": "destructive"}


def _index_page(
    request: Request,
    tab: str,
    notice: Optional[Dict],
    user: UserContext,
    draft: Optional[Dict] = None,
):
    reports: List[Dict] = []
    if tab == "reports":
        try:
            reports = report_utils.list_reports()
        except ReportDeskError:
            notice = _failure("Failed to load reports")

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "user": user,
            "reports": reports,
            "counts": _status_counts(reports),
            "tab": tab,
            "statuses": STATUS_LABELS,
            "notice": notice,
            "draft": draft or {},
        },
    )


def _thread_page(
    request: Request,
    report_id: str,
    notice: Optional[Dict],
    user: UserContext,
    draft: str = "",
):
    try:
        selected = report_utils.get_report(report_id)
    except ReportDeskError:
        return _redirect(request, toast="Failed to load report", variant="destructive")

    comments: List[Dict] = []
    try:
        comments = comment_utils.get_comments_by_report(report_id)
    except ReportDeskError:
        notice = _failure("Failed to load comments")

    return templates.TemplateResponse(
        request,
        "comments.html",
        {
            "user": user,
            "report": selected,
            "comments": comments,
            "statuses": STATUS_LABELS,
            "notice": notice,
            "draft": draft,
        },
    )


# ---------------- Actions ----------------
# Failed submissions re-render the form with what the user typed; only a
# successful one redirects and clears it.
@router.post("/reports", name="dashboard_create_report")
def create_report(
    request: Request,
    title: str = Form(""),
    description: str = Form(""),
    location: str = Form(""),
    status: str = Form("open"),
    user: UserContext = Depends(get_dashboard_user),
):
    draft = {"title": title, "description": description, "location": location, "status": status}
    if not title.strip():
        return _index_page(request, "create", _failure("Title is required"), user, draft)
    if status not in STATUS_LABELS:
        return _index_page(request, "create", _failure("Invalid status"), user, draft)

    try:
        report_utils.create_report(
            report_schemas.ReportCreate(
                title=title,
                description=description or None,
                location=location or None,
                status=status,
            ),
            user_id=user.user_id,
        )
    except ReportDeskError as e:
        logger.warning(f"Dashboard could not create report: {e.message}")
        return _index_page(request, "create", _failure("Failed to create report"), user, draft)

    return _redirect(request, toast="Report created successfully")


@router.post("/reports/{report_id}/status", name="dashboard_update_status")
def update_status(
    request: Request,
    report_id: str,
    status: str = Form(...),
    user: UserContext = Depends(get_dashboard_user),
):
    try:
        report_utils.update_report_status(report_id, status)
    except ReportDeskError as e:
        logger.warning(f"Dashboard could not update report {report_id}: {e.message}")
        return _redirect(request, toast="Failed to update status", variant="destructive")

    return _redirect(request, toast="Status updated")


@router.post("/reports/{report_id}/comments", name="dashboard_add_comment")
def add_comment(
    request: Request,
    report_id: str,
    content: str = Form(""),
    user: UserContext = Depends(get_dashboard_user),
):
    if not content.strip():
        return _thread_page(request, report_id, _failure("Comment cannot be empty"), user, content)

    try:
        comment_utils.add_comment(report_id, content, author=user.user_id)
    except ReportDeskError as e:
        logger.warning(f"Dashboard could not add comment to {report_id}: {e.message}")
        return _thread_page(request, report_id, _failure("Failed to add comment"), user, content)

    return _redirect(request, report=report_id, toast="Comment added successfully")
