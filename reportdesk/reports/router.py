"""
Handles report creation, retrieval, status changes and deletion.
Reads are public; mutations require a signed-in user.
"""

from fastapi import APIRouter, Depends, Query
from typing import List
from reportdesk.reports import utils, schemas
from reportdesk.authentication.schemas import UserContext
from reportdesk.authentication.security import get_current_user

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.post("/", response_model=schemas.Report, status_code=201)
def submit_report(report: schemas.ReportCreate, user: UserContext = Depends(get_current_user)):
    """Submit a new report owned by the current user."""
    return utils.create_report(report, user_id=user.user_id)


@router.get("/", response_model=List[schemas.Report])
def get_all_reports():
    """Retrieve all reports, newest first."""
    return utils.list_reports()


@router.get("/summary", response_model=schemas.ReportSummary)
def get_summary():
    """Report counts per status."""
    return utils.summarize_reports()


@router.get("/{report_id}", response_model=schemas.Report)
def get_report(
    report_id: str,
    include_comments: bool = Query(False, description="Embed the comment thread"),
):
    """Retrieve a specific report."""
    return utils.get_report(report_id, include_comments=include_comments)


@router.patch("/{report_id}/status", response_model=schemas.Report)
def update_report_status(
    report_id: str,
    update: schemas.ReportStatusUpdate,
    user: UserContext = Depends(get_current_user),
):
    """Move a report to another status."""
    return utils.update_report_status(report_id, update.status)


@router.delete("/{report_id}")
def delete_report(report_id: str, user: UserContext = Depends(get_current_user)):
    """Delete a report."""
    utils.delete_report(report_id)
    return {"message": f"Report {report_id} deleted."}
