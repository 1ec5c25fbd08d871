"""
Data-access functions for the reports table. Each call validates its input,
then issues exactly one query against the store.
"""

import logging
from typing import Dict, List, Optional, Union

from reportdesk.database.supabase_client import execute, get_supabase_client
from reportdesk.errors.exceptions import NotFoundError, StoreError, ValidationError
from reportdesk.reports import schemas

logger = logging.getLogger(__name__)

TABLE = "reports"
REPORT_COLUMNS = "*, profiles(full_name)"
REPORT_WITH_COMMENTS_COLUMNS = "*, profiles(full_name), comments(*, profiles(full_name))"

VALID_STATUSES = {s.value for s in schemas.ReportStatus}


def _clean(value: Optional[str]) -> Optional[str]:
    """Trim a free-text field; blank becomes None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def _require_id(value: Optional[str], name: str = "Report id") -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{name} is required")
    return str(value).strip()


def _check_status(status: Union[str, schemas.ReportStatus, None]) -> str:
    value = status.value if isinstance(status, schemas.ReportStatus) else status
    if value not in VALID_STATUSES:
        allowed = ", ".join(s.value for s in schemas.ReportStatus)
        raise ValidationError(f"Invalid status '{value}'. Expected one of: {allowed}")
    return value


def create_report(report: schemas.ReportCreate, user_id: str) -> Dict:
    """Insert a new report owned by ``user_id`` and return the stored row."""
    title = _clean(report.title)
    if not title:
        raise ValidationError("Title is required")
    user_id = _require_id(user_id, "User id")

    row = {
        "title": title,
        "description": _clean(report.description),
        "location": _clean(report.location),
        "status": _check_status(report.status),
        "user_id": user_id,
    }
    query = get_supabase_client().table(TABLE).insert(row)
    created = execute(query, "create report")
    if not created:
        raise StoreError("Store returned no row for the created report")

    logger.info(f"Created report {created[0].get('id')} for user {user_id}")
    return created[0]


def list_reports() -> List[Dict]:
    """All reports, newest first."""
    query = (
        get_supabase_client()
        .table(TABLE)
        .select(REPORT_COLUMNS)
        .order("created_at", desc=True)
    )
    return execute(query, "list reports")


def get_report(report_id: str, include_comments: bool = False) -> Dict:
    """Fetch a single report, optionally with its comment thread."""
    report_id = _require_id(report_id)
    columns = REPORT_WITH_COMMENTS_COLUMNS if include_comments else REPORT_COLUMNS

    query = get_supabase_client().table(TABLE).select(columns).eq("id", report_id)
    rows = execute(query, "load report")
    if not rows:
        raise NotFoundError("Report", report_id)

    report = rows[0]
    if include_comments:
        report["comments"] = sorted(report.get("comments") or [], key=lambda c: c.get("created_at", ""))
    return report


def update_report_status(report_id: str, status: Union[str, schemas.ReportStatus]) -> Dict:
    """Set the status of a report (open/in_progress/resolved/closed)."""
    report_id = _require_id(report_id)
    status = _check_status(status)

    query = get_supabase_client().table(TABLE).update({"status": status}).eq("id", report_id)
    rows = execute(query, "update report status")
    if not rows:
        raise NotFoundError("Report", report_id)

    logger.info(f"Report {report_id} status set to {status}")
    return rows[0]


def delete_report(report_id: str) -> bool:
    """Delete a report by ID. Comments are left to the store's cascade rules."""
    report_id = _require_id(report_id)

    query = get_supabase_client().table(TABLE).delete().eq("id", report_id)
    rows = execute(query, "delete report")
    if not rows:
        raise NotFoundError("Report", report_id)

    logger.info(f"Deleted report {report_id}")
    return True


def summarize_reports() -> schemas.ReportSummary:
    """Count reports per status."""
    query = get_supabase_client().table(TABLE).select("status")
    rows = execute(query, "summarize reports")

    counts = {status: 0 for status in VALID_STATUSES}
    for row in rows:
        if row.get("status") in counts:
            counts[row["status"]] += 1
    return schemas.ReportSummary(total_reports=len(rows), **counts)
