import logging
from typing import Dict, List, Optional
from reportdesk.database.supabase_client import execute, get_supabase_client
from reportdesk.errors.exceptions import NotFoundError, StoreError, ValidationError

logger = logging.getLogger(__name__)

TABLE = "comments"
COMMENT_COLUMNS = "*, profiles(full_name)"


def _require(value: Optional[str], name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{name} is required")
    return str(value).strip()


def add_comment(report_id: str, content: str, author: str) -> Dict:
    """Attach a comment to a report. Content is stored trimmed."""
    content = _require(content, "Comment content")
    report_id = _require(report_id, "Report id")
    author = _require(author, "Author")

    row = {"report_id": report_id, "content": content, "author": author}
    created = execute(get_supabase_client().table(TABLE).insert(row), "add comment")
    if not created:
        raise StoreError("Store returned no row for the created comment")

    logger.info(f"Comment {created[0].get('id')} added to report {report_id}")
    return created[0]


def get_comments_by_report(report_id: str) -> List[Dict]:
    """Comments of one report in chronological (thread) order."""
    report_id = _require(report_id, "Report id")
    query = (
        get_supabase_client()
        .table(TABLE)
        .select(COMMENT_COLUMNS)
        .eq("report_id", report_id)
        .order("created_at", desc=False)
    )
    return execute(query, "load comments")


def get_comment(comment_id: str) -> Dict:
    comment_id = _require(comment_id, "Comment id")
    rows = execute(get_supabase_client().table(TABLE).select("*").eq("id", comment_id), "load comment")
    if not rows:
        raise NotFoundError("Comment", comment_id)
    return rows[0]


def update_comment(comment_id: str, content: str) -> Dict:
    comment_id = _require(comment_id, "Comment id")
    content = _require(content, "Comment content")

    query = get_supabase_client().table(TABLE).update({"content": content}).eq("id", comment_id)
    rows = execute(query, "update comment")
    if not rows:
        raise NotFoundError("Comment", comment_id)
    return rows[0]


def delete_comment(comment_id: str) -> bool:
    comment_id = _require(comment_id, "Comment id")

    rows = execute(get_supabase_client().table(TABLE).delete().eq("id", comment_id), "delete comment")
    if not rows:
        raise NotFoundError("Comment", comment_id)

    logger.info(f"Deleted comment {comment_id}")
    return True
