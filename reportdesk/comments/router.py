from fastapi import APIRouter, Depends
from typing import List
from reportdesk.comments import utils, schemas
from reportdesk.authentication.schemas import UserContext
from reportdesk.authentication.security import get_current_user
from reportdesk.errors.exceptions import ForbiddenError

router = APIRouter(tags=["Comments"])


@router.get("/reports/{report_id}/comments", response_model=List[schemas.Comment])
def list_comments(report_id: str):
    """List the comment thread of a report, oldest first."""
    return utils.get_comments_by_report(report_id)


@router.post("/reports/{report_id}/comments", response_model=schemas.Comment, status_code=201)
def add_comment(report_id: str, comment: schemas.CommentCreate, user: UserContext = Depends(get_current_user)):
    """Add a comment as the current user."""
    return utils.add_comment(report_id, comment.content, author=user.user_id)


@router.patch("/comments/{comment_id}", response_model=schemas.Comment)
def edit_comment(comment_id: str, updates: schemas.CommentUpdate, user: UserContext = Depends(get_current_user)):
    """Edit a comment (only its author)."""
    comment = utils.get_comment(comment_id)

    # Only the author can edit
    if comment["author"] != user.user_id:
        raise ForbiddenError("Not authorized to edit this comment")

    return utils.update_comment(comment_id, updates.content)


@router.delete("/comments/{comment_id}")
def delete_comment(comment_id: str, user: UserContext = Depends(get_current_user)):
    """Delete a comment (only its author)."""
    comment = utils.get_comment(comment_id)

    # Only the author can delete
    if comment["author"] != user.user_id:
        raise ForbiddenError("Not authorized to delete this comment")

    utils.delete_comment(comment_id)
    return {"message": "Comment deleted"}
