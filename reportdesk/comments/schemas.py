from pydantic import BaseModel
from typing import Optional
from reportdesk.reports.schemas import ProfileSummary


class Comment(BaseModel):
    id: str
    report_id: str
    author: str
    content: str
    created_at: str
    profiles: Optional[ProfileSummary] = None  # joined author profile


class CommentCreate(BaseModel):
    content: str


class CommentUpdate(BaseModel):
    content: str
