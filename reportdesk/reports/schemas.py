"""
Defines the data models and enums for report management.
"""

from pydantic import BaseModel
from enum import Enum
from typing import List, Optional


class ReportStatus(str, Enum):
    open = "open"
    in_progress = "in_progress"
    resolved = "resolved"
    closed = "closed"


class ProfileSummary(BaseModel):
    full_name: Optional[str] = None


class ReportComment(BaseModel):
    id: str
    report_id: str
    author: str
    content: str
    created_at: str
    profiles: Optional[ProfileSummary] = None


class Report(BaseModel):
    id: str
    user_id: str
    title: str
    description: Optional[str] = None
    location: Optional[str] = None
    status: ReportStatus = ReportStatus.open
    created_at: str
    updated_at: Optional[str] = None
    profiles: Optional[ProfileSummary] = None  # joined owner profile
    comments: Optional[List[ReportComment]] = None  # only when requested


class ReportCreate(BaseModel):
    title: str
    description: Optional[str] = None
    location: Optional[str] = None
    status: ReportStatus = ReportStatus.open


class ReportStatusUpdate(BaseModel):
    status: ReportStatus


class ReportSummary(BaseModel):
    total_reports: int
    open: int
    in_progress: int
    resolved: int
    closed: int
