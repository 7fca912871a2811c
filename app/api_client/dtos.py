from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class ReplyDTO(BaseModel):
    id: int
    content: str
    comment_id: int
    author_id: Optional[int] = None
    user_name: str = Field(default="Unknown user", description="작성자 표시 이름")
    user_photo: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class CommentDTO(BaseModel):
    id: int
    content: str
    job_id: int
    author_id: Optional[int] = None
    user_name: str = Field(default="Unknown user", description="작성자 표시 이름")
    user_photo: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    replies: list[ReplyDTO] = Field(default_factory=list, description="오래된순 답글")


class JobDTO(BaseModel):
    id: int
    title: str
    description: str
    budget: Decimal
    category: str
    skills: list[str] = Field(default_factory=list)
    status: str = "open"
    owner_id: int
    user_name: str = Field(default="Unknown user", description="소유자 표시 이름")
    user_photo: Optional[str] = None
    created_at: datetime
    updated_at: datetime
