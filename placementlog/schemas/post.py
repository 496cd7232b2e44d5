"""
Post schemas.
"""
from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID
from placementlog.schemas.base import BaseSchema


class PostWriteRequest(BaseSchema):
    """
    Create / update request body.

    ``post_body`` is any JSON object, stored as-is. Clients conventionally
    send ``{"company": ..., "role": ..., "rounds": [{"content": ...}]}``.
    """

    post_body: Dict[str, Any]


class PostResponse(BaseSchema):
    """Post as returned to clients."""

    id: UUID
    user_id: UUID
    post_body: dict
    reviewed: bool
    created_at: Optional[datetime] = None
