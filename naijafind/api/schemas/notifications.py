from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

NOTIFICATION_TYPE_PATTERN = r'^(order|review|message|system|approval|verification)$'


class NotificationListQuery(BaseModel):
    limit: Optional[int] = Field(None, gt=0, le=200)
    only_unread: bool = False


class NotificationCreateRequest(BaseModel):
    user_id: Optional[int] = None  # Defaults to the caller
    type: Optional[str] = Field(None, pattern=NOTIFICATION_TYPE_PATTERN)
    title: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1)
    data: Optional[Dict[str, Any]] = None
    action_url: Optional[str] = Field(None, max_length=500)


class AdminNotificationRequest(BaseModel):
    user_id: int
    title: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1)
    type: Optional[str] = Field(None, pattern=NOTIFICATION_TYPE_PATTERN)
    action_url: Optional[str] = Field(None, max_length=500)


class BulkNotificationRequest(BaseModel):
    user_ids: List[int] = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1)
    type: Optional[str] = Field(None, pattern=NOTIFICATION_TYPE_PATTERN)
