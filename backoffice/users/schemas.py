from datetime import datetime
from typing import Optional

from pydantic import Field

from backoffice.common.schemas import AppBaseModel


# --- RESPONSES ---
class UserResponse(AppBaseModel):
    """User record as listed in the admin UI. The password hash is never part of it."""

    id: int = Field(..., gt=0)
    email: str = Field(..., min_length=1)
    role: str = Field(..., description="admin, manager or employee")
    full_name: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    supabase_user_id: Optional[str] = None
