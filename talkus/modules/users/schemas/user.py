from typing import Any, Dict, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict

class User(BaseModel):
    """User profile returned to client"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: Optional[str] = None
    email: Optional[str] = None
    display_name: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

def to_record(user: Any) -> Dict[str, Any]:
    """Convert a User entity to an open JSON record"""
    return User.model_validate(user).model_dump(mode="json")
