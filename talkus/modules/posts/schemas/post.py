from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

class Post(BaseModel):
    """Post returned to client, serialized with the field names the frontend reads"""
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(serialization_alias="ID")
    title: str = Field(serialization_alias="Title")
    content: str = Field(serialization_alias="Content")
    image_url: str = Field("", serialization_alias="ImageURL")
    likes: int = Field(0, serialization_alias="Likes")
    dislikes: int = Field(0, serialization_alias="Dislikes")
    is_flagged: bool = Field(False, serialization_alias="IsFlagged")
    created_at: datetime = Field(serialization_alias="CreatedAt")
    updated_at: datetime = Field(serialization_alias="UpdatedAt")
