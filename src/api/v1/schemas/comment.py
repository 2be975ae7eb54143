from pydantic import BaseModel
from typing import Optional

class CommentContentRequest(BaseModel):
    content: Optional[str] = None
