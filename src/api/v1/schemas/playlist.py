from pydantic import BaseModel
from typing import Optional

class PlaylistRequest(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
