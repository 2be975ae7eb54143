from dataclasses import dataclass
from datetime import datetime
from typing import Optional

@dataclass
class Like:
    id: str
    liked_by: str
    comment: Optional[str] = None
    video: Optional[str] = None
    created_at: Optional[datetime] = None
