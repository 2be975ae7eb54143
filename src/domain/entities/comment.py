from dataclasses import dataclass
from datetime import datetime
from typing import Optional

@dataclass
class Comment:
    id: str
    content: str
    owner: str
    video: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
