from dataclasses import dataclass
from datetime import datetime
from typing import Optional

@dataclass
class Video:
    id: str
    owner: str
    title: str = "Untitled"
    description: str = ""
    video_file_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    duration: float = 0.0
    views: int = 0
    is_published: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
