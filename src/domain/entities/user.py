from dataclasses import dataclass
from typing import Optional

@dataclass
class User:
    id: str
    username: str
    full_name: str = ""
    avatar_url: Optional[str] = None
