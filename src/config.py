import os
from pathlib import Path
from dotenv import load_dotenv

# This points to the /backend folder
BASE_DIR = Path(__file__).resolve().parent.parent

# PROJECT_ROOT for easy reference throughout the app
PROJECT_ROOT = Path(os.getenv("PROJECT_ROOT", str(BASE_DIR)))

load_dotenv(PROJECT_ROOT / ".env", override=True)

# Supabase credentials (alternate names are common in Supabase setups)
SUPABASE_URL = os.getenv("SUPABASE_URL") or os.getenv("NEXT_PUBLIC_SUPABASE_URL")
SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY") or os.getenv("NEXT_PUBLIC_SUPABASE_ANON_KEY")

# Table names
USERS_TABLE = os.getenv("USERS_TABLE", "users")
VIDEOS_TABLE = os.getenv("VIDEOS_TABLE", "videos")
COMMENTS_TABLE = os.getenv("COMMENTS_TABLE", "comments")
LIKES_TABLE = os.getenv("LIKES_TABLE", "likes")
PLAYLISTS_TABLE = os.getenv("PLAYLISTS_TABLE", "playlists")

# Pagination
DEFAULT_PAGE = 1
DEFAULT_PAGE_LIMIT = int(os.getenv("DEFAULT_PAGE_LIMIT", "10"))
MAX_PAGE_LIMIT = int(os.getenv("MAX_PAGE_LIMIT", "100"))

# Other Global Configs
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if origin.strip()
]
