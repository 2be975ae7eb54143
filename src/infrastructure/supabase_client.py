import os
from functools import lru_cache
from supabase import create_client, Client

from src.config import SUPABASE_URL, SUPABASE_ANON_KEY


@lru_cache(maxsize=1)
def get_supabase() -> Client:
    """
    Returns the shared Supabase client, created on first use so the API
    can be imported without credentials.
    """
    if not SUPABASE_URL or not SUPABASE_ANON_KEY:
        raise ValueError(f"Supabase credentials not found in environment. Checked SUPABASE_URL and NEXT_PUBLIC_SUPABASE_URL. CWD: {os.getcwd()}")

    return create_client(SUPABASE_URL, SUPABASE_ANON_KEY)
