"""
Repository providers. Tests swap these through app.dependency_overrides.
"""
from src.infrastructure.repositories.supabase_comment_repository import SupabaseCommentRepository
from src.infrastructure.repositories.supabase_like_repository import SupabaseLikeRepository
from src.infrastructure.repositories.supabase_playlist_repository import SupabasePlaylistRepository
from src.infrastructure.repositories.supabase_user_repository import SupabaseUserRepository
from src.infrastructure.repositories.supabase_video_repository import SupabaseVideoRepository


def get_comment_repo():
    return SupabaseCommentRepository()

def get_like_repo():
    return SupabaseLikeRepository()

def get_playlist_repo():
    return SupabasePlaylistRepository()

def get_user_repo():
    return SupabaseUserRepository()

def get_video_repo():
    return SupabaseVideoRepository()
