from fastapi import APIRouter, Depends

from src.api.auth import get_current_user
from src.api.dependencies import get_playlist_repo, get_user_repo, get_video_repo
from src.api.responses import envelope
from src.api.v1.schemas.playlist import PlaylistRequest
from src.application.use_cases.create_playlist import CreatePlaylistUseCase
from src.application.use_cases.delete_playlist import DeletePlaylistUseCase
from src.application.use_cases.get_playlist import GetPlaylistByIdUseCase
from src.application.use_cases.list_user_playlists import ListUserPlaylistsUseCase
from src.application.use_cases.playlist_videos import AddVideoToPlaylistUseCase, RemoveVideoFromPlaylistUseCase
from src.application.use_cases.update_playlist import UpdatePlaylistUseCase

router = APIRouter(tags=["Playlists"])

# Wire up the dependencies
def create_playlist_use_case(playlists=Depends(get_playlist_repo)):
    return CreatePlaylistUseCase(playlists)

def list_user_playlists_use_case(playlists=Depends(get_playlist_repo), videos=Depends(get_video_repo)):
    return ListUserPlaylistsUseCase(playlists, videos)

def get_playlist_use_case(
    playlists=Depends(get_playlist_repo),
    videos=Depends(get_video_repo),
    users=Depends(get_user_repo)
):
    return GetPlaylistByIdUseCase(playlists, videos, users)

def add_video_use_case(playlists=Depends(get_playlist_repo), videos=Depends(get_video_repo)):
    return AddVideoToPlaylistUseCase(playlists, videos)

def remove_video_use_case(playlists=Depends(get_playlist_repo), videos=Depends(get_video_repo)):
    return RemoveVideoFromPlaylistUseCase(playlists, videos)

def delete_playlist_use_case(playlists=Depends(get_playlist_repo)):
    return DeletePlaylistUseCase(playlists)

def update_playlist_use_case(playlists=Depends(get_playlist_repo)):
    return UpdatePlaylistUseCase(playlists)


@router.post("/playlists")
async def create_playlist(
    request: PlaylistRequest,
    user=Depends(get_current_user),
    use_case: CreatePlaylistUseCase = Depends(create_playlist_use_case)
):
    playlist = use_case.execute(request.name, request.description, user.id)
    return envelope(201, playlist, "playlist created successfully")

@router.get("/users/{user_id}/playlists")
async def list_user_playlists(
    user_id: str,
    use_case: ListUserPlaylistsUseCase = Depends(list_user_playlists_use_case)
):
    playlists = use_case.execute(user_id)
    return envelope(200, playlists, "User playlists fetched successfully")

@router.get("/playlists/{playlist_id}")
async def get_playlist(
    playlist_id: str,
    use_case: GetPlaylistByIdUseCase = Depends(get_playlist_use_case)
):
    """
    Playlist detail with its published videos. `data` is null when none is published.
    """
    playlist = use_case.execute(playlist_id)
    return envelope(200, playlist, "playlist fetched successfully")

@router.patch("/playlists/{playlist_id}/videos/{video_id}")
async def add_video_to_playlist(
    playlist_id: str,
    video_id: str,
    user=Depends(get_current_user),
    use_case: AddVideoToPlaylistUseCase = Depends(add_video_use_case)
):
    playlist = use_case.execute(playlist_id, video_id, user.id)
    return envelope(200, playlist, "Added video to playlist successfully")

@router.delete("/playlists/{playlist_id}/videos/{video_id}")
async def remove_video_from_playlist(
    playlist_id: str,
    video_id: str,
    user=Depends(get_current_user),
    use_case: RemoveVideoFromPlaylistUseCase = Depends(remove_video_use_case)
):
    playlist = use_case.execute(playlist_id, video_id, user.id)
    return envelope(200, playlist, "Removed video from playlist successfully")

@router.delete("/playlists/{playlist_id}")
async def delete_playlist(
    playlist_id: str,
    user=Depends(get_current_user),
    use_case: DeletePlaylistUseCase = Depends(delete_playlist_use_case)
):
    result = use_case.execute(playlist_id, user.id)
    return envelope(200, result, "playlist deleted successfully")

@router.patch("/playlists/{playlist_id}")
async def update_playlist(
    playlist_id: str,
    request: PlaylistRequest,
    user=Depends(get_current_user),
    use_case: UpdatePlaylistUseCase = Depends(update_playlist_use_case)
):
    playlist = use_case.execute(playlist_id, request.name, request.description, user.id)
    return envelope(200, playlist, "playlist updated successfully")
