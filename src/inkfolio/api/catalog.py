"""Project and song endpoints."""

from typing import List

from fastapi import APIRouter, Depends

from ..dependencies import get_project_service, get_song_service, require_admin
from ..schemas.auth import AdminSession
from ..schemas.project import ProjectCreate, ProjectResponse
from ..schemas.song import SongCreate, SongResponse
from ..services import ProjectService, SongService


projects_router = APIRouter(prefix="/projects", tags=["Projects"])
songs_router = APIRouter(prefix="/songs", tags=["Songs"])


@projects_router.get("", response_model=List[ProjectResponse])
async def list_projects(
    project_service: ProjectService = Depends(get_project_service),
):
    projects = await project_service.list_projects()
    return [ProjectResponse.model_validate(p) for p in projects]


@projects_router.post("", response_model=ProjectResponse)
async def create_project(
    data: ProjectCreate,
    admin: AdminSession = Depends(require_admin),
    project_service: ProjectService = Depends(get_project_service),
):
    """Add a portfolio project. `tags` may be a list or a comma-separated string."""
    project = await project_service.create_project(**data.model_dump())
    return ProjectResponse.model_validate(project)


@songs_router.get("", response_model=List[SongResponse])
async def list_songs(
    song_service: SongService = Depends(get_song_service),
):
    songs = await song_service.list_songs()
    return [SongResponse.model_validate(s) for s in songs]


@songs_router.post("", response_model=SongResponse)
async def add_song(
    data: SongCreate,
    song_service: SongService = Depends(get_song_service),
):
    """Add a song to the playlist. `lyrics` may be a list or its JSON text."""
    song = await song_service.add_song(
        title=data.title,
        artist=data.artist,
        url=data.url,
        lyrics=[line.model_dump() for line in data.lyrics],
    )
    return SongResponse.model_validate(song)
