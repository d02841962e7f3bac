"""Read-mostly reference entities: portfolio projects and playlist songs."""

import json
from typing import List, Optional

from loguru import logger

from ..database import Project, Song
from ..repositories.project_repository import ProjectRepository
from ..repositories.song_repository import SongRepository


class ProjectService:
    """Projects are listed publicly and created by the admin."""

    def __init__(self, project_repo: ProjectRepository):
        self.project_repo = project_repo

    async def list_projects(self) -> List[Project]:
        return await self.project_repo.list_recent()

    async def create_project(
        self,
        title: str,
        description: str = "",
        tags: Optional[List[str]] = None,
        github: Optional[str] = None,
        link: Optional[str] = None,
        color: Optional[str] = None,
    ) -> Project:
        project = await self.project_repo.create(
            title=title,
            description=description,
            tags=",".join(tags or []),
            github=github,
            link=link,
            color=color,
        )
        logger.info(f"Project {project.id} created")
        return project


class SongService:
    """Playlist for the music player."""

    def __init__(self, song_repo: SongRepository):
        self.song_repo = song_repo

    async def list_songs(self) -> List[Song]:
        return await self.song_repo.list_playlist()

    async def add_song(
        self,
        title: str,
        artist: str,
        url: str,
        lyrics: Optional[List[dict]] = None,
    ) -> Song:
        song = await self.song_repo.create(
            title=title,
            artist=artist,
            url=url,
            lyrics=json.dumps(lyrics or [], ensure_ascii=False),
        )
        logger.info(f"Song {song.id} added")
        return song
