"""Sample content for a fresh store."""

import json

from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from .database import Friend, Message, Post, Project, Song
from .repositories import (
    FriendRepository,
    MessageRepository,
    PostRepository,
    ProjectRepository,
    SongRepository,
)


SAMPLE_POSTS = [
    {
        "title": "Building the Future with React 19",
        "excerpt": "Exploring the latest concurrent features and the new compiler that's changing how we think about rendering.",
        "content": "",
        "date": "Jan 18, 2026",
        "category": "Development",
    },
]

SAMPLE_PROJECTS = [
    {
        "title": "EcoTracker",
        "description": "A mobile application for tracking and reducing personal carbon footprint through gamification.",
        "tags": "React Native,Firebase,D3.js",
        "github": "#",
        "link": "#",
        "color": "#00DC82",
    },
]

SAMPLE_FRIENDS = [
    {
        "name": "Alice's Garden",
        "url": "#",
        "description": "Design & Illustration",
        "avatar": "A",
        "approved": True,
    },
]

SAMPLE_MESSAGES = [
    {
        "name": "Traveler",
        "content": "Love the fresh design of this blog! Keep it up.",
        "date": "9:00 AM",
    },
]

SAMPLE_SONGS = [
    {
        "title": "Eco Valley",
        "artist": "Lofi Dreamer",
        "url": "https://www.soundhelix.com/examples/mp3/SoundHelix-Song-1.mp3",
        "lyrics": json.dumps([
            {"time": 0, "text": "Welcome to the green valley..."},
            {"time": 5, "text": "The wind whispers through the leaves."},
        ]),
    },
]


def _repositories(session: AsyncSession):
    return [
        (PostRepository(Post, session), SAMPLE_POSTS),
        (ProjectRepository(Project, session), SAMPLE_PROJECTS),
        (FriendRepository(Friend, session), SAMPLE_FRIENDS),
        (MessageRepository(Message, session), SAMPLE_MESSAGES),
        (SongRepository(Song, session), SAMPLE_SONGS),
    ]


async def seed(session: AsyncSession, force: bool = False) -> int:
    """
    Insert the sample rows.

    Tables that already hold rows are left alone unless `force` is set, in
    which case they are cleared first. Returns the number of rows inserted.
    """
    inserted = 0
    for repo, rows in _repositories(session):
        table = repo.model.__tablename__
        if await repo.get_multi(limit=1):
            if not force:
                logger.info(f"Skipping {table}: already has rows")
                continue
            deleted = await repo.delete_all()
            logger.info(f"Cleared {deleted} rows from {table}")

        for row in rows:
            await repo.create(**row)
            inserted += 1

    await session.commit()
    return inserted
