"""Create the tables and insert a demo catalog if the movies table is empty."""
import asyncio

from movie_api.database import async_session_maker, close_db, init_db
from movie_api.kernel.catalog.catalog_service import CatalogService

DRAMA = {
    "name": "Drama",
    "description": "Serious, plot-driven stories portraying realistic characters and emotional themes.",
}
SCI_FI = {
    "name": "Science Fiction",
    "description": "Speculative stories built on imagined science and technology.",
}
THRILLER = {
    "name": "Thriller",
    "description": "Suspense-driven stories that keep the audience on edge.",
}

DEMO_MOVIES = [
    {
        "title": "Stalker",
        "description": "A guide leads two men through the Zone to a room said to grant wishes.",
        "genre": SCI_FI,
        "director": {
            "name": "Andrei Tarkovsky",
            "bio": "Soviet filmmaker known for long takes and spiritual themes.",
            "birth_year": 1932,
            "death_year": 1986,
        },
        "image_path": "stalker.png",
        "featured": True,
    },
    {
        "title": "Solaris",
        "description": "A psychologist is sent to a space station orbiting a mysterious ocean planet.",
        "genre": SCI_FI,
        "director": {
            "name": "Andrei Tarkovsky",
            "bio": "Soviet filmmaker known for long takes and spiritual themes.",
            "birth_year": 1932,
            "death_year": 1986,
        },
        "image_path": "solaris.png",
    },
    {
        "title": "In the Mood for Love",
        "description": "Two neighbours form a bond after suspecting their spouses of infidelity.",
        "genre": DRAMA,
        "director": {
            "name": "Wong Kar-wai",
            "bio": "Hong Kong director noted for stylised, romantic films.",
            "birth_year": 1958,
        },
        "image_path": "in_the_mood_for_love.png",
        "featured": True,
    },
    {
        "title": "Vertigo",
        "description": "A retired detective becomes obsessed with a woman he is hired to follow.",
        "genre": THRILLER,
        "director": {
            "name": "Alfred Hitchcock",
            "bio": "English director known as the Master of Suspense.",
            "birth_year": 1899,
            "death_year": 1980,
        },
        "image_path": "vertigo.png",
    },
]


async def seed(session) -> int:
    """Insert DEMO_MOVIES unless the catalog has entries. Returns the number inserted."""
    catalog = CatalogService(session)
    if await catalog.count_movies():
        return 0
    for movie in DEMO_MOVIES:
        await catalog.create_movie(**movie)
    await session.commit()
    return len(DEMO_MOVIES)


async def main():
    await init_db()
    try:
        async with async_session_maker() as session:
            inserted = await seed(session)
        if inserted:
            print(f"Seeded {inserted} movies")
        else:
            print("Catalog already seeded")
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio.run(main())
