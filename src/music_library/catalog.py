"""In-memory catalog store for artists, albums and songs."""

import logging
from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from typing import Any, Generic, TypeVar

from fastapi import Request

from music_library.schemas.album import Album
from music_library.schemas.artist import Artist
from music_library.schemas.song import Song

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", Artist, Album, Song)


class NotFoundError(Exception):
    """Raised when a catalog record does not exist."""

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message)


class ResourceCollection(Generic[RecordT]):
    """Ordered records of one resource type.

    IDs come from a counter that only moves forward, so an ID freed by a
    delete is never handed out again.
    """

    def __init__(self, resource_name: str, records: Iterable[RecordT] = ()) -> None:
        """Initialize the collection.

        Args:
            resource_name: Display name used in log lines and errors (e.g. "Artist").
            records: Initial records, kept in the given order.
        """
        self.resource_name = resource_name
        self._records: list[RecordT] = list(records)
        self._next_id = max((record.id for record in self._records), default=0) + 1

    def __len__(self) -> int:
        return len(self._records)

    def _not_found(self, record_id: int) -> NotFoundError:
        logger.debug("%s %d not found", self.resource_name, record_id)
        return NotFoundError(f"{self.resource_name} not found")

    def _index_of(self, record_id: int) -> int:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        raise self._not_found(record_id)

    def select(self, predicate: Callable[[RecordT], bool] | None = None) -> list[RecordT]:
        """Return records in insertion order, optionally filtered."""
        if predicate is None:
            return list(self._records)
        return [record for record in self._records if predicate(record)]

    def get(self, record_id: int) -> RecordT:
        """Return the record with the given ID.

        Raises:
            NotFoundError: If no record has that ID.
        """
        return self._records[self._index_of(record_id)]

    def allocate_id(self) -> int:
        """Reserve and return the next record ID."""
        record_id = self._next_id
        self._next_id += 1
        return record_id

    def add(self, record: RecordT) -> RecordT:
        """Append a record built with an ID from ``allocate_id``."""
        self._records.append(record)
        self._next_id = max(self._next_id, record.id + 1)
        logger.info("Created %s %d", self.resource_name, record.id)
        return record

    def update(self, record_id: int, changes: dict[str, Any]) -> RecordT:
        """Shallow-merge validated field changes over an existing record.

        Args:
            record_id: ID of the record to update.
            changes: Attribute names (snake_case) mapped to their new values.

        Returns:
            The updated record, stored at the same position.

        Raises:
            NotFoundError: If no record has that ID.
        """
        index = self._index_of(record_id)
        updated = self._records[index].model_copy(update=changes)
        self._records[index] = updated
        logger.info(
            "Updated %s %d (%s)", self.resource_name, record_id, ", ".join(sorted(changes)) or "-"
        )
        return updated

    def remove(self, record_id: int) -> RecordT:
        """Remove and return the record with the given ID.

        Raises:
            NotFoundError: If no record has that ID.
        """
        record = self._records.pop(self._index_of(record_id))
        logger.info("Deleted %s %d", self.resource_name, record_id)
        return record


def _seed_timestamp(day: int) -> datetime:
    return datetime(2024, 1, day, tzinfo=UTC)


def _seed_artists() -> list[Artist]:
    return [
        Artist(
            id=1,
            name="The Beatles",
            genre="Rock",
            country="United Kingdom",
            biography="The most influential band of all time",
            created_at=_seed_timestamp(1),
        ),
        Artist(
            id=2,
            name="Queen",
            genre="Rock",
            country="United Kingdom",
            biography="Legendary rock band",
            created_at=_seed_timestamp(2),
        ),
    ]


def _seed_albums() -> list[Album]:
    return [
        Album(
            id=1,
            title="Abbey Road",
            artist_id=1,
            release_year=1969,
            genre="Rock",
            created_at=_seed_timestamp(1),
        ),
        Album(
            id=2,
            title="A Night at the Opera",
            artist_id=2,
            release_year=1975,
            genre="Rock",
            created_at=_seed_timestamp(2),
        ),
    ]


def _seed_songs() -> list[Song]:
    return [
        Song(
            id=1,
            title="Come Together",
            album_id=1,
            duration=259,
            track_number=1,
            created_at=_seed_timestamp(1),
            audio_url="https://example.com/audio/1.mp3",
        ),
        Song(
            id=2,
            title="Bohemian Rhapsody",
            album_id=2,
            duration=354,
            track_number=1,
            created_at=_seed_timestamp(2),
            audio_url="https://example.com/audio/2.mp3",
        ),
    ]


class Catalog:
    """The artists, albums and songs served by the API."""

    def __init__(
        self,
        artists: Iterable[Artist] = (),
        albums: Iterable[Album] = (),
        songs: Iterable[Song] = (),
    ) -> None:
        self.artists: ResourceCollection[Artist] = ResourceCollection("Artist", artists)
        self.albums: ResourceCollection[Album] = ResourceCollection("Album", albums)
        self.songs: ResourceCollection[Song] = ResourceCollection("Song", songs)

    @classmethod
    def seeded(cls) -> "Catalog":
        """Build a catalog holding the fixed mock data."""
        return cls(artists=_seed_artists(), albums=_seed_albums(), songs=_seed_songs())

    def reset(self) -> None:
        """Discard all changes and restore the mock data."""
        fresh = self.seeded()
        self.artists, self.albums, self.songs = fresh.artists, fresh.albums, fresh.songs
        logger.info("Catalog reset to seed data")

    def counts(self) -> dict[str, int]:
        """Number of records per resource, for logging."""
        return {
            "artists": len(self.artists),
            "albums": len(self.albums),
            "songs": len(self.songs),
        }


def get_catalog(request: Request) -> Catalog:
    """Dependency that provides the application's catalog."""
    return request.app.state.catalog
