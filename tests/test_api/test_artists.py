"""Tests for artist API endpoints."""

import pytest
from httpx import AsyncClient

from music_library.catalog import Catalog


class TestListArtists:
    """Tests for artist list endpoint."""

    async def test_list_artists(self, client: AsyncClient) -> None:
        """Test listing returns the seeded artists in order."""
        response = await client.get("/api/artists")

        assert response.status_code == 200
        artists = response.json()["artists"]
        assert [a["name"] for a in artists] == ["The Beatles", "Queen"]
        assert artists[0] == {
            "id": 1,
            "name": "The Beatles",
            "genre": "Rock",
            "country": "United Kingdom",
            "biography": "The most influential band of all time",
            "createdAt": "2024-01-01T00:00:00Z",
        }

    async def test_list_artists_genre_is_case_insensitive(self, client: AsyncClient) -> None:
        """Test genre filter ignores case."""
        response = await client.get("/api/artists?genre=rOcK")

        assert response.status_code == 200
        assert len(response.json()["artists"]) == 2

    async def test_list_artists_genre_no_match(self, client: AsyncClient) -> None:
        """Test genre filter is an exact match, not a substring one."""
        response = await client.get("/api/artists?genre=Roc")

        assert response.status_code == 200
        assert response.json()["artists"] == []


class TestCreateArtist:
    """Tests for artist creation endpoint."""

    async def test_create_artist(self, client: AsyncClient, catalog: Catalog) -> None:
        """Test creating an artist assigns an ID and timestamp."""
        response = await client.post(
            "/api/artists",
            json={"name": "Radiohead", "genre": "Alternative", "country": "United Kingdom"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == 3
        assert data["name"] == "Radiohead"
        assert data["genre"] == "Alternative"
        assert data["biography"] is None
        assert "createdAt" in data
        assert len(catalog.artists) == 3

    async def test_created_artist_is_listed(self, client: AsyncClient) -> None:
        """Test a created artist shows up in the list."""
        await client.post("/api/artists", json={"name": "Björk", "genre": "Electronic"})

        response = await client.get("/api/artists?genre=electronic")
        assert [a["name"] for a in response.json()["artists"]] == ["Björk"]

    async def test_create_artist_ids_not_reused_after_delete(self, client: AsyncClient) -> None:
        """Test IDs keep increasing when an artist was deleted."""
        await client.delete("/api/artists/2")

        first = await client.post("/api/artists", json={"name": "Blur", "genre": "Britpop"})
        second = await client.post("/api/artists", json={"name": "Oasis", "genre": "Britpop"})

        assert first.json()["id"] == 3
        assert second.json()["id"] == 4

    async def test_create_artist_missing_required_field(
        self, client: AsyncClient, catalog: Catalog
    ) -> None:
        """Test creating an artist without a genre returns 422."""
        response = await client.post("/api/artists", json={"name": "Nobody"})

        assert response.status_code == 422
        assert len(catalog.artists) == 2

    async def test_create_artist_ignores_unknown_fields(self, client: AsyncClient) -> None:
        """Test unknown fields, including a client-chosen ID, are dropped."""
        response = await client.post(
            "/api/artists",
            json={"name": "Muse", "genre": "Rock", "id": 99, "members": 3},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == 3
        assert "members" not in data

    async def test_create_artist_invalid_json(self, client: AsyncClient) -> None:
        """Test a malformed body returns 422."""
        response = await client.post(
            "/api/artists",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422


class TestUpdateArtist:
    """Tests for artist update endpoint."""

    async def test_update_artist_merges_fields(self, client: AsyncClient) -> None:
        """Test that only supplied fields change."""
        response = await client.put("/api/artists/2", json={"biography": "Champions"})

        assert response.status_code == 200
        data = response.json()
        assert data["biography"] == "Champions"
        assert data["name"] == "Queen"
        assert data["genre"] == "Rock"
        assert data["createdAt"] == "2024-01-02T00:00:00Z"

        listed = await client.get("/api/artists")
        assert listed.json()["artists"][1]["biography"] == "Champions"

    async def test_update_artist_null_clears_optional_field(self, client: AsyncClient) -> None:
        """Test that null clears an optional field and the change is stored."""
        response = await client.put("/api/artists/1", json={"biography": None})

        assert response.status_code == 200
        assert response.json()["biography"] is None
        assert response.json()["country"] == "United Kingdom"

        listed = await client.get("/api/artists")
        assert listed.json()["artists"][0]["biography"] is None

    @pytest.mark.parametrize("field", ["name", "genre"])
    async def test_update_artist_null_required_field(
        self, client: AsyncClient, catalog: Catalog, field: str
    ) -> None:
        """Test that null is rejected for fields every artist must have."""
        response = await client.put("/api/artists/1", json={field: None})

        assert response.status_code == 422
        assert catalog.artists.get(1).name == "The Beatles"
        assert catalog.artists.get(1).genre == "Rock"

    async def test_update_artist_not_found(self, client: AsyncClient, catalog: Catalog) -> None:
        """Test updating a missing artist returns 404."""
        response = await client.put("/api/artists/99", json={"name": "Ghost"})

        assert response.status_code == 404
        assert response.json() == {"error": "Artist not found"}
        assert [a.name for a in catalog.artists.select()] == ["The Beatles", "Queen"]

    async def test_update_artist_invalid_id(self, client: AsyncClient) -> None:
        """Test a non-integer ID returns 422."""
        response = await client.put("/api/artists/abc", json={"name": "Ghost"})

        assert response.status_code == 422


class TestDeleteArtist:
    """Tests for artist deletion endpoint."""

    async def test_delete_artist(self, client: AsyncClient) -> None:
        """Test deleting removes the artist from the list."""
        response = await client.delete("/api/artists/1")

        assert response.status_code == 200
        assert response.json() == {"message": "Artist deleted successfully"}

        listed = await client.get("/api/artists")
        assert [a["id"] for a in listed.json()["artists"]] == [2]

    async def test_delete_artist_keeps_albums(self, client: AsyncClient) -> None:
        """Test deleting an artist does not remove their albums."""
        await client.delete("/api/artists/1")

        response = await client.get("/api/albums?artistId=1")
        assert len(response.json()["albums"]) == 1

    async def test_delete_artist_not_found(self, client: AsyncClient, catalog: Catalog) -> None:
        """Test deleting a missing artist returns 404."""
        response = await client.delete("/api/artists/99")

        assert response.status_code == 404
        assert response.json() == {"error": "Artist not found"}
        assert len(catalog.artists) == 2

    async def test_delete_artist_twice(self, client: AsyncClient) -> None:
        """Test a second delete of the same artist returns 404."""
        assert (await client.delete("/api/artists/2")).status_code == 200
        assert (await client.delete("/api/artists/2")).status_code == 404
