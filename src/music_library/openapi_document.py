"""Hand-written OpenAPI document served at ``/openapi.json``.

The document is static; only the server list is filled in per request.
"""

import copy
from typing import Any

from music_library import __version__

LOCAL_SERVER_DESCRIPTION = "Local development server"


def _ref(name: str) -> dict[str, str]:
    return {"$ref": f"#/components/schemas/{name}"}


def _json_response(description: str, schema: dict[str, Any]) -> dict[str, Any]:
    return {"description": description, "content": {"application/json": {"schema": schema}}}


def _json_body(schema_name: str) -> dict[str, Any]:
    return {"required": True, "content": {"application/json": {"schema": _ref(schema_name)}}}


def _message_response(description: str, example: str) -> dict[str, Any]:
    return _json_response(
        description,
        {"type": "object", "properties": {"message": {"type": "string", "example": example}}},
    )


def _list_response(description: str, key: str, schema_name: str) -> dict[str, Any]:
    return _json_response(
        description,
        {"type": "object", "properties": {key: {"type": "array", "items": _ref(schema_name)}}},
    )


def _id_parameter(resource: str, example: int) -> dict[str, Any]:
    return {
        "name": "id",
        "in": "path",
        "required": True,
        "description": f"ID of the {resource}",
        "schema": {"type": "integer"},
        "example": example,
    }


def _query_parameter(name: str, description: str, type_: str) -> dict[str, Any]:
    return {
        "name": name,
        "in": "query",
        "description": description,
        "required": False,
        "schema": {"type": type_},
    }


def _not_found(resource: str) -> dict[str, Any]:
    return _json_response(f"{resource} not found", _ref("Error"))


VALIDATION_ERROR = {"description": "Request body failed validation"}


def _collection_paths(
    tag: str,
    resource: str,
    list_key: str,
    list_description: str,
    create_description: str,
    parameters: list[dict[str, Any]],
) -> dict[str, Any]:
    return {
        "get": {
            "tags": [tag],
            "summary": f"List {list_key}",
            "description": list_description,
            "parameters": parameters,
            "responses": {"200": _list_response(f"List of {list_key}", list_key, resource)},
        },
        "post": {
            "tags": [tag],
            "summary": f"Create a new {resource.lower()}",
            "description": create_description,
            "requestBody": _json_body(f"New{resource}"),
            "responses": {
                "201": _json_response(f"{resource} created", _ref(resource)),
                "422": VALIDATION_ERROR,
            },
        },
    }


def _item_paths(
    tag: str,
    resource: str,
    example_id: int,
    update_description: str,
    delete_description: str,
) -> dict[str, Any]:
    noun = resource.lower()
    return {
        "parameters": [_id_parameter(noun, example_id)],
        "put": {
            "tags": [tag],
            "summary": f"Update an {noun}" if noun[0] in "aeiou" else f"Update a {noun}",
            "description": update_description,
            "requestBody": _json_body(f"New{resource}"),
            "responses": {
                "200": _json_response(f"{resource} updated", _ref(resource)),
                "404": _not_found(resource),
                "422": VALIDATION_ERROR,
            },
        },
        "delete": {
            "tags": [tag],
            "summary": f"Delete an {noun}" if noun[0] in "aeiou" else f"Delete a {noun}",
            "description": delete_description,
            "responses": {
                "200": _message_response(f"{resource} deleted", f"{resource} deleted successfully"),
                "404": _not_found(resource),
            },
        },
    }


def _auth_path(scheme: str, summary: str, description: str, missing: str | None) -> dict[str, Any]:
    responses: dict[str, Any] = {"200": {"description": "OK"}}
    if missing:
        responses["401"] = {"description": missing}
    return {
        "get": {
            "tags": ["Misc"],
            "summary": summary,
            "description": description,
            "security": [{scheme: ["read"] if scheme == "GoogleOpenIdAuth" else []}],
            "responses": responses,
        }
    }


def _method_paths() -> dict[str, Any]:
    paths = {}
    for method in ("get", "head", "options", "trace", "put", "delete", "post", "patch"):
        paths[f"/api/methods/{method}"] = {
            method: {
                "tags": ["Misc"],
                "summary": f"{method.upper()} route",
                "responses": {
                    "200": {"description": "OK", "content": {"text/plain": {"example": "OK"}}}
                },
            }
        }
    return paths


def _entity(base: str, extra_properties: dict[str, Any]) -> dict[str, Any]:
    return {
        "allOf": [
            _ref(base),
            {
                "type": "object",
                "required": ["id", "createdAt"],
                "properties": {
                    "id": {"type": "integer", "example": 1},
                    "createdAt": {"type": "string", "format": "date-time"},
                    **extra_properties,
                },
            },
        ]
    }


API_DOCUMENT: dict[str, Any] = {
    "openapi": "3.0.0",
    "info": {
        "title": "Music Library API",
        "description": "API for managing a music library with artists, albums, and songs",
        "version": __version__,
    },
    "tags": [
        {"name": "Artists", "description": "Operations about artists"},
        {"name": "Albums", "description": "Operations about albums"},
        {"name": "Songs", "description": "Operations about songs"},
        {"name": "Misc", "description": "Authentication demos and HTTP method probes"},
    ],
    "servers": [],
    "paths": {
        "/api/artists": _collection_paths(
            "Artists",
            "Artist",
            "artists",
            "Retrieve the list of artists. Can be filtered by genre to find artists "
            "of a specific musical style.",
            "Add a new artist to the music library with their basic information and biography.",
            [_query_parameter("genre", "Filter artists by genre (case-insensitive)", "string")],
        ),
        "/api/artists/{id}": _item_paths(
            "Artists",
            "Artist",
            134,
            "Modify an existing artist's information. Fields in the request override "
            "existing values; omitted fields are kept.",
            "Remove an artist from the library. This will not delete their albums or songs.",
        ),
        "/api/albums": _collection_paths(
            "Albums",
            "Album",
            "albums",
            "Retrieve a list of albums. Can be filtered by artist ID or release year.",
            "Add a new album to the library, associated with an artist.",
            [
                _query_parameter("artistId", "Filter albums by artist ID", "integer"),
                _query_parameter("year", "Filter albums by release year", "integer"),
            ],
        ),
        "/api/albums/{id}": _item_paths(
            "Albums",
            "Album",
            1,
            "Modify an existing album's information. Fields in the request override "
            "existing values; omitted fields are kept.",
            "Remove an album from the library. Its songs are kept.",
        ),
        "/api/songs": _collection_paths(
            "Songs",
            "Song",
            "songs",
            "Retrieve a list of songs. Can be filtered by album ID to get all songs "
            "from a specific album.",
            "Add a new song to the library, associated with an album.",
            [_query_parameter("albumId", "Filter songs by album ID", "integer")],
        ),
        "/api/songs/{id}": _item_paths(
            "Songs",
            "Song",
            456,
            "Modify an existing song's information. Fields in the request override "
            "existing values; omitted fields are kept.",
            "Remove a song from the library.",
        ),
        "/api/songs/{id}/audio": {
            "post": {
                "tags": ["Songs"],
                "summary": "Upload song audio file",
                "description": "Upload an audio file (MP3, WAV) for an existing song. "
                "Will replace any existing audio file.",
                "parameters": [_id_parameter("song", 123)],
                "requestBody": {
                    "required": True,
                    "content": {
                        "multipart/form-data": {
                            "schema": {
                                "type": "object",
                                "properties": {
                                    "file": {
                                        "type": "string",
                                        "format": "binary",
                                        "description": "Audio file (MP3, WAV, etc.)",
                                    }
                                },
                            }
                        }
                    },
                },
                "responses": {
                    "200": _json_response(
                        "Audio file uploaded successfully",
                        {
                            "type": "object",
                            "properties": {
                                "message": {
                                    "type": "string",
                                    "example": "Audio file uploaded successfully",
                                },
                                "audioUrl": {
                                    "type": "string",
                                    "example": "https://example.com/audio/123.mp3",
                                },
                            },
                        },
                    ),
                    "404": _not_found("Song"),
                },
            }
        },
        "/api/auth/basic": _auth_path(
            "BasicAuth",
            "Basic Auth route",
            "Route with Basic Authentication",
            "No Basic Auth header provided",
        ),
        "/api/auth/bearer": _auth_path(
            "BearerAuth",
            "Bearer Auth route",
            "Route with Bearer Authentication",
            "No Bearer Auth header provided",
        ),
        "/api/auth/key": _auth_path(
            "ApiKeyAuth",
            "API Key Auth route",
            "Route with API Key Authentication",
            "No API Key header provided",
        ),
        "/api/auth/google": _auth_path(
            "GoogleOpenIdAuth",
            "Google Auth route",
            "Route with Google OpenIdConnect Authentication",
            None,
        ),
        **_method_paths(),
    },
    "components": {
        "securitySchemes": {
            "BasicAuth": {"type": "http", "scheme": "basic"},
            "BearerAuth": {"type": "http", "scheme": "bearer"},
            "ApiKeyAuth": {"type": "apiKey", "in": "header", "name": "X-API-Key"},
            "GoogleOpenIdAuth": {
                "type": "openIdConnect",
                "openIdConnectUrl": "https://accounts.google.com/.well-known/openid-configuration",
            },
        },
        "schemas": {
            "NewArtist": {
                "type": "object",
                "required": ["name", "genre"],
                "properties": {
                    "name": {"type": "string", "example": "The Beatles"},
                    "genre": {"type": "string", "example": "Rock"},
                    "country": {"type": "string", "example": "United Kingdom"},
                    "biography": {"type": "string"},
                },
            },
            "Artist": _entity("NewArtist", {}),
            "NewAlbum": {
                "type": "object",
                "required": ["title", "artistId", "releaseYear"],
                "properties": {
                    "title": {"type": "string", "example": "Abbey Road"},
                    "artistId": {"type": "integer", "example": 1},
                    "releaseYear": {"type": "integer", "example": 1969},
                    "genre": {"type": "string", "example": "Rock"},
                },
            },
            "Album": _entity("NewAlbum", {}),
            "NewSong": {
                "type": "object",
                "required": ["title", "albumId", "duration"],
                "properties": {
                    "title": {"type": "string", "example": "Come Together"},
                    "albumId": {"type": "integer", "example": 1},
                    "duration": {
                        "type": "integer",
                        "description": "Duration in seconds",
                        "example": 259,
                    },
                    "trackNumber": {"type": "integer", "example": 1},
                },
            },
            "Song": _entity(
                "NewSong",
                {
                    "audioUrl": {
                        "type": "string",
                        "nullable": True,
                        "example": "https://example.com/audio/123.mp3",
                    }
                },
            ),
            "Error": {
                "type": "object",
                "properties": {"error": {"type": "string", "example": "Resource not found"}},
            },
        },
    },
}


def build_openapi_document(
    origin: str,
    local_server_url: str,
    public_server_url: str = "",
) -> dict[str, Any]:
    """Return a copy of the document with its server list filled in.

    Args:
        origin: Origin of the incoming request (scheme://host[:port]).
        local_server_url: Server prepended when the origin is a localhost one.
        public_server_url: Deployed server URL, listed when configured.

    Returns:
        A fresh document; the module-level one is never mutated.
    """
    document = copy.deepcopy(API_DOCUMENT)
    servers: list[dict[str, str]] = []
    if public_server_url:
        servers.append({"url": public_server_url, "description": "Public server"})
    if "localhost" in origin:
        servers.insert(0, {"url": local_server_url, "description": LOCAL_SERVER_DESCRIPTION})
    document["servers"] = servers
    return document
