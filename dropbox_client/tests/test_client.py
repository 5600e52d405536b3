"""Tests for the DropboxClient facade."""

import json

import httpx
import pytest

from dropbox_client import BadRequestError, DropboxClient, ErrorKind, error_kind
from dropbox_client.config import DropboxClientConfig
from dropbox_client.tests.utils.mock_transport import MockTransport


def test_empty_token_is_rejected() -> None:
    with pytest.raises(ValueError):
        DropboxClient("")


def test_default_config_is_used() -> None:
    client = DropboxClient("token")

    assert client.config == DropboxClientConfig()


def test_config_rejects_non_positive_timeout() -> None:
    with pytest.raises(ValueError, match="timeout"):
        DropboxClientConfig(timeout=0)


@pytest.mark.asyncio
async def test_copy_sends_normalized_body(mock_transport: MockTransport) -> None:
    mock_transport.add_response(json_data={"metadata": {"name": "b"}})

    async with DropboxClient("token", transport=mock_transport) as client:
        result = await client.copy("/a/", "b")

    request = mock_transport.requests[0]
    assert str(request.url) == "https://api.dropboxapi.com/2/files/copy"
    assert json.loads(request.content) == {"from_path": "/a", "to_path": "/b"}
    assert result == {"metadata": {"name": "b"}}


@pytest.mark.asyncio
async def test_create_folder_adds_folder_tag(mock_transport: MockTransport) -> None:
    mock_transport.add_response(json_data={"name": "new", "path_display": "/new"})

    async with DropboxClient("token", transport=mock_transport) as client:
        result = await client.create_folder("new")

    assert result[".tag"] == "folder"
    assert result["path_display"] == "/new"


@pytest.mark.asyncio
async def test_delete_conflict_raises_bad_request(mock_transport: MockTransport) -> None:
    mock_transport.add_response(
        status_code=httpx.codes.CONFLICT,
        json_data={"error_summary": "path_lookup/not_found/.."},
    )

    async with DropboxClient("token", transport=mock_transport) as client:
        with pytest.raises(BadRequestError) as exc_info:
            await client.delete("/missing")

    assert exc_info.value.response.status_code == 409
    assert error_kind(exc_info.value) is ErrorKind.BAD_REQUEST


@pytest.mark.asyncio
async def test_server_error_is_not_reclassified(mock_transport: MockTransport) -> None:
    mock_transport.add_response(status_code=httpx.codes.INTERNAL_SERVER_ERROR)

    async with DropboxClient("token", transport=mock_transport) as client:
        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            await client.delete("/a")

    assert type(exc_info.value) is httpx.HTTPStatusError
    assert error_kind(exc_info.value) is ErrorKind.TRANSPORT


@pytest.mark.asyncio
async def test_download_returns_stream_with_metadata(mock_transport: MockTransport) -> None:
    mock_transport.add_response(
        content=b"%PDF-1.7",
        headers={"Dropbox-API-Result": json.dumps({"name": "report.pdf"})},
    )

    async with DropboxClient("token", transport=mock_transport) as client:
        async with await client.download("docs/report.pdf") as stream:
            data = await stream.read()

    request = mock_transport.requests[0]
    assert str(request.url) == "https://content.dropboxapi.com/2/files/download"
    assert json.loads(request.headers["dropbox-api-arg"]) == {"path": "/docs/report.pdf"}
    assert request.headers["content-type"] == "application/octet-stream"
    assert data == b"%PDF-1.7"
    assert stream.metadata == {"name": "report.pdf"}


@pytest.mark.asyncio
async def test_operations_open_client_lazily(mock_transport: MockTransport) -> None:
    mock_transport.add_response(json_data={})
    client = DropboxClient("token", transport=mock_transport)

    await client.delete("/a")
    await client.close()

    assert len(mock_transport.requests) == 1


@pytest.mark.asyncio
async def test_clients_do_not_share_tokens(mock_transport: MockTransport) -> None:
    mock_transport.add_response(json_data={})
    mock_transport.add_response(json_data={})
    mock_transport.add_response(json_data={})

    async with (
        DropboxClient("token-a", transport=mock_transport) as client_a,
        DropboxClient("token-b", transport=mock_transport) as client_b,
    ):
        await client_a.delete("/a")
        await client_b.delete("/b")
        await client_a.delete("/c")

    auth = [request.headers["authorization"] for request in mock_transport.requests]
    assert auth == ["Bearer token-a", "Bearer token-b", "Bearer token-a"]


@pytest.mark.asyncio
async def test_upload_and_thumbnail_use_content_endpoint(mock_transport: MockTransport) -> None:
    mock_transport.add_response(json_data={"name": "img.jpg"})
    mock_transport.add_response(content=b"\xff\xd8thumb")

    async with DropboxClient("token", transport=mock_transport) as client:
        metadata = await client.upload("/img.jpg", b"\xff\xd8image")
        thumbnail = await client.get_thumbnail("/img.jpg")

    upload_request, thumbnail_request = mock_transport.requests
    assert upload_request.content == b"\xff\xd8image"
    assert metadata[".tag"] == "file"
    assert json.loads(thumbnail_request.headers["dropbox-api-arg"]) == {
        "path": "/img.jpg",
        "format": "jpeg",
        "size": "w64h64",
    }
    assert thumbnail == b"\xff\xd8thumb"
