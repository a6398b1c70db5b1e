import json
from urllib.parse import parse_qs, urlsplit

import pytest
import requests
import responses

from instabot.client import Client
from instabot.errors import ErrorResponse, MissingPageAccessTokenError
from instabot.ice_breaker import IceBreaker
from instabot.messages import ImageMessage, TextMessage
from instabot.responses import (
    DeleteIceBreakersResponse,
    GetIceBreakersResponse,
    GetUserProfileResponse,
    SendMessageResponse,
    SetIceBreakersResponse,
)

BASE = "https://graph.facebook.com"
MESSAGES_URL = BASE + "/v11.0/me/messages"
PROFILE_URL = BASE + "/v11.0/me/messenger_profile"


@pytest.fixture
def mock():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def client():
    return Client("token")


def _query(url):
    return parse_qs(urlsplit(url).query)


def _path(url):
    return urlsplit(url).path


def test_empty_token_raises():
    with pytest.raises(MissingPageAccessTokenError):
        Client("")


def test_missing_token_message():
    with pytest.raises(MissingPageAccessTokenError, match="missing page access token"):
        Client("")


def test_invalid_endpoint_base_raises():
    with pytest.raises(ValueError):
        Client("token", endpoint_base="not a uri")


def test_send_message_request_and_response(mock, client):
    mock.add(
        responses.POST,
        MESSAGES_URL,
        json={"recipient_id": "<IGSID>", "message_id": "<MID>"},
        status=200,
    )
    result = client.send_message("<IGSID>", TextMessage("hello"))
    assert result == SendMessageResponse(recipient_id="<IGSID>", message_id="<MID>")

    request = mock.calls[0].request
    assert _path(request.url) == "/v11.0/me/messages"
    assert _query(request.url) == {"access_token": ["token"]}
    assert request.headers["Content-Type"] == "application/json; charset=UTF-8"
    assert json.loads(request.body) == {
        "recipient": {"id": "<IGSID>"},
        "message": {"text": "hello"},
    }


def test_send_message_attachment_body(mock, client):
    mock.add(responses.POST, MESSAGES_URL, json={"recipient_id": "<IGSID>", "message_id": "m1"}, status=200)
    result = client.send_message("<IGSID>", ImageMessage("<ASSET_URL>"))
    assert result == SendMessageResponse(recipient_id="<IGSID>", message_id="m1")
    body = json.loads(mock.calls[0].request.body)
    assert body["message"] == {
        "attachment": {"type": "image", "payload": {"url": "<ASSET_URL>"}}
    }


def test_send_message_empty_body_gives_defaults(mock, client):
    mock.add(responses.POST, MESSAGES_URL, body="", status=200)
    assert client.send_message("<IGSID>", TextMessage("hi")) == SendMessageResponse()


def test_error_status_raises_error_response(mock, client):
    mock.add(
        responses.POST,
        MESSAGES_URL,
        json={
            "error": {
                "message": "Invalid OAuth access token.",
                "type": "OAuthException",
                "code": 190,
                "fbtrace_id": "trace",
            }
        },
        status=400,
    )
    with pytest.raises(ErrorResponse) as info:
        client.send_message("<IGSID>", TextMessage("hi"))
    assert info.value.status_code == 400
    assert info.value.api_error.code == 190
    assert info.value.api_error.type == "OAuthException"


def test_error_status_with_unreadable_body(mock, client):
    mock.add(responses.GET, PROFILE_URL, body="oops", status=500)
    with pytest.raises(ErrorResponse) as info:
        client.get_ice_breakers()
    assert info.value.status_code == 500


def test_set_ice_breakers(mock, client):
    mock.add(responses.POST, PROFILE_URL, json={"result": "success"}, status=200)
    result = client.set_ice_breakers(
        [IceBreaker("question 1", "payload 1"), IceBreaker("question 2", "payload 2")]
    )
    assert result == SetIceBreakersResponse(result="success")

    request = mock.calls[0].request
    assert request.method == "POST"
    assert _query(request.url) == {"access_token": ["token"]}
    assert json.loads(request.body) == {
        "platform": "instagram",
        "ice_breakers": [
            {"question": "question 1", "payload": "payload 1"},
            {"question": "question 2", "payload": "payload 2"},
        ],
    }


def test_get_ice_breakers(mock, client):
    mock.add(
        responses.GET,
        PROFILE_URL,
        json={"data": [{"ice_breakers": [{"question": "q", "payload": "p"}]}]},
        status=200,
    )
    result = client.get_ice_breakers()
    assert isinstance(result, GetIceBreakersResponse)
    assert result.data[0].ice_breakers == [IceBreaker("q", "p")]

    request = mock.calls[0].request
    assert request.method == "GET"
    assert _query(request.url) == {
        "access_token": ["token"],
        "fields": ["ice_breakers"],
        "platform": ["instagram"],
    }


def test_delete_ice_breakers(mock, client):
    mock.add(responses.DELETE, PROFILE_URL, json={"result": "success"}, status=200)
    result = client.delete_ice_breakers()
    assert result == DeleteIceBreakersResponse(result="success")

    request = mock.calls[0].request
    assert request.method == "DELETE"
    assert _query(request.url) == {"access_token": ["token"], "platform": ["instagram"]}
    assert request.headers["Content-Type"] == "application/json; charset=UTF-8"
    assert json.loads(request.body) == {"fields": ["ice_breakers"]}


def test_get_user_profile(mock, client):
    mock.add(
        responses.GET,
        BASE + "/v11.0/12345",
        json={"id": "12345", "name": "Someone", "profile_pic": "<CDN_URL>"},
        status=200,
    )
    result = client.get_user_profile("12345")
    assert result == GetUserProfileResponse(id="12345", name="Someone", profile_pic="<CDN_URL>")

    request = mock.calls[0].request
    assert _path(request.url) == "/v11.0/12345"
    assert _query(request.url) == {"access_token": ["token"]}
    assert request.body is None


def test_custom_endpoint_base_with_path(mock):
    custom = Client("token", endpoint_base="https://api.example.com/proxy")
    mock.add(
        responses.POST,
        "https://api.example.com/proxy/v11.0/me/messages",
        json={"recipient_id": "r", "message_id": "m"},
        status=200,
    )
    result = custom.send_message("r", TextMessage("hi"))
    assert result.message_id == "m"
    assert _path(mock.calls[0].request.url) == "/proxy/v11.0/me/messages"


def test_endpoint_base_query_is_kept_for_post(mock):
    custom = Client("token", endpoint_base="https://api.example.com?tag=one")
    mock.add(
        responses.POST,
        "https://api.example.com/v11.0/me/messages",
        json={"recipient_id": "r", "message_id": "m"},
        status=200,
    )
    result = custom.send_message("r", TextMessage("hi"))
    assert result == SendMessageResponse(recipient_id="r", message_id="m")
    assert _query(mock.calls[0].request.url) == {"access_token": ["token"], "tag": ["one"]}


def test_endpoint_base_query_is_replaced_for_get_with_query(mock):
    custom = Client("token", endpoint_base="https://api.example.com?tag=one")
    mock.add(
        responses.GET,
        "https://api.example.com/v11.0/me/messenger_profile",
        json={"data": [{"ice_breakers": [{"question": "q", "payload": "p"}]}]},
        status=200,
    )
    result = custom.get_ice_breakers()
    assert result.data[0].ice_breakers == [IceBreaker("q", "p")]
    query = _query(mock.calls[0].request.url)
    assert "tag" not in query
    assert query["access_token"] == ["token"]


def test_given_session_is_used(mock):
    session = requests.Session()
    session.headers["X-Probe"] = "yes"
    custom = Client("token", session=session)
    mock.add(responses.POST, MESSAGES_URL, json={"recipient_id": "r", "message_id": "m"}, status=200)
    result = custom.send_message("r", TextMessage("hi"))
    assert result == SendMessageResponse(recipient_id="r", message_id="m")
    assert mock.calls[0].request.headers["X-Probe"] == "yes"