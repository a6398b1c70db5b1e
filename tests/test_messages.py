import json

import pytest

from instabot.buttons import PostBackButton, URLButton
from instabot.messages import (
    AudioMessage,
    FileMessage,
    GenericTemplateMessage,
    ImageMessage,
    MediaShareMessage,
    MessageType,
    ProductTemplateMessage,
    StickerMessage,
    StickerType,
    TextMessage,
    VideoMessage,
)
from instabot.quick_reply import QuickReply
from instabot.template import GenericTemplateElement, ProductTemplateElement, TemplateType

SITE = "https://shop.example.com"
IMAGE = SITE + "/logo.png"
VIEW = SITE + "/view?item=7"
SUBTITLE = "A hat for every head."
PAYLOAD = "DEVELOPER_DEFINED_PAYLOAD"

DEFAULT_ACTION = {"type": "web_url", "url": VIEW}
BUTTONS = [
    {"type": "web_url", "url": SITE, "title": "View Website"},
    {"type": "postback", "title": "Start Chatting", "payload": PAYLOAD},
]


def _welcome(**kwargs):
    return GenericTemplateElement("Welcome!", image_url=IMAGE, subtitle=SUBTITLE, **kwargs)


def _element(**extra):
    return {"title": "Welcome!", "image_url": IMAGE, "subtitle": SUBTITLE, **extra}


def _template(kind, elements):
    return {"attachment": {"type": "template", "payload": {"template_type": kind, "elements": elements}}}


def _attachment(kind, payload):
    return {"attachment": {"type": kind, "payload": payload}}


def _reply(number):
    return {"content_type": "text", "title": f"<TITLE_{number}>", "payload": f"<PAYLOAD_{number}>"}


@pytest.mark.parametrize(
    "message, expected",
    [
        (TextMessage("Hello, world"), MessageType.TEXT),
        (ImageMessage("www.image.com"), MessageType.IMAGE),
        (StickerMessage(StickerType.HEART), MessageType.STICKER),
        (MediaShareMessage("1000"), MessageType.MEDIA_SHARE),
        (GenericTemplateMessage([]), MessageType.TEMPLATE),
        (ProductTemplateMessage([]), MessageType.TEMPLATE),
    ],
)
def test_message_type(message, expected):
    assert message.type == expected


@pytest.mark.parametrize(
    "message, expected",
    [
        (GenericTemplateMessage([]), TemplateType.GENERIC),
        (ProductTemplateMessage([]), TemplateType.PRODUCT),
    ],
)
def test_template_message_type(message, expected):
    assert message.template_type == expected


@pytest.mark.parametrize(
    "message, expected",
    [
        (TextMessage("<TEXT>"), {"text": "<TEXT>"}),
        (
            TextMessage(
                "<SOME_TEXT>",
                quick_replies=[QuickReply("<TITLE_1>", "<PAYLOAD_1>"), QuickReply("<TITLE_2>", "<PAYLOAD_2>")],
            ),
            {"text": "<SOME_TEXT>", "quick_replies": [_reply(1), _reply(2)]},
        ),
        (ImageMessage("<ASSET_URL>"), _attachment("image", {"url": "<ASSET_URL>"})),
        (StickerMessage(StickerType.HEART), {"attachment": {"type": "like_heart"}}),
        (MediaShareMessage("<MEDIA_ID>"), _attachment("media_share", {"id": "<MEDIA_ID>"})),
        (
            GenericTemplateMessage(
                [
                    _welcome(
                        default_action=VIEW,
                        buttons=[URLButton("View Website", SITE), PostBackButton("Start Chatting", PAYLOAD)],
                    )
                ]
            ),
            _template("generic", [_element(default_action=DEFAULT_ACTION, buttons=BUTTONS)]),
        ),
        (
            GenericTemplateMessage([_welcome(default_action=VIEW)]),
            _template("generic", [_element(default_action=DEFAULT_ACTION)]),
        ),
        (GenericTemplateMessage([_welcome()]), _template("generic", [_element()])),
        (
            ProductTemplateMessage([ProductTemplateElement("<P1>"), ProductTemplateElement("<P2>")]),
            _template("product", [{"id": "<P1>"}, {"id": "<P2>"}]),
        ),
    ],
)
def test_message_json(message, expected):
    assert json.loads(json.dumps(message.to_dict())) == expected


def test_audio_and_file_messages():
    assert AudioMessage("<URL>").to_dict() == _attachment("audio", {"url": "<URL>"})
    assert FileMessage("<URL>").to_dict() == _attachment("file", {"url": "<URL>"})


def test_video_message_is_sent_as_file():
    message = VideoMessage("<URL>")
    assert message.type == MessageType.FILE
    assert message.to_dict() == _attachment("file", {"url": "<URL>"})


def test_attach_quick_replies_replaces_items():
    message = TextMessage("<TEXT>")
    message.attach_quick_replies([QuickReply("<TITLE_1>", "<PAYLOAD_1>")])
    assert message.to_dict()["quick_replies"] == [_reply(1)]
    message.attach_quick_replies(None)
    assert message.to_dict() == {"text": "<TEXT>"}