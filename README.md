# instabot

A small client for the Instagram Messaging API (Graph API `v11.0`).

It lets a bot:

- send text, image, audio, file, video, sticker, media-share and template messages,
- set, read and delete ice breakers (the frequently asked questions shown to new users),
- fetch a user's profile,
- parse incoming webhook payloads into typed events.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Creating a client

```python
from instabot.client import Client

bot = Client("token")
```

An empty page access token raises `MissingPageAccessTokenError`
(from `instabot.errors`, a subclass of `ValueError`). A ready
`requests.Session` can be passed with `session=`, and another API root with
`endpoint_base=` (default `https://graph.facebook.com`, see
`instabot.constants`). The access token is added to the query string of every
request.

## Sending messages

```python
from instabot.messages import ImageMessage, StickerMessage, StickerType, TextMessage

bot.send_message("<IGSID>", TextMessage("hello"))
bot.send_message("<IGSID>", ImageMessage("https://example.com/picture.png"))
bot.send_message("<IGSID>", StickerMessage(StickerType.HEART))
```

`send_message` returns a `SendMessageResponse` with `recipient_id` and
`message_id`.

Text messages can carry quick replies, given to the constructor as
`quick_replies=` or attached afterwards:

```python
from instabot.quick_reply import QuickReply

message = TextMessage("Pick one")
message.attach_quick_replies([
    QuickReply("Yes", "ANSWER_YES"),
    QuickReply("No", "ANSWER_NO"),
])
bot.send_message("<IGSID>", message)
```

The other message classes are `AudioMessage`, `FileMessage`, `VideoMessage`
(sent as a `file` attachment) and `MediaShareMessage`.

Generic and product templates are built from `GenericTemplateElement` and
`ProductTemplateElement` (in `instabot.template`), with buttons from
`instabot.buttons` (`URLButton`, `PostBackButton`, `CallButton`,
`LogInButton`, `LogOutButton`), and sent as `GenericTemplateMessage` or
`ProductTemplateMessage`:

```python
from instabot.buttons import PostBackButton, URLButton
from instabot.messages import GenericTemplateMessage
from instabot.template import GenericTemplateElement

element = GenericTemplateElement(
    "Welcome!",
    subtitle="We have the right hat for everyone.",
    image_url="https://example.com/hat.png",
    default_action="https://example.com/view?item=103",
    buttons=[
        URLButton("View Website", "https://example.com"),
        PostBackButton("Start Chatting", "START"),
    ],
)
bot.send_message("<IGSID>", GenericTemplateMessage([element]))
```

Every message, button, quick reply and template element has `to_dict()`,
which returns exactly the JSON object sent to the API. Empty optional fields
of a generic template element are left out.

## Ice breakers

```python
from instabot.ice_breaker import IceBreaker

bot.set_ice_breakers([
    IceBreaker("What are your opening hours?", "HOURS"),
    IceBreaker("Where are you located?", "LOCATION"),
])

current = bot.get_ice_breakers()
for group in current.data:
    for ice_breaker in group.ice_breakers:
        print(ice_breaker.question, ice_breaker.payload)

bot.delete_ice_breakers()
```

## User profiles

```python
profile = bot.get_user_profile("<IGSID>")
print(profile.id, profile.name, profile.profile_pic)
```

## Errors

When the API answers with a non-2xx status, the call raises `ErrorResponse`
(from `instabot.errors`). It has `status_code` and `api_error`, an `APIError`
with `message`, `type`, `code`, `sub_code` and `fbtrace_id`. Its `to_dict()`
gives the JSON form (the sub code under `error_subcode`), and `str()` of the
exception is that JSON.

```python
from instabot.errors import ErrorResponse

try:
    bot.send_message("<IGSID>", TextMessage("hello"))
except ErrorResponse as exc:
    print(exc.status_code, exc.api_error.message)
```

A successful reply whose body is not a JSON object raises `InstabotError`,
the base class of the package's errors. An empty body gives a response with
empty fields.

## Webhooks

Parse the raw body of a webhook request and dispatch on the event type:

```python
from instabot.events import WebhookEventType
from instabot.webhook import WebhookEvent

event = WebhookEvent.from_json(request_body)

for entry in event.entries:
    for messaging in entry.messaging:
        if messaging.type is WebhookEventType.TEXT_MESSAGE:
            print(messaging.get_text_message_event())
        elif messaging.type is WebhookEventType.POST_BACK:
            print(messaging.get_post_back_event())
        elif messaging.type is WebhookEventType.MESSAGE_SEEN:
            print(messaging.get_message_seen_event())
```

Each `Messaging` gets its `type` from its content: echo, deleted and
unsupported flags first, then audio, file, image and video attachments,
message replies, quick replies, shares, story mentions, story replies and
plain text; otherwise read receipts, reactions and postbacks. It stays `None`
when nothing matches. Events listed under an entry's `message` key are used
when `messaging` is empty.

Each `get_*_event()` method on `Messaging` returns a flat event object with
the sender, the recipient, the raw `timestamp`, a `time` property that reads
it as Unix seconds in UTC, and the fields that matter for that kind of event.
`parse_webhook_event(data)` accepts JSON text, bytes or an already decoded
dict. The `changes` of an entry are kept as `Change` objects with the decoded
`value`; `LeadgenValue.from_dict` reads a lead-gen value.

## What this package does not do

It does not run a web server: receiving webhook requests, answering the
subscription check and verifying request signatures are left to the
application. There is no button class for the `game_play` button type, and
calls are synchronous, with no retries.