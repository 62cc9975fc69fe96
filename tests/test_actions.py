"""Tests for bound actions: client resolution, default overlay, request shape."""

import sys
import os
from unittest.mock import AsyncMock

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tgbound.actions import callback_query as callback_actions
from tgbound.actions import chat as chat_actions
from tgbound.actions import chat_join_request as join_actions
from tgbound.actions import inline_query as inline_actions
from tgbound.actions import message as message_actions
from tgbound.actions import pre_checkout_query as checkout_actions
from tgbound.actions import shipping_query as shipping_actions
from tgbound.actions import user as user_actions
from tgbound.carrier import propagate
from tgbound.client import BotClient
from tgbound.defaults import ClientDefaults, ParseMode
from tgbound.exceptions import InvalidStateError, MissingClientError
from tgbound.methods import (
    AnswerCallbackQuery,
    AnswerInlineQuery,
    AnswerPreCheckoutQuery,
    AnswerShippingQuery,
    ApproveChatJoinRequest,
    BanChatMember,
    CopyMessage,
    DeclineChatJoinRequest,
    DeleteMessage,
    EditInlineMessageCaption,
    EditInlineMessageText,
    EditMessageReplyMarkup,
    EditMessageText,
    ForwardMessage,
    GetChat,
    PinChatMessage,
    SendAnimation,
    SendAudio,
    SendGame,
    SendInvoice,
    SendMediaGroup,
    SendMessage,
    SendPhoto,
    SendPoll,
    SendVenue,
    SendVideo,
    SendVideoNote,
    SendVoice,
    StopInlineMessageLiveLocation,
)
from tgbound.models import (
    CallbackQuery,
    Chat,
    ChatJoinRequest,
    InlineQuery,
    InlineQueryResultArticle,
    InputMediaAudio,
    InputMediaPhoto,
    InputTextMessageContent,
    LabeledPrice,
    Message,
    PreCheckoutQuery,
    ShippingOption,
    ShippingQuery,
    User,
)

_USER = {"id": 1, "is_bot": False, "first_name": "Ada"}
_MESSAGE = {
    "message_id": 11,
    "date": 0,
    "chat": {"id": 42, "type": "private"},
    "from": _USER,
    "text": "hi",
}


# ── Fixtures ─────────────────────────────────────────────────────────────────


def _client(result=True, **defaults) -> BotClient:
    """Build a client whose submit is an AsyncMock returning *result*."""
    client = BotClient("https://api.example.com/bot123", defaults=ClientDefaults(**defaults))
    client.submit = AsyncMock(return_value=result)
    return client


def _sent(client: BotClient):
    """Return the single request *client* submitted."""
    client.submit.assert_awaited_once()
    return client.submit.await_args.args[0]


def _message(client: BotClient) -> Message:
    return propagate(Message.model_validate(_MESSAGE), client)


def _query(client: BotClient, **fields) -> CallbackQuery:
    data = {"id": "cb1", "from": _USER, "chat_instance": "ci", **fields}
    return propagate(CallbackQuery.model_validate(data), client)


# ── Message actions ──────────────────────────────────────────────────────────


class TestMessageActions:
    """Validate actions bound to a Message."""

    @pytest.mark.asyncio
    async def test_reply_text_targets_chat(self) -> None:
        client = _client()
        await message_actions.reply_text(_message(client), "pong")

        request = _sent(client)
        assert isinstance(request, SendMessage)
        assert request.chat_id == 42
        assert request.text == "pong"
        assert request.reply_to_message_id is None

    @pytest.mark.asyncio
    async def test_as_reply_sets_reply_id(self) -> None:
        client = _client()
        await message_actions.reply_text(_message(client), "pong", as_reply=True)
        assert _sent(client).reply_to_message_id == 11

    @pytest.mark.asyncio
    async def test_explicit_reply_id_used_without_as_reply(self) -> None:
        client = _client()
        await message_actions.reply_text(_message(client), "pong", reply_to_message_id=3)
        assert _sent(client).reply_to_message_id == 3

    @pytest.mark.asyncio
    async def test_defaults_fill_unset_parameters(self) -> None:
        client = _client(parse_mode=ParseMode.HTML, disable_notification=True, protect_content=True)
        await message_actions.reply_text(_message(client), "<b>pong</b>")

        payload = _sent(client).to_payload()
        assert payload["parse_mode"] == "HTML"
        assert payload["disable_notification"] is True
        assert payload["protect_content"] is True

    @pytest.mark.asyncio
    async def test_explicit_parameters_beat_defaults(self) -> None:
        client = _client(parse_mode=ParseMode.HTML, disable_notification=True)
        await message_actions.reply_text(
            _message(client), "*pong*", parse_mode=ParseMode.MARKDOWN_V2, disable_notification=False
        )

        request = _sent(client)
        assert request.parse_mode is ParseMode.MARKDOWN_V2
        assert request.disable_notification is False

    @pytest.mark.asyncio
    async def test_no_defaults_leaves_fields_off_the_wire(self) -> None:
        client = _client()
        await message_actions.reply_text(_message(client), "pong")
        assert _sent(client).to_payload() == {"chat_id": 42, "text": "pong"}

    @pytest.mark.asyncio
    async def test_reply_photo_overlays_caption_parse_mode(self) -> None:
        client = _client(parse_mode=ParseMode.MARKDOWN, disable_web_page_preview=True)
        await message_actions.reply_photo(_message(client), "file-id", caption="*x*")

        request = _sent(client)
        assert isinstance(request, SendPhoto)
        assert request.parse_mode is ParseMode.MARKDOWN
        assert "disable_web_page_preview" not in request.to_payload()

    @pytest.mark.asyncio
    async def test_reply_poll_explanation_parse_mode(self) -> None:
        client = _client(parse_mode=ParseMode.HTML)
        await message_actions.reply_poll(_message(client), "Tea?", ["yes", "no"], explanation="<i>why</i>")

        request = _sent(client)
        assert isinstance(request, SendPoll)
        assert request.explanation_parse_mode is ParseMode.HTML

    @pytest.mark.asyncio
    async def test_result_returned_unchanged(self) -> None:
        sent = Message.model_validate(_MESSAGE)
        client = _client(result=sent)
        assert await message_actions.reply_text(_message(client), "pong") is sent

    @pytest.mark.asyncio
    async def test_unbound_message_raises_before_sending(self) -> None:
        with pytest.raises(MissingClientError):
            await message_actions.reply_text(Message.model_validate(_MESSAGE), "pong")

    @pytest.mark.asyncio
    async def test_edit_text(self) -> None:
        client = _client(disable_web_page_preview=True)
        await message_actions.edit_text(_message(client), "edited")

        request = _sent(client)
        assert isinstance(request, EditMessageText)
        assert (request.chat_id, request.message_id, request.text) == (42, 11, "edited")
        assert request.disable_web_page_preview is True

    @pytest.mark.asyncio
    async def test_edit_reply_markup_removes_keyboard(self) -> None:
        client = _client()
        await message_actions.edit_reply_markup(_message(client))

        request = _sent(client)
        assert isinstance(request, EditMessageReplyMarkup)
        assert request.reply_markup is None

    @pytest.mark.asyncio
    async def test_delete(self) -> None:
        client = _client()
        assert await message_actions.delete(_message(client)) is True
        request = _sent(client)
        assert isinstance(request, DeleteMessage)
        assert (request.chat_id, request.message_id) == (42, 11)

    @pytest.mark.asyncio
    async def test_forward(self) -> None:
        client = _client(protect_content=True)
        await message_actions.forward(_message(client), -100)

        request = _sent(client)
        assert isinstance(request, ForwardMessage)
        assert (request.chat_id, request.from_chat_id, request.message_id) == (-100, 42, 11)
        assert request.protect_content is True

    @pytest.mark.asyncio
    async def test_copy(self) -> None:
        client = _client()
        await message_actions.copy(_message(client), "@channel")

        request = _sent(client)
        assert isinstance(request, CopyMessage)
        assert request.chat_id == "@channel"
        assert request.from_chat_id == 42

    @pytest.mark.asyncio
    async def test_pin_overlays_disable_notification(self) -> None:
        client = _client(disable_notification=True)
        await message_actions.pin(_message(client))

        request = _sent(client)
        assert isinstance(request, PinChatMessage)
        assert request.disable_notification is True


# ── Media, venue, game and invoice replies ───────────────────────────────────


_REPLIES = [
    ("reply_audio", ("audio-id",), SendAudio, True),
    ("reply_video", ("video-id",), SendVideo, True),
    ("reply_animation", ("gif-id",), SendAnimation, True),
    ("reply_voice", ("voice-id",), SendVoice, True),
    ("reply_video_note", ("note-id",), SendVideoNote, False),
    ("reply_venue", (51.5, -0.12, "Office", "1 Main St"), SendVenue, False),
    ("reply_game", ("tetris",), SendGame, False),
    (
        "reply_invoice",
        ("Tea", "Green tea", "order-1", "provider", "EUR", [LabeledPrice(label="Tea", amount=450)]),
        SendInvoice,
        False,
    ),
]


class TestMoreReplies:
    """Every reply_* action shares the overlay and as_reply handling."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name, args, request_type, has_parse_mode", _REPLIES)
    async def test_as_reply_and_defaults(self, name, args, request_type, has_parse_mode) -> None:
        client = _client(
            parse_mode=ParseMode.HTML,
            disable_notification=True,
            protect_content=True,
            allow_sending_without_reply=True,
        )
        await getattr(message_actions, name)(_message(client), *args, as_reply=True)

        request = _sent(client)
        assert isinstance(request, request_type)
        assert request.chat_id == 42
        assert request.reply_to_message_id == 11
        payload = request.to_payload()
        assert payload["disable_notification"] is True
        assert payload["protect_content"] is True
        assert payload["allow_sending_without_reply"] is True
        if has_parse_mode:
            assert payload["parse_mode"] == "HTML"
        else:
            assert "parse_mode" not in payload

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name, args, request_type, has_parse_mode", _REPLIES)
    async def test_explicit_values_beat_defaults(self, name, args, request_type, has_parse_mode) -> None:
        client = _client(disable_notification=True, protect_content=True)
        await getattr(message_actions, name)(
            _message(client), *args, disable_notification=False, protect_content=False, reply_to_message_id=3
        )

        request = _sent(client)
        assert request.disable_notification is False
        assert request.protect_content is False
        assert request.reply_to_message_id == 3

    @pytest.mark.asyncio
    async def test_reply_audio_fields(self) -> None:
        client = _client()
        await message_actions.reply_audio(_message(client), "audio-id", performer="Band", title="Song", duration=90)

        assert _sent(client).to_payload() == {
            "chat_id": 42,
            "audio": "audio-id",
            "performer": "Band",
            "title": "Song",
            "duration": 90,
        }

    @pytest.mark.asyncio
    async def test_reply_venue_fields(self) -> None:
        client = _client()
        await message_actions.reply_venue(_message(client), 51.5, -0.12, "Office", "1 Main St", google_place_id="g1")

        request = _sent(client)
        assert request.method_name == "sendVenue"
        assert (request.title, request.address, request.google_place_id) == ("Office", "1 Main St", "g1")

    @pytest.mark.asyncio
    async def test_reply_invoice_payload(self) -> None:
        client = _client()
        await message_actions.reply_invoice(
            _message(client),
            "Tea",
            "Green tea",
            "order-1",
            "provider",
            "EUR",
            [LabeledPrice(label="Tea", amount=450)],
            need_email=True,
        )

        payload = _sent(client).to_payload()
        assert payload["prices"] == [{"label": "Tea", "amount": 450}]
        assert payload["currency"] == "EUR"
        assert payload["need_email"] is True

    @pytest.mark.asyncio
    async def test_reply_media_group(self) -> None:
        album = [Message.model_validate(_MESSAGE), Message.model_validate({**_MESSAGE, "message_id": 12})]
        client = _client(result=album, protect_content=True)
        media = [InputMediaPhoto(media="p1"), InputMediaAudio(media="a1", performer="Band")]

        result = await message_actions.reply_media_group(_message(client), media, as_reply=True)

        request = _sent(client)
        assert isinstance(request, SendMediaGroup)
        assert request.reply_to_message_id == 11
        assert request.protect_content is True
        payload = request.to_payload()
        assert [item["type"] for item in payload["media"]] == ["photo", "audio"]
        assert "reply_markup" not in payload
        assert result is album

    def test_media_group_result_type(self) -> None:
        request = SendMediaGroup(chat_id=1, media=[InputMediaPhoto(media="p1")])
        parsed = request.parse_result([_MESSAGE, {**_MESSAGE, "message_id": 12}])
        assert [m.message_id for m in parsed] == [11, 12]
        assert all(isinstance(m, Message) for m in parsed)


# ── Callback query actions ───────────────────────────────────────────────────


class TestCallbackQueryActions:
    """Validate answer and dual-target edits."""

    @pytest.mark.asyncio
    async def test_answer(self) -> None:
        client = _client()
        await callback_actions.answer(_query(client, message=_MESSAGE), "done", show_alert=True)

        request = _sent(client)
        assert isinstance(request, AnswerCallbackQuery)
        assert request.to_payload() == {"callback_query_id": "cb1", "text": "done", "show_alert": True}

    @pytest.mark.asyncio
    async def test_edit_text_on_chat_message_returns_message(self) -> None:
        edited = Message.model_validate(_MESSAGE)
        client = _client(result=edited, parse_mode=ParseMode.HTML)

        result = await callback_actions.edit_text(_query(client, message=_MESSAGE), "new")

        request = _sent(client)
        assert isinstance(request, EditMessageText)
        assert (request.chat_id, request.message_id) == (42, 11)
        assert request.parse_mode is ParseMode.HTML
        assert result is edited

    @pytest.mark.asyncio
    async def test_edit_text_on_inline_message_returns_none(self) -> None:
        client = _client(result=True, parse_mode=ParseMode.HTML)

        result = await callback_actions.edit_text(_query(client, inline_message_id="inl"), "new")

        request = _sent(client)
        assert isinstance(request, EditInlineMessageText)
        assert request.to_payload() == {"inline_message_id": "inl", "text": "new", "parse_mode": "HTML"}
        assert result is None

    @pytest.mark.asyncio
    async def test_edit_caption_inline(self) -> None:
        client = _client()
        await callback_actions.edit_caption(_query(client, inline_message_id="inl"), "cap")
        assert isinstance(_sent(client), EditInlineMessageCaption)

    @pytest.mark.asyncio
    async def test_stop_live_location_inline(self) -> None:
        client = _client()
        assert await callback_actions.stop_live_location(_query(client, inline_message_id="inl")) is None
        assert isinstance(_sent(client), StopInlineMessageLiveLocation)

    @pytest.mark.asyncio
    async def test_without_any_target_raises(self) -> None:
        client = _client()
        with pytest.raises(InvalidStateError):
            await callback_actions.edit_text(_query(client), "new")
        client.submit.assert_not_awaited()


# ── Chat actions ─────────────────────────────────────────────────────────────


class TestChatActions:
    """Validate actions bound to a Chat."""

    @pytest.mark.asyncio
    async def test_ban_member(self) -> None:
        client = _client()
        chat = propagate(Chat(id=-100, type="supergroup"), client)
        await chat_actions.ban_member(chat, 7, revoke_messages=True)

        request = _sent(client)
        assert isinstance(request, BanChatMember)
        assert request.to_payload() == {"chat_id": -100, "user_id": 7, "revoke_messages": True}

    @pytest.mark.asyncio
    async def test_get(self) -> None:
        client = _client()
        chat = propagate(Chat(id=-100, type="supergroup"), client)
        await chat_actions.get(chat)
        assert isinstance(_sent(client), GetChat)

    @pytest.mark.asyncio
    async def test_pin_message_overlay(self) -> None:
        client = _client(disable_notification=True)
        chat = propagate(Chat(id=-100, type="supergroup"), client)
        await chat_actions.pin_message(chat, 5, disable_notification=False)
        assert _sent(client).disable_notification is False

    @pytest.mark.asyncio
    async def test_chat_of_bound_message(self) -> None:
        """The chat embedded in a received message can act on its own."""
        client = _client()
        await chat_actions.get(_message(client).chat)
        assert _sent(client).chat_id == 42


# ── User actions ─────────────────────────────────────────────────────────────


class TestUserActions:
    """Validate actions bound to a User."""

    @pytest.mark.asyncio
    async def test_pm(self) -> None:
        client = _client(parse_mode=ParseMode.MARKDOWN)
        await user_actions.pm(_message(client).from_field, "hello")

        request = _sent(client)
        assert isinstance(request, SendMessage)
        assert request.chat_id == 1
        assert request.parse_mode is ParseMode.MARKDOWN

    @pytest.mark.asyncio
    async def test_approve_join_request(self) -> None:
        client = _client()
        user = propagate(User.model_validate(_USER), client)
        await user_actions.approve_join_request(user, -100)

        request = _sent(client)
        assert isinstance(request, ApproveChatJoinRequest)
        assert (request.chat_id, request.user_id) == (-100, 1)


# ── Join requests, inline queries, payments ──────────────────────────────────


class TestOtherReceivers:
    """Validate the remaining bound receivers."""

    @pytest.mark.asyncio
    async def test_chat_join_request_decline(self) -> None:
        client = _client()
        request_entity = propagate(
            ChatJoinRequest.model_validate({"chat": {"id": -100, "type": "supergroup"}, "from": _USER, "date": 0}),
            client,
        )
        await join_actions.decline(request_entity)

        request = _sent(client)
        assert isinstance(request, DeclineChatJoinRequest)
        assert (request.chat_id, request.user_id) == (-100, 1)

    @pytest.mark.asyncio
    async def test_inline_query_answer(self) -> None:
        client = _client()
        query = propagate(
            InlineQuery.model_validate({"id": "iq", "from": _USER, "query": "q", "offset": ""}), client
        )
        article = InlineQueryResultArticle(
            id="1", title="Hello", input_message_content=InputTextMessageContent(message_text="Hello")
        )
        await inline_actions.answer(query, [article], cache_time=0)

        request = _sent(client)
        assert isinstance(request, AnswerInlineQuery)
        payload = request.to_payload()
        assert payload["inline_query_id"] == "iq"
        assert payload["results"][0]["type"] == "article"
        assert payload["cache_time"] == 0

    @pytest.mark.asyncio
    async def test_shipping_query_answer_and_error(self) -> None:
        client = _client()
        query = propagate(
            ShippingQuery.model_validate({
                "id": "sq",
                "from": _USER,
                "invoice_payload": "p",
                "shipping_address": {
                    "country_code": "DE", "state": "", "city": "Berlin",
                    "street_line1": "A", "street_line2": "", "post_code": "10115",
                },
            }),
            client,
        )
        option = ShippingOption(id="std", title="Standard", prices=[LabeledPrice(label="Post", amount=500)])
        await shipping_actions.answer(query, [option])
        await shipping_actions.answer_error(query, "No delivery")

        first, second = (call.args[0] for call in client.submit.await_args_list)
        assert isinstance(first, AnswerShippingQuery)
        assert first.ok is True
        assert first.shipping_options[0].id == "std"
        assert second.to_payload() == {"shipping_query_id": "sq", "ok": False, "error_message": "No delivery"}

    @pytest.mark.asyncio
    async def test_pre_checkout_answer(self) -> None:
        client = _client()
        query = propagate(
            PreCheckoutQuery.model_validate({
                "id": "pq", "from": _USER, "currency": "EUR", "total_amount": 500, "invoice_payload": "p",
            }),
            client,
        )
        await checkout_actions.answer(query)

        request = _sent(client)
        assert isinstance(request, AnswerPreCheckoutQuery)
        assert request.to_payload() == {"pre_checkout_query_id": "pq", "ok": True}
