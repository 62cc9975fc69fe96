"""Request models for the Bot API methods the bound actions use.

Each request knows its API method name and the type of its ``result``.
:meth:`tgbound.client.BotClient.submit` serializes the request with
:meth:`BotRequest.to_payload` and validates the result with
:meth:`BotRequest.parse_result`.

Methods that can address either a chat message or an inline message come
in pairs sharing one method name: ``EditMessageText`` returns the edited
:class:`~tgbound.models.Message`, ``EditInlineMessageText`` only a boolean.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, ClassVar, Dict, List, Optional, Union

from pydantic import BaseModel, TypeAdapter

from tgbound.defaults import ParseMode
from tgbound.models import (
    ChatInviteLink,
    ChatMember,
    ChatPermissions,
    Chat,
    InlineKeyboardMarkup,
    InlineQueryResult,
    InputMedia,
    LabeledPrice,
    Message,
    MessageEntity,
    MessageId,
    Poll,
    ReplyMarkup,
    ShippingOption,
    Update,
    User,
    UserProfilePhotos,
)

ChatId = Union[int, str]


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


class BotRequest(BaseModel):
    """Base class for every outgoing request."""

    method_name: ClassVar[str]
    result_type: ClassVar[Any] = bool

    model_config = {"populate_by_name": True}

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready body with unset (``None``) fields left out."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def parse_result(self, raw: Any) -> Any:
        """Validate the ``result`` member of a response against :attr:`result_type`."""
        return _adapter(self.result_type).validate_python(raw)


# ── Getting updates ──────────────────────────────────────────────────────────


class GetUpdates(BotRequest):
    method_name = "getUpdates"
    result_type = List[Update]

    offset: Optional[int] = None
    limit: Optional[int] = None
    timeout: Optional[int] = None
    allowed_updates: Optional[List[str]] = None


class GetMe(BotRequest):
    method_name = "getMe"
    result_type = User


# ── Sending ──────────────────────────────────────────────────────────────────


class _SendRequest(BotRequest):
    """Fields shared by every ``send*`` method."""

    result_type = Message

    chat_id: ChatId
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None
    reply_markup: Optional[ReplyMarkup] = None


class SendMessage(_SendRequest):
    method_name = "sendMessage"

    text: str
    parse_mode: Optional[ParseMode] = None
    entities: Optional[List[MessageEntity]] = None
    disable_web_page_preview: Optional[bool] = None


class SendPhoto(_SendRequest):
    method_name = "sendPhoto"

    photo: str
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None


class SendDocument(_SendRequest):
    method_name = "sendDocument"

    document: str
    thumb: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    disable_content_type_detection: Optional[bool] = None


class SendAudio(_SendRequest):
    method_name = "sendAudio"

    audio: str
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    duration: Optional[int] = None
    performer: Optional[str] = None
    title: Optional[str] = None
    thumb: Optional[str] = None


class SendVideo(_SendRequest):
    method_name = "sendVideo"

    video: str
    duration: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    thumb: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    supports_streaming: Optional[bool] = None


class SendAnimation(_SendRequest):
    method_name = "sendAnimation"

    animation: str
    duration: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    thumb: Optional[str] = None
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None


class SendVoice(_SendRequest):
    method_name = "sendVoice"

    voice: str
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    duration: Optional[int] = None


class SendVideoNote(_SendRequest):
    method_name = "sendVideoNote"

    video_note: str
    duration: Optional[int] = None
    length: Optional[int] = None
    thumb: Optional[str] = None


class SendMediaGroup(BotRequest):
    """Albums take no reply markup and come back as one message per item."""

    method_name = "sendMediaGroup"
    result_type = List[Message]

    chat_id: ChatId
    media: List[InputMedia]
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    reply_to_message_id: Optional[int] = None
    allow_sending_without_reply: Optional[bool] = None


class SendLocation(_SendRequest):
    method_name = "sendLocation"

    latitude: float
    longitude: float
    horizontal_accuracy: Optional[float] = None
    live_period: Optional[int] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None


class SendVenue(_SendRequest):
    method_name = "sendVenue"

    latitude: float
    longitude: float
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None


class SendContact(_SendRequest):
    method_name = "sendContact"

    phone_number: str
    first_name: str
    last_name: Optional[str] = None
    vcard: Optional[str] = None


class SendPoll(_SendRequest):
    method_name = "sendPoll"

    question: str
    options: List[str]
    is_anonymous: Optional[bool] = None
    type: Optional[str] = None
    allows_multiple_answers: Optional[bool] = None
    correct_option_id: Optional[int] = None
    explanation: Optional[str] = None
    explanation_parse_mode: Optional[ParseMode] = None
    open_period: Optional[int] = None
    close_date: Optional[int] = None
    is_closed: Optional[bool] = None


class SendDice(_SendRequest):
    method_name = "sendDice"

    emoji: Optional[str] = None


class SendSticker(_SendRequest):
    method_name = "sendSticker"

    sticker: str


class SendGame(_SendRequest):
    method_name = "sendGame"

    game_short_name: str
    reply_markup: Optional[InlineKeyboardMarkup] = None


class SendInvoice(_SendRequest):
    method_name = "sendInvoice"

    title: str
    description: str
    payload: str
    provider_token: str
    currency: str
    prices: List[LabeledPrice]
    max_tip_amount: Optional[int] = None
    suggested_tip_amounts: Optional[List[int]] = None
    start_parameter: Optional[str] = None
    provider_data: Optional[str] = None
    photo_url: Optional[str] = None
    photo_size: Optional[int] = None
    photo_width: Optional[int] = None
    photo_height: Optional[int] = None
    need_name: Optional[bool] = None
    need_phone_number: Optional[bool] = None
    need_email: Optional[bool] = None
    need_shipping_address: Optional[bool] = None
    send_phone_number_to_provider: Optional[bool] = None
    send_email_to_provider: Optional[bool] = None
    is_flexible: Optional[bool] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class SendChatAction(BotRequest):
    method_name = "sendChatAction"

    chat_id: ChatId
    action: str


class ForwardMessage(BotRequest):
    method_name = "forwardMessage"
    result_type = Message

    chat_id: ChatId
    from_chat_id: ChatId
    message_id: int
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None


class CopyMessage(_SendRequest):
    method_name = "copyMessage"
    result_type = MessageId

    from_chat_id: ChatId
    message_id: int
    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None


# ── Editing (chat-addressed / inline-addressed pairs) ────────────────────────


class _ChatTarget(BotRequest):
    result_type = Message

    chat_id: ChatId
    message_id: int


class _InlineTarget(BotRequest):
    result_type = bool

    inline_message_id: str


class _EditText(BotRequest):
    method_name = "editMessageText"

    text: str
    parse_mode: Optional[ParseMode] = None
    entities: Optional[List[MessageEntity]] = None
    disable_web_page_preview: Optional[bool] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class EditMessageText(_EditText, _ChatTarget):
    pass


class EditInlineMessageText(_EditText, _InlineTarget):
    pass


class _EditCaption(BotRequest):
    method_name = "editMessageCaption"

    caption: Optional[str] = None
    parse_mode: Optional[ParseMode] = None
    caption_entities: Optional[List[MessageEntity]] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class EditMessageCaption(_EditCaption, _ChatTarget):
    pass


class EditInlineMessageCaption(_EditCaption, _InlineTarget):
    pass


class _EditMedia(BotRequest):
    method_name = "editMessageMedia"

    media: InputMedia
    reply_markup: Optional[InlineKeyboardMarkup] = None


class EditMessageMedia(_EditMedia, _ChatTarget):
    pass


class EditInlineMessageMedia(_EditMedia, _InlineTarget):
    pass


class _EditReplyMarkup(BotRequest):
    method_name = "editMessageReplyMarkup"

    reply_markup: Optional[InlineKeyboardMarkup] = None


class EditMessageReplyMarkup(_EditReplyMarkup, _ChatTarget):
    pass


class EditInlineMessageReplyMarkup(_EditReplyMarkup, _InlineTarget):
    pass


class _EditLiveLocation(BotRequest):
    method_name = "editMessageLiveLocation"

    latitude: float
    longitude: float
    horizontal_accuracy: Optional[float] = None
    heading: Optional[int] = None
    proximity_alert_radius: Optional[int] = None
    reply_markup: Optional[InlineKeyboardMarkup] = None


class EditMessageLiveLocation(_EditLiveLocation, _ChatTarget):
    pass


class EditInlineMessageLiveLocation(_EditLiveLocation, _InlineTarget):
    pass


class _StopLiveLocation(BotRequest):
    method_name = "stopMessageLiveLocation"

    reply_markup: Optional[InlineKeyboardMarkup] = None


class StopMessageLiveLocation(_StopLiveLocation, _ChatTarget):
    pass


class StopInlineMessageLiveLocation(_StopLiveLocation, _InlineTarget):
    pass


class StopPoll(BotRequest):
    method_name = "stopPoll"
    result_type = Poll

    chat_id: ChatId
    message_id: int
    reply_markup: Optional[InlineKeyboardMarkup] = None


class DeleteMessage(BotRequest):
    method_name = "deleteMessage"

    chat_id: ChatId
    message_id: int


# ── Chat administration ──────────────────────────────────────────────────────


class _ChatRequest(BotRequest):
    chat_id: ChatId


class _ChatMemberRequest(_ChatRequest):
    user_id: int


class BanChatMember(_ChatMemberRequest):
    method_name = "banChatMember"

    until_date: Optional[int] = None
    revoke_messages: Optional[bool] = None


class UnbanChatMember(_ChatMemberRequest):
    method_name = "unbanChatMember"

    only_if_banned: Optional[bool] = None


class RestrictChatMember(_ChatMemberRequest):
    method_name = "restrictChatMember"

    permissions: ChatPermissions
    until_date: Optional[int] = None


class PromoteChatMember(_ChatMemberRequest):
    method_name = "promoteChatMember"

    is_anonymous: Optional[bool] = None
    can_manage_chat: Optional[bool] = None
    can_post_messages: Optional[bool] = None
    can_edit_messages: Optional[bool] = None
    can_delete_messages: Optional[bool] = None
    can_manage_video_chats: Optional[bool] = None
    can_restrict_members: Optional[bool] = None
    can_promote_members: Optional[bool] = None
    can_change_info: Optional[bool] = None
    can_invite_users: Optional[bool] = None
    can_pin_messages: Optional[bool] = None


class SetChatAdministratorCustomTitle(_ChatMemberRequest):
    method_name = "setChatAdministratorCustomTitle"

    custom_title: str


class BanChatSenderChat(_ChatRequest):
    method_name = "banChatSenderChat"

    sender_chat_id: int


class UnbanChatSenderChat(_ChatRequest):
    method_name = "unbanChatSenderChat"

    sender_chat_id: int


class SetChatPermissions(_ChatRequest):
    method_name = "setChatPermissions"

    permissions: ChatPermissions


class ExportChatInviteLink(_ChatRequest):
    method_name = "exportChatInviteLink"
    result_type = str


class CreateChatInviteLink(_ChatRequest):
    method_name = "createChatInviteLink"
    result_type = ChatInviteLink

    name: Optional[str] = None
    expire_date: Optional[int] = None
    member_limit: Optional[int] = None
    creates_join_request: Optional[bool] = None


class EditChatInviteLink(_ChatRequest):
    method_name = "editChatInviteLink"
    result_type = ChatInviteLink

    invite_link: str
    name: Optional[str] = None
    expire_date: Optional[int] = None
    member_limit: Optional[int] = None
    creates_join_request: Optional[bool] = None


class RevokeChatInviteLink(_ChatRequest):
    method_name = "revokeChatInviteLink"
    result_type = ChatInviteLink

    invite_link: str


class ApproveChatJoinRequest(_ChatMemberRequest):
    method_name = "approveChatJoinRequest"


class DeclineChatJoinRequest(_ChatMemberRequest):
    method_name = "declineChatJoinRequest"


class DeleteChatPhoto(_ChatRequest):
    method_name = "deleteChatPhoto"


class SetChatTitle(_ChatRequest):
    method_name = "setChatTitle"

    title: str


class SetChatDescription(_ChatRequest):
    method_name = "setChatDescription"

    description: Optional[str] = None


class PinChatMessage(_ChatRequest):
    method_name = "pinChatMessage"

    message_id: int
    disable_notification: Optional[bool] = None


class UnpinChatMessage(_ChatRequest):
    method_name = "unpinChatMessage"

    message_id: Optional[int] = None


class UnpinAllChatMessages(_ChatRequest):
    method_name = "unpinAllChatMessages"


class LeaveChat(_ChatRequest):
    method_name = "leaveChat"


class GetChat(_ChatRequest):
    method_name = "getChat"
    result_type = Chat


class GetChatAdministrators(_ChatRequest):
    method_name = "getChatAdministrators"
    result_type = List[ChatMember]


class GetChatMemberCount(_ChatRequest):
    method_name = "getChatMemberCount"
    result_type = int


class GetChatMember(_ChatMemberRequest):
    method_name = "getChatMember"
    result_type = ChatMember


class SetChatStickerSet(_ChatRequest):
    method_name = "setChatStickerSet"

    sticker_set_name: str


class DeleteChatStickerSet(_ChatRequest):
    method_name = "deleteChatStickerSet"


# ── Users ────────────────────────────────────────────────────────────────────


class GetUserProfilePhotos(BotRequest):
    method_name = "getUserProfilePhotos"
    result_type = UserProfilePhotos

    user_id: int
    offset: Optional[int] = None
    limit: Optional[int] = None


# ── Answering queries ────────────────────────────────────────────────────────


class AnswerCallbackQuery(BotRequest):
    method_name = "answerCallbackQuery"

    callback_query_id: str
    text: Optional[str] = None
    show_alert: Optional[bool] = None
    url: Optional[str] = None
    cache_time: Optional[int] = None


class AnswerInlineQuery(BotRequest):
    method_name = "answerInlineQuery"

    inline_query_id: str
    results: List[InlineQueryResult]
    cache_time: Optional[int] = None
    is_personal: Optional[bool] = None
    next_offset: Optional[str] = None
    switch_pm_text: Optional[str] = None
    switch_pm_parameter: Optional[str] = None


class AnswerShippingQuery(BotRequest):
    method_name = "answerShippingQuery"

    shipping_query_id: str
    ok: bool
    shipping_options: Optional[List[ShippingOption]] = None
    error_message: Optional[str] = None


class AnswerPreCheckoutQuery(BotRequest):
    method_name = "answerPreCheckoutQuery"

    pre_checkout_query_id: str
    ok: bool
    error_message: Optional[str] = None
