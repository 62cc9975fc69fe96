"""Example echo bot: mirrors text messages and answers inline-button presses.

Run with ``BOT_TOKEN`` set in the environment or in a ``.env`` file::

    python main.py
"""

import asyncio
import html

from bot.dispatcher import run_polling
from bot.handler import DefaultUpdateHandler
from config import BOT_TOKEN
from core.logger import TgboundLogger
from tgbound import BotClient, ParseMode, UpdateType, extract_callback_query, extract_message, text_mention
from tgbound.actions import callback_query as callback_actions
from tgbound.actions import message as message_actions
from tgbound.models import InlineKeyboardButton, InlineKeyboardMarkup, Update

logger = TgboundLogger.get_logger()

_KEYBOARD = InlineKeyboardMarkup(
    inline_keyboard=[[InlineKeyboardButton(text="Ping", callback_data="ping")]]
)


async def on_update(client: BotClient, update: Update) -> None:
    message, ok = extract_message(update)
    if ok and message.text:
        greeting = text_mention(message.from_field) if message.from_field else "Someone"
        await message_actions.reply_text(
            message,
            f"{greeting} said: {html.escape(message.text)}",
            as_reply=True,
            parse_mode=ParseMode.HTML,
            reply_markup=_KEYBOARD,
        )
        return

    query, ok = extract_callback_query(update)
    if ok:
        await callback_actions.answer(query, "pong")
        if query.message is not None or query.inline_message_id is not None:
            await callback_actions.edit_text(query, "pong")
        return

    if update.type is UpdateType.UNKNOWN:
        logger.debug("Ignoring update of unknown kind", extra={"update_id": update.update_id})


async def on_error(client: BotClient, exc: Exception) -> None:
    logger.error("Echo bot failed", exc_info=exc)


def main() -> None:
    if not BOT_TOKEN:
        raise EnvironmentError("BOT_TOKEN environment variable is not set or is empty.")

    client = BotClient.from_env()
    logger.info("Echo bot is running. Polling for updates...")
    try:
        asyncio.run(run_polling(client, DefaultUpdateHandler(on_update, on_error)))
    except KeyboardInterrupt:
        logger.info("Echo bot stopped")


if __name__ == "__main__":
    main()
