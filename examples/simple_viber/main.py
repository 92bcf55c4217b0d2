"""
Simple Vibera example: register a webhook, look up a user and greet them.

SETUP REQUIRED:
Create a .env file with your Viber bot credentials:

    VIBER_AUTH_TOKEN=your_bot_auth_token_here
    VIBER_BOT_NAME=Echo Bot
    VIBER_WEBHOOK_URL=https://your-domain.example/viber
    DEMO_USER_ID=a_subscribed_user_id

Run with:
    python examples/simple_viber/main.py
"""

import asyncio
import os

import aiohttp

from vibera import ViberApiError, ViberClient, __version__
from vibera.core.config.settings import settings
from vibera.core.logging import get_logger, setup_app_logging
from vibera.messaging.viber.models import Keyboard, TextMessage
from vibera.messaging.viber.utils import describe_status

logger = get_logger(__name__)


async def main() -> None:
    setup_app_logging()
    logger.info("Vibera %s demo", __version__)

    async with aiohttp.ClientSession() as session:
        client = ViberClient(settings.bot_configuration(), session=session)

        if settings.webhook_url:
            await client.set_webhook(settings.webhook_url)

        account = await client.get_account_info()
        logger.info("Bot %s has %s subscribers", account.get("name"), account.get("subscribers_count"))

        user_id = os.getenv("DEMO_USER_ID")
        if not user_id:
            return

        try:
            details = await client.get_user_details(user_id)
            name = details.get("user", {}).get("name", "there")

            greeting = TextMessage(text=f"Hi {name}! 👋")
            keyboard = Keyboard(
                buttons=[{"ActionType": "reply", "ActionBody": "menu", "Text": "Menu"}]
            )
            result = await client.send_message(
                user_id,
                greeting.type,
                greeting,
                tracking_data={"flow": "greeting"},
                keyboard=keyboard,
            )
            logger.info("Sent message %s", result["message_token"])
        except ViberApiError as e:
            logger.error("Viber refused the request: %s", describe_status(e.status))


if __name__ == "__main__":
    asyncio.run(main())
