"""
Vibera CLI main module.

Command-line access to the Viber bot API using credentials from the environment
(VIBER_AUTH_TOKEN, VIBER_BOT_NAME, VIBER_BOT_AVATAR, VIBER_API_URL).
"""

import asyncio
import json
from collections.abc import Awaitable, Callable
from typing import Any

import aiohttp
import typer
from pydantic import ValidationError

from vibera.core.config.settings import settings
from vibera.core.logging.logger import setup_app_logging
from vibera.messaging.viber.client.viber_client import ViberClient
from vibera.messaging.viber.exceptions import ViberApiError, ViberClientError
from vibera.messaging.viber.models.message_models import TextMessage
from vibera.messaging.viber.utils.error_helpers import (
    describe_status,
    is_authentication_error,
)

app = typer.Typer(help="Vibera - Viber bot API client CLI")


def _build_client() -> ViberClient:
    try:
        bot = settings.bot_configuration()
    except ValueError as e:
        typer.echo(f"❌ {e}", err=True)
        raise typer.Exit(1)

    return ViberClient(bot, api_url=settings.api_url)


def _run(call: Callable[[ViberClient], Awaitable[dict[str, Any]]]) -> None:
    """Run one client call and print its response body as JSON."""
    setup_app_logging()
    client = _build_client()

    try:
        result = asyncio.run(_await(call, client))
    except ViberApiError as e:
        typer.echo(
            f"❌ Viber API error {e.status} ({describe_status(e.status)}): "
            f"{e.status_message or ''}",
            err=True,
        )
        if is_authentication_error(e):
            typer.echo("Check VIBER_AUTH_TOKEN", err=True)
        raise typer.Exit(1)
    except ViberClientError as e:
        typer.echo(f"❌ {e.message}", err=True)
        raise typer.Exit(1)
    except aiohttp.ClientError as e:
        typer.echo(f"❌ Request failed: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(json.dumps(result, indent=2, ensure_ascii=False))


def _text_message(text: str) -> TextMessage:
    try:
        return TextMessage(text=text)
    except ValidationError as e:
        reason = e.errors()[0]["msg"]
        typer.echo(f"❌ Invalid text message: {reason}", err=True)
        raise typer.Exit(1)


def _tracking(raw: str | None) -> Any:
    if not raw:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        typer.echo(f"❌ --tracking-data is not valid JSON: {e}", err=True)
        raise typer.Exit(1)


async def _await(
    call: Callable[[ViberClient], Awaitable[dict[str, Any]]], client: ViberClient
) -> dict[str, Any]:
    # get_user_details / get_online_status raise before returning an awaitable
    return await call(client)


@app.command("set-webhook")
def set_webhook(
    url: str = typer.Argument(None, help="Webhook URL (defaults to VIBER_WEBHOOK_URL)"),
    inline: bool = typer.Option(False, "--inline", help="Register as inline bot"),
):
    """
    Register the bot webhook.

    Examples:
        vibera set-webhook https://example.com/viber
        vibera set-webhook ""        # remove the webhook
    """
    target = url if url is not None else settings.webhook_url
    if target is None:
        typer.echo("❌ No URL given and VIBER_WEBHOOK_URL is not set", err=True)
        raise typer.Exit(1)
    _run(lambda client: client.set_webhook(target, is_inline=inline))


@app.command("account-info")
def account_info():
    """Show the bot account details."""
    _run(lambda client: client.get_account_info())


@app.command("user-details")
def user_details(user_id: str = typer.Argument(..., help="Viber user id")):
    """Show the profile of a subscribed user."""
    _run(lambda client: client.get_user_details(user_id))


@app.command("online")
def online(user_ids: list[str] = typer.Argument(..., help="Up to 100 user ids")):
    """Show the online status of users."""
    _run(lambda client: client.get_online_status(user_ids))


@app.command("send-text")
def send_text(
    receiver: str = typer.Argument(..., help="Viber user id"),
    text: str = typer.Argument(..., help="Message text"),
    tracking_data: str = typer.Option(
        None, "--tracking-data", help="JSON tracking data echoed in callbacks"
    ),
):
    """Send a text message to one user."""
    message = _text_message(text)
    tracking = _tracking(tracking_data)
    _run(
        lambda client: client.send_message(
            receiver, message.type, message, tracking_data=tracking
        )
    )


@app.command("broadcast-text")
def broadcast_text(
    text: str = typer.Argument(..., help="Message text"),
    to: list[str] = typer.Option(..., "--to", help="Receiver id (repeat, max 300)"),
):
    """Broadcast a text message to several users."""
    message = _text_message(text)
    _run(lambda client: client.broadcast_message(to, message.type, message))


if __name__ == "__main__":
    app()
