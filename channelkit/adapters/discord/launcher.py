"""Launcher — connects a discord.Client and exposes it as a ChannelOwner."""

import asyncio
import sys
from typing import Tuple

import discord

from channelkit.config import CONFIG
from channelkit.adapters.discord.owner import DiscordChannelOwner, message_from_discord


def _log(msg: str):
    print(msg, file=sys.stderr)


def create_client() -> Tuple[discord.Client, DiscordChannelOwner]:
    """Build a client and its owner, wiring gateway events into the owner."""
    intents = discord.Intents.default()
    client = discord.Client(intents=intents)
    owner = DiscordChannelOwner(client)

    @client.event
    async def on_ready():
        _log(f"[channelkit] logged in as {client.user}")

    @client.event
    async def on_message(message: discord.Message):
        owner.observe_message(message_from_discord(message))

    return client, owner


async def launch(token: str) -> None:
    client, _owner = create_client()
    async with client:
        await client.start(token)


def main():
    token = CONFIG["discord_token"]
    if not token:
        _log("[channelkit] DISCORD_BOT_TOKEN is not set, nothing to launch")
        sys.exit(1)
    asyncio.run(launch(token))


if __name__ == "__main__":
    main()
