# Main bot running script
# Build the dispatch table and run the bot

import asyncio
import logging
import sys
from datetime import datetime
import discord
from slashbot.config import discord_token, log_level
from slashbot.commands.registry import build_dispatch_table
from slashbot.dispatch import dispatch_interaction
from slashbot.logs import setup_logging

logger = logging.getLogger(__name__)

# Top level error policy: log and keep the bot up, nothing exits or alerts.
def handle_loop_exception(loop, context):
    exception = context.get("exception")
    message = context.get("message", "Unhandled error in event loop")
    if exception is not None:
        logger.error(f"[UNHANDLED REJECTION] {message}", exc_info=exception)
    else:
        logger.error(f"[UNHANDLED REJECTION] {message}")

def handle_uncaught_exception(exc_type, exc_value, exc_traceback):
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return
    logger.critical("[UNCAUGHT EXCEPTION]", exc_info=(exc_type, exc_value, exc_traceback))

def install_excepthook():
    sys.excepthook = handle_uncaught_exception

class SlashBot(discord.Client):
    def __init__(self, dispatch_table, **kwargs):
        # Slash commands only need the guilds intent
        intents = discord.Intents.none()
        intents.guilds = True
        super().__init__(intents=intents, **kwargs)
        self.dispatch_table = dispatch_table

    async def setup_hook(self):
        asyncio.get_running_loop().set_exception_handler(handle_loop_exception)

    async def on_ready(self):
        logger.info("===================================")
        logger.info("Discord Bot Started Successfully")
        logger.info("===================================")
        logger.info(f"Logged in as: {self.user}")
        logger.info(f"Servers: {len(self.guilds)}")
        logger.info(f"Users: {len(self.users)}")
        logger.info(f"Ready at: {datetime.now():%Y-%m-%d %H:%M:%S}")
        logger.info("===================================")

        await self.change_presence(
            activity=discord.Game(name="slash commands"),
            status=discord.Status.online,
        )

    # discord.py runs each event in its own task, so slow commands don't block others
    async def on_interaction(self, interaction: discord.Interaction):
        await dispatch_interaction(interaction, self.dispatch_table)

    async def on_error(self, event_method, /, *args, **kwargs):
        logger.exception(f"[CRITICAL ERROR] Discord client error in {event_method}")

def run(token=None) -> int:
    setup_logging(log_level)
    install_excepthook()

    token = token or discord_token
    if not token:
        logger.critical("[FATAL ERROR] DISCORD_TOKEN is missing in .env file")
        return 1

    client = SlashBot(build_dispatch_table())

    try:
        # Logging is already configured, don't let discord.py add another handler
        client.run(token, log_handler=None)
    except discord.LoginFailure:
        logger.critical("[FATAL ERROR] Failed to login to Discord", exc_info=True)
        logger.critical("Please check your DISCORD_TOKEN in the .env file")
        return 1
    return 0
