# Profile info command: show details about the user who ran it

import logging
from datetime import datetime
import pytz
import discord
from slashbot.commands.base import Command

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "An error occurred while fetching user information."

# e.g. March 7, 2021
def format_date(dt: datetime) -> str:
    dt = dt.astimezone(pytz.utc)
    return f"{dt:%B} {dt.day}, {dt.year}"

# Whole days elapsed, rounded down
def account_age_days(created_at: datetime, now: datetime) -> int:
    return (now - created_at).days

def format_user_info(user, now=None) -> str:
    if now is None:
        now = datetime.now(pytz.utc)

    # Only guild members carry a join date, DMs get a plain User
    joined_at = getattr(user, "joined_at", None)
    joined_server = format_date(joined_at) if joined_at else "N/A"

    lines = [
        "\U0001F464 **User Information**",
        "",
        f"**Username:** {user.name}",
        f"**Display Name:** {user.display_name or user.name}",
        f"**User ID:** {user.id}",
        f"**Account Created:** {format_date(user.created_at)}",
        f"**Account Age:** {account_age_days(user.created_at, now)} days",
        f"**Joined Server:** {joined_server}",
        f"**Bot Account:** {'Yes' if user.bot else 'No'}",
        "",
        f"**Avatar URL:** [Click here]({user.display_avatar.url})",
    ]
    return "\n".join(lines)

class UserInfoCommand(Command):
    name = "userinfo"
    description = "Displays information about you or a specified user"

    async def execute(self, interaction: discord.Interaction) -> None:
        try:
            user = interaction.user
            await interaction.response.send_message(format_user_info(user))
            logger.info(f"[USERINFO] Executed by {user} ({user.id})")
        except Exception:
            logger.exception("[ERROR] Userinfo command failed")
            await interaction.response.send_message(ERROR_MESSAGE, ephemeral=True)
