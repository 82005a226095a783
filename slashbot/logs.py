# Logging setup shared by the bot and the deploy script

import logging
import discord

def resolve_level(level) -> int:
    if isinstance(level, int):
        return level
    if str(level).strip().isdigit():
        return int(level)
    resolved = logging.getLevelName(str(level).upper())
    # getLevelName returns "Level X" for names it does not know
    return resolved if isinstance(resolved, int) else logging.INFO

# Use discord.py's own formatter so library and bot lines look the same
def setup_logging(level="INFO"):
    discord.utils.setup_logging(level=resolve_level(level), root=True)
