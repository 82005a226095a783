# Load tokens and ids from .env

import os
from dotenv import load_dotenv

load_dotenv()

DISCORD_API_BASE = "https://discord.com/api/v10"

discord_token = os.getenv("DISCORD_TOKEN")
client_id = os.getenv("CLIENT_ID")
# Optional. Set for instant guild deploys while testing, leave unset for global
guild_id = os.getenv("GUILD_ID")
log_level = os.getenv("LOG_LEVEL", "INFO")

# Names of required settings that are empty, in the order given
def missing_settings(**settings):
    return [name for name, value in settings.items() if not value]
