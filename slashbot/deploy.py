# Slash command deploy script
# Registers the command list with Discord. Run again whenever commands are added,
# changed or removed. The PUT replaces everything previously registered for the scope.

import logging
import sys
import requests
from slashbot.config import DISCORD_API_BASE, discord_token, client_id, guild_id, log_level, missing_settings
from slashbot.commands.registry import COMMANDS, command_descriptors
from slashbot.logs import setup_logging

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 10
# Discord JSON error code for "Missing Access"
MISSING_ACCESS = 50001

class DeployError(Exception):
    def __init__(self, status, code=None, message=""):
        super().__init__(f"{status} {message}".strip())
        self.status = status
        self.code = code
        self.message = message

    @property
    def kind(self):
        if self.code == MISSING_ACCESS:
            return "missing_access"
        if self.status == 401:
            return "invalid_token"
        if self.status == 403:
            return "forbidden"
        return "unknown"

    @classmethod
    def from_response(cls, response):
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        return cls(response.status_code, body.get("code"), body.get("message") or response.text)

def commands_url(client_id, guild_id=None) -> str:
    if guild_id:
        return f"{DISCORD_API_BASE}/applications/{client_id}/guilds/{guild_id}/commands"
    return f"{DISCORD_API_BASE}/applications/{client_id}/commands"

def deploy_commands(token, client_id, guild_id=None, session=requests):
    headers = {
        "Authorization": f"Bot {token}",
        "Content-Type": "application/json",
    }
    response = session.put(
        commands_url(client_id, guild_id),
        headers=headers,
        json=command_descriptors(),
        timeout=REQUEST_TIMEOUT,
    )
    if response.status_code not in (200, 201):
        raise DeployError.from_response(response)
    return response.json()

REMEDIATION = {
    "missing_access": [
        "Missing Access: Bot is not in the specified guild",
        "Solution: Invite bot to your server first",
    ],
    "invalid_token": [
        "Invalid Token: Check your DISCORD_TOKEN in .env",
        "Solution: Get a new token from Discord Developer Portal",
    ],
    "forbidden": [
        "Forbidden: Bot lacks necessary permissions",
        "Solution: Check bot permissions in Discord Developer Portal",
    ],
    "unknown": [
        "Troubleshooting:",
        "  1. Verify DISCORD_TOKEN in .env is correct",
        "  2. Verify CLIENT_ID in .env is correct",
        "  3. Check bot is invited to the guild (if using GUILD_ID)",
        "  4. Ensure bot has necessary permissions",
    ],
}

def log_failure(error):
    logger.error("===================================")
    logger.error("DEPLOYMENT FAILED")
    logger.error("===================================")
    logger.error(f"Error Details: {error!r}")
    kind = error.kind if isinstance(error, DeployError) else "unknown"
    for line in REMEDIATION[kind]:
        logger.error(line)

def log_next_steps():
    logger.info("===================================")
    logger.info("Deployment Complete!")
    logger.info("===================================")
    logger.info("Next Steps:")
    logger.info("  1. Start your bot: slashbot")
    logger.info("  2. Go to your Discord server")
    logger.info("  3. Type / to see available commands")
    logger.info(f"  4. Use {' or '.join('/' + command.name for command in COMMANDS)}")
    logger.info("Active Developer Badge:")
    logger.info("  - Use any command in your server")
    logger.info("  - Wait 24 hours")
    logger.info("  - Check: https://discord.com/developers/active-developer")

def main(token=None, app_id=None, target_guild_id=None, session=requests) -> int:
    setup_logging(log_level)

    token = discord_token if token is None else token
    app_id = client_id if app_id is None else app_id
    target_guild_id = guild_id if target_guild_id is None else target_guild_id

    # Fail before touching the network
    for name in missing_settings(DISCORD_TOKEN=token, CLIENT_ID=app_id):
        logger.error(f"ERROR: {name} is missing in .env file")
        return 1

    logger.info("===================================")
    logger.info("Starting Slash Commands Deployment")
    logger.info("===================================")
    logger.info(f"Commands to deploy: {len(COMMANDS)}")
    for command in COMMANDS:
        logger.info(f"  - /{command.name}")

    if target_guild_id:
        logger.info("Deployment Type: Guild-Specific (Test Mode)")
        logger.info(f"Target Guild ID: {target_guild_id}")
        logger.info("Commands will be available immediately")
    else:
        logger.info("Deployment Type: Global (Production Mode)")
        logger.warning("Global commands may take up to 1 hour to update")
        logger.info("TIP: Add GUILD_ID to .env for instant testing")

    logger.info("Deploying commands...")
    try:
        registered = deploy_commands(token, app_id, target_guild_id, session=session)
    except (DeployError, requests.RequestException) as e:
        log_failure(e)
        return 1

    scope = "Guild" if target_guild_id else "Global"
    logger.info(f"SUCCESS! {scope} commands deployed successfully")
    logger.info(f"Total commands registered: {len(registered)}")
    if not target_guild_id:
        logger.info("Commands will be available globally within 1 hour")

    log_next_steps()
    return 0

if __name__ == "__main__":
    sys.exit(main())
