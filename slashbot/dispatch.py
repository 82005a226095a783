# Route incoming interactions to slash commands

import logging
import discord

logger = logging.getLogger(__name__)

UNKNOWN_COMMAND_MESSAGE = "This command is not recognized."
COMMAND_FAILED_MESSAGE = "There was an error executing this command. Please try again later."

# Discord application command type for slash commands
CHAT_INPUT = 1

def is_chat_input_command(interaction) -> bool:
    if interaction.type != discord.InteractionType.application_command:
        return False
    data = interaction.data or {}
    return data.get("type", CHAT_INPUT) == CHAT_INPUT

def command_name(interaction):
    return (interaction.data or {}).get("name")

async def send_ephemeral(interaction, content):
    """
    Reply only the invoking user can see. Uses a followup when the interaction
    was already deferred or answered. Send failures are logged, never raised.
    """
    try:
        if interaction.response.is_done():
            await interaction.followup.send(content, ephemeral=True)
        else:
            await interaction.response.send_message(content, ephemeral=True)
    except discord.HTTPException:
        logger.exception("[ERROR] Could not send error response")

async def dispatch_interaction(interaction, dispatch_table) -> None:
    # Buttons, autocomplete, context menus etc. are ignored
    if not is_chat_input_command(interaction):
        return

    name = command_name(interaction)
    command = dispatch_table.get(name)

    if command is None:
        logger.warning(f"[WARNING] Unknown command: {name}")
        await send_ephemeral(interaction, UNKNOWN_COMMAND_MESSAGE)
        return

    logger.info(f"[COMMAND] {interaction.user} used /{name}")

    try:
        await command.execute(interaction)
    except Exception:
        logger.exception(f"[ERROR] Command execution failed: /{name}")
        await send_ephemeral(interaction, COMMAND_FAILED_MESSAGE)
