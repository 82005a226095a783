# Health check command: gateway heartbeat and API round trip

import logging
import math
import time
import discord
from slashbot.commands.base import Command

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "An error occurred while executing this command."

# Heartbeat latency in ms, None until the first heartbeat has been acknowledged
def websocket_latency_ms(client):
    latency = client.latency
    if latency is None or math.isnan(latency) or math.isinf(latency):
        return None
    return round(latency * 1000)

def format_ms(value):
    return "N/A" if value is None else f"{value}ms"

def format_pong(ws_ping, api_latency) -> str:
    return (
        "\U0001F3D3 Pong!\n\n"
        f"**WebSocket Ping:** {format_ms(ws_ping)}\n"
        f"**API Latency:** {format_ms(api_latency)}"
    )

class PingCommand(Command):
    name = "ping"
    description = "Replies with Pong! and bot latency"

    def __init__(self, clock=time.monotonic):
        self.clock = clock

    async def execute(self, interaction: discord.Interaction) -> None:
        try:
            ws_ping = websocket_latency_ms(interaction.client)

            # Time the defer round trip
            sent = self.clock()
            await interaction.response.defer()
            api_latency = max(0, round((self.clock() - sent) * 1000))

            await interaction.edit_original_response(content=format_pong(ws_ping, api_latency))

            logger.info(f"[PING] Executed by {interaction.user} | WS: {format_ms(ws_ping)} | API: {api_latency}ms")
        except Exception:
            logger.exception("[ERROR] Ping command failed")
            if interaction.response.is_done():
                await interaction.edit_original_response(content=ERROR_MESSAGE)
            else:
                await interaction.response.send_message(ERROR_MESSAGE, ephemeral=True)
