# Base class for slash commands

from abc import ABC, abstractmethod
import discord

class Command(ABC):
    """
    A slash command. The name and description are what gets registered with Discord,
    execute() is what runs when someone uses it.
    """
    name: str = ""
    description: str = ""

    # JSON payload for the command registration endpoint. No options.
    def descriptor(self) -> dict:
        return {"name": self.name, "description": self.description}

    @abstractmethod
    async def execute(self, interaction: discord.Interaction) -> None:
        ...

    def __repr__(self):
        return f"<{type(self).__name__} /{self.name}>"
