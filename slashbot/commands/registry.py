# Single list of slash commands, used by both the deploy script and the bot

from types import MappingProxyType
from slashbot.commands.ping import PingCommand
from slashbot.commands.userinfo import UserInfoCommand

COMMANDS = (
    PingCommand(),
    UserInfoCommand(),
)

# Request body for the bulk overwrite endpoint
def command_descriptors(commands=COMMANDS) -> list:
    return [command.descriptor() for command in commands]

def build_dispatch_table(commands=COMMANDS):
    """
    Map command name to command. Built once at startup, the returned mapping
    is read only so handlers running concurrently can share it.
    """
    table = {}
    for command in commands:
        if command.name in table:
            raise ValueError(f"Duplicate command name: {command.name}")
        table[command.name] = command
    return MappingProxyType(table)
