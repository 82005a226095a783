# Main entry point
import sys
from slashbot.bot import run

def main():
    sys.exit(run())

# Start bot
if __name__ == "__main__":
    main()
