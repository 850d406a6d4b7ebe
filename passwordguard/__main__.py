import os

from dotenv import load_dotenv

from passwordguard.cli.commands import app

# Load .env file from ~/.passwordguard/ if it exists
# Precedence: existing env vars > .env file (override=False)
load_dotenv(os.path.expanduser("~/.passwordguard/.env"), override=False)

if __name__ == "__main__":
    app()
