# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Real environment variables always win over values in .env.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # Logging
    "TODO_CLI_LOG_LEVEL": "Console logging level on stderr (default: WARNING).",
    "TODO_CLI_LOG_FILE": "Optional log file; receives DEBUG and up (default: unset).",
    # Store
    "TODO_CLI_STORE_PATH": "Store JSON file (default: ~/.todo-cli.json).",
    "TODO_CLI_ON_CORRUPT": "reset (start with an empty store) or fail (abort) (default: reset).",
    "TODO_CLI_ATOMIC_SAVE": "Write via temp file + rename (true/false, default: true).",
}
