"""
Command-line layer.

Components:
- main.py: argparse entry point and fatal error handling
- bootstrap.py: builds the CommandContext for one invocation
- commands.py: command registry and the add/list/done/remove handlers
- render.py: table formatting for `list`
"""
