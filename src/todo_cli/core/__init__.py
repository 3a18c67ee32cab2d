"""
Core seams shared by the command layer.

Components:
- ports.py: TodoRepo protocol
- state.py: CommandContext for one invocation
"""
