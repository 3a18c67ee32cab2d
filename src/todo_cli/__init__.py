"""todo-cli: a small personal todo list kept in one JSON file."""

__version__ = "0.1.0"
