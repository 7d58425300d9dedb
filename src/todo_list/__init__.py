"""Per-directory task list manager backed by a plain `.todo` file."""

__version__ = "0.1.0"
