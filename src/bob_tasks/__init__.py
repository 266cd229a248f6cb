"""bob-tasks: a small task list persisted as a plain-text file."""

__version__ = "0.1.0"
