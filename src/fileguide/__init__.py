"""fileguide: runnable lessons and a documentation check for the file handling tutorial."""

__version__ = "0.1.0"
