"""Voice Inbox Server: converts voice transcriptions into Obsidian notes."""

__version__ = "0.1.0"
