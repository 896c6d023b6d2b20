"""Transcription to Obsidian note conversion."""
