# src/wrapsnake/agents/__init__.py
"""Headless environment and fixed policies that play the game without a keyboard."""
