"""Adapters implementing domain lookups and voice ports on top of discord.py."""
