"""Adapters — discord.py gateway in, aiohttp webhook out."""
