"""discord.py transport: bot, cogs and adapters."""
