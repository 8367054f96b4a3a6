"""Centralized message constants for error messages and log templates."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Command table
    COMMANDS_FILE_UNREADABLE = "Cannot read commands file {path}: {error}"
    COMMANDS_FILE_INVALID_JSON = "Commands file {path} is not valid JSON: {error}"
    COMMANDS_FILE_NOT_A_LIST = "Commands file {path} must contain a JSON list of entries"
    COMMAND_SOURCE_NOT_ITERABLE = "Command source must be a sequence of entries"
    COMMAND_ENTRY_INVALID = "Command entry #{index} is malformed: {error}"
    DUPLICATE_ALIAS = (
        "Command alias '{alias}' is mapped to both '{existing}' and '{new}'"
    )
    EMPTY_ALIAS_LIST = "Command entry must list at least one alias"
    EMPTY_ALIAS = "Command aliases cannot be empty"

    # Voice lifecycle
    GUILD_NOT_FOUND = "Guild {guild_id} is not in the client cache"
    CHANNEL_NOT_VOICE = "Channel {channel_id} is not a voice channel"
    JOIN_TIMEOUT = "Timed out after {timeout}s joining channel {channel_id}"
    JOIN_FORBIDDEN = "No permission to join channel {channel_id}"
    JOIN_CLIENT_ERROR = "Could not join channel {channel_id}: {error}"
    SOUND_FILE_NOT_FOUND = "Sound file {path} does not exist"
    PLAYBACK_TIMEOUT = "Playback of {path} exceeded {timeout}s"
    PLAYBACK_FAILED = "Playback of {path} failed: {error}"
    DISCONNECT_TIMEOUT = "Timed out after {timeout}s leaving voice in guild {guild_id}"
    DISCONNECT_FAILED = "Could not leave voice in guild {guild_id}: {error}"

    # Settings / startup
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"
    DISCORD_TOKEN_REQUIRED = (
        "No bot token provided. Pass it with -t or set DISCORD__TOKEN."
    )
    BOT_NOT_INITIALIZED = "Bot not initialized. Call set_bot() first."
    CONTAINER_NOT_FOUND = "Container not found on bot instance"


class LogTemplates:
    """Log message templates for structured logging.

    Use these with logger.info(), logger.error(), etc. and pass values as parameters
    for proper log formatting and structured logging support.
    """

    # Command table
    COMMANDS_LOADED = "Loaded %d command aliases for %d sounds from %s"
    COMMANDS_LOAD_FAILED = "Could not load command table: %s"

    # Resolution (silent no-ops, debug only)
    RESOLVE_SELF_MESSAGE = "Ignoring own message %s"
    RESOLVE_NO_PREFIX = "Ignoring message without prefix in channel %s"
    RESOLVE_UNKNOWN_COMMAND = "Ignoring unknown command %r from %s"
    RESOLVE_UNKNOWN_CHANNEL = "Ignoring command from channel %s with no known guild"
    RESOLVE_NOT_IN_VOICE = "Ignoring command %r: user %s is not in voice in guild %s"
    RESOLVE_MATCHED = "Resolved %r from %s to %s in guild %s channel %s"

    # Voice lifecycle
    VOICE_CONNECTED = "Connected to voice channel %s in guild %s"
    VOICE_DISCONNECTED = "Disconnected from voice in guild %s"
    VOICE_REUSED = "Reusing voice connection to channel %s in guild %s"
    VOICE_MOVED = "Moved voice connection to channel %s in guild %s"
    VOICE_MOVE_FAILED = "Could not move voice connection in guild %s, reconnecting: %r"
    VOICE_STALE_CLEANUP = "Discarding stale voice client in guild %s"
    VOICE_CLEANUP_FAILED = "Failed to discard voice client in guild %s: %r"
    VOICE_JOIN_CANCELLED = "Join cancelled in guild %s, discarding half-open voice client"
    VOICE_STATE_LEFT = "Bot left voice channel %s in guild %s"
    VOICE_STATE_MOVED = "Bot moved from voice channel %s to %s in guild %s"
    PLAYBACK_STARTED = "Started playing %s in guild %s"
    PLAYBACK_SOURCE_ERROR = "Audio source error in guild %s: %r"

    # Orchestration
    JOIN_FAILED = "Error joining voice channel %s in guild %s: %s"
    SOUND_FAILED = "Error playing %s in guild %s: %s"
    DISCONNECT_FAILED = "Error disconnecting from voice in guild %s: %s"
    SOUND_PLAYED = "Sound played: %s (guild %s)"
    REQUEST_REJECTED = "Rejected %s for guild %s: orchestrator is shutting down"
    ORCHESTRATOR_SHUTDOWN = "Playback orchestrator stopped accepting requests (%d in flight)"
    ORCHESTRATOR_DRAINED = "All in-flight sounds finished"
    ORCHESTRATOR_DRAIN_TIMEOUT = "Timed out after %ss waiting for %d in-flight sound(s)"

    # Bot lifecycle
    BOT_STARTING = "Starting soundboard bot (environment: %s)"
    BOT_STARTING_RUN = "Bot is running. Press CTRL-C to exit."
    BOT_STOPPED = "Bot stopped"
    BOT_KEYBOARD_INTERRUPT = "Received keyboard interrupt, shutting down"
    BOT_FATAL_ERROR = "Fatal error: %s"
    BOT_SETUP = "Setting up bot"
    BOT_SETUP_COMPLETE = "Bot setup complete"
    BOT_CONTAINER_INITIALIZED = "Container initialized"
    BOT_CONTAINER_INIT_FAILED = "Container initialization failed: %s"
    BOT_COG_LOADED = "Loaded cog: %s"
    BOT_COG_LOAD_FAILED = "Failed to load cog %s: %s"
    BOT_COGS_LOADED_SUMMARY = "Cogs loaded: %d ok, %d failed"
    BOT_READY = "Logged in as %s (ID: %s)"
    BOT_CONNECTED_GUILDS = "Connected to %d guild(s)"
    BOT_SHUTTING_DOWN = "Shutting down bot"
    BOT_VOICE_CLEANUP_ERROR = "Error disconnecting voice client during shutdown: %r"
    BOT_CONTAINER_SHUTDOWN = "Container shut down"
    BOT_CONTAINER_SHUTDOWN_ERROR = "Error shutting down container: %r"
    BOT_SHUTDOWN_COMPLETE = "Shutdown complete"
    BOT_SHUTDOWN_TIMEOUT = "Graceful shutdown timed out after %ss"

    # Gateway and guild events
    GATEWAY_DISCONNECTED = "Gateway disconnected with %d sound(s) in flight"
    GATEWAY_RESUMED = "Gateway session resumed"
    GUILD_JOINED = "Joined guild: %s (%s)"
    GUILD_REMOVED = "Removed from guild: %s (%s)"
