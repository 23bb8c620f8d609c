"""Standard embed factory functions and colors for consistent UI."""

import discord

# Standard colors for different embed types
STATUS_ERROR = discord.Color.red()
STATUS_SUCCESS = discord.Color.green()
STATUS_INFO = discord.Color.blue()

# Discord rejects embed descriptions longer than this
MAX_DESCRIPTION_LEN = 4096


def error_embed(
    title: str = "❌ Error",
    description: str | None = None,
) -> discord.Embed:
    """Create an error embed.

    Args:
        title: The embed title
        description: Optional description

    Returns:
        A red embed describing a failure
    """
    return discord.Embed(title=title, description=description, color=STATUS_ERROR)


def success_embed(
    title: str,
    description: str | None = None,
    *,
    emoji: str | None = None,
) -> discord.Embed:
    """Create a success embed.

    Args:
        title: The embed title
        description: Optional description
        emoji: Optional emoji to prepend to title

    Returns:
        A green embed indicating success
    """
    full_title = f"{emoji} {title}" if emoji else title
    return discord.Embed(title=full_title, description=description, color=STATUS_SUCCESS)


def info_embed(
    title: str,
    description: str | None = None,
    *,
    emoji: str | None = None,
) -> discord.Embed:
    """Create an informational embed."""
    full_title = f"{emoji} {title}" if emoji else title
    return discord.Embed(title=full_title, description=description, color=STATUS_INFO)


def truncate_lines(lines: list[str], limit: int = MAX_DESCRIPTION_LEN) -> str:
    """Join ``lines`` with newlines, dropping the tail so the result fits ``limit``.

    When lines are dropped a final "...and N more" line says how many.
    """
    text = "\n".join(lines)
    if len(text) <= limit:
        return text

    kept: list[str] = []
    used = 0
    for index, line in enumerate(lines):
        suffix = f"…and {len(lines) - index} more"
        # +1 for the newline before the line and before the suffix
        if used + len(line) + 1 + len(suffix) + 1 > limit:
            kept.append(suffix)
            break
        kept.append(line)
        used += len(line) + 1
    return "\n".join(kept)
