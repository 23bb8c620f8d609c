"""Tests for the embed utility functions."""

import discord

from request_bot.ui.embeds import error_embed, info_embed, success_embed, truncate_lines


def test_error_embed_defaults():
    """Test error_embed with default values."""
    description = "Something went wrong"
    embed = error_embed(description=description)

    assert embed.title == "❌ Error"
    assert embed.description == description
    assert embed.color == discord.Color.red()


def test_error_embed_custom_title():
    """Test error_embed with a custom title."""
    embed = error_embed(title="Oops!", description="Something went wrong")

    assert embed.title == "Oops!"
    assert embed.color == discord.Color.red()


def test_success_embed():
    """Test the success_embed helper function."""
    embed = success_embed("Success Title", "Success Description", emoji="🎬")

    assert embed.title == "🎬 Success Title"
    assert embed.description == "Success Description"
    assert embed.color == discord.Color.green()


def test_info_embed():
    """Test the info_embed helper function."""
    embed = info_embed("Info Title", "Info Description")

    assert embed.title == "Info Title"
    assert embed.description == "Info Description"
    assert embed.color == discord.Color.blue()


def test_truncate_lines_keeps_short_text():
    assert truncate_lines(["a", "b"]) == "a\nb"


def test_truncate_lines_reports_dropped_lines():
    lines = [f"line {n:02d}" for n in range(10)]

    text = truncate_lines(lines, limit=40)

    assert len(text) <= 40
    assert text.splitlines()[0] == "line 00"
    dropped = len(lines) - (len(text.splitlines()) - 1)
    assert text.splitlines()[-1] == f"…and {dropped} more"
