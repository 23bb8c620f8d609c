"""Discord bot for submitting and triaging media requests."""
