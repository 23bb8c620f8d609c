from request_bot.bot import Bot, build_intents
from request_bot.config import settings
from request_bot.logging import setup_logging
from request_bot.store import TicketStore


def main() -> None:
    """Main function to run the application."""
    settings.require_credentials()
    setup_logging(settings.log_level)

    store = TicketStore(settings.requests_file)
    bot = Bot(
        store=store,
        admin_id=settings.admin_id,
        command_prefix=[settings.prefix, "!"],
        intents=build_intents(message_content=settings.message_content_intent),
    )
    bot.run(settings.token, log_handler=None)


if __name__ == "__main__":
    main()
