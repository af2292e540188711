import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Handlers are attached by configure_logging() at application entry.
    """
    return logging.getLogger(f"wikilink.{name}")
