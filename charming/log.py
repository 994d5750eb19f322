import logging

PACKAGE_LOGGER = "charming"


class ColorFormatter(logging.Formatter):
    """ANSI-colored level and logger name, plus a clickable ``path:line`` link."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",  # Cyan
        logging.INFO: "\033[32m",  # Green
        logging.WARNING: "\033[33m",  # Yellow
        logging.ERROR: "\033[31m",  # Red
        logging.CRITICAL: "\033[41m",  # Red background
    }
    GREY = "\033[90m"
    BLUE = "\033[34m"
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Color a copy; other handlers of the same record see plain text.
        colored = logging.makeLogRecord(record.__dict__)
        color = self.LEVEL_COLORS.get(record.levelno)
        if color is not None:
            colored.levelname = f"{color}{record.levelname}{self.RESET}"
        colored.name = f"{self.GREY}{record.name}{self.RESET}"
        colored.link = f"{self.BLUE}{record.pathname}:{record.lineno}{self.RESET}"
        return super().format(colored)


def configure_logging(level: str) -> logging.Logger:
    """Attach the colored handler to the package logger (idempotent)."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in logger.handlers[:]:
        if isinstance(handler.formatter, ColorFormatter):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(ColorFormatter("%(asctime)s %(levelname)-16s %(name)-32s [%(link)s] \n%(message)s\n"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
