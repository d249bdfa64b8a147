import logging

# Create logger
logger = logging.getLogger("tripplanner")
logger.setLevel(logging.INFO)

# Console Handler
console_handler = logging.StreamHandler()
formatter = logging.Formatter("[%(asctime)s] [%(levelname)s] %(message)s")
console_handler.setFormatter(formatter)

# Add handler to logger
logger.addHandler(console_handler)


def configure_logging(level: str) -> None:
    logger.setLevel(level.upper())
