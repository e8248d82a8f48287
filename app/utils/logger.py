import logging


def setup_logger(level: str = "INFO") -> logging.Logger:
    """
    Configure the "app" logger shared by every module under app/.

    - Console output with timestamp and level
    - Safe to call more than once (handlers are only added the first time)
    """

    logger = logging.getLogger("app")
    logger.setLevel(level.upper())

    # Avoid duplicate handlers if setup_logger() is called multiple times
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    logger.info("Logger initialized")
    return logger
