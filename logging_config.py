import logging
import logging.config

OWN_LOGGERS = (
    "root",
    "__main__",
    "automation",
    "balance_gate",
    "main",
    "pumpportal",
    "report",
    "solana_helpers",
    "token_creation",
    "token_sale",
    "wallet_store",
)


def setup_logging(level: str = "INFO"):
    def disable_external_loggers(own_prefixes=OWN_LOGGERS):
        for name in list(logging.root.manager.loggerDict):
            if not name.startswith(own_prefixes):
                logger = logging.getLogger(name)
                logger.disabled = True

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "colored": {
                "()": "colorlog.ColoredFormatter",
                "format": "%(log_color)s%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
                "log_colors": {
                    "DEBUG": "cyan",
                    "INFO": "green",
                    "WARNING": "yellow",
                    "ERROR": "red",
                    "CRITICAL": "bold_red",
                }
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "colored",
                "level": "DEBUG",
            },
        },
        "root": {
            "handlers": ["console"],
            "level": level,
        },
    }
    logging.config.dictConfig(config)
    disable_external_loggers()


if __name__ == "__main__":
    setup_logging()
