# logging_config.py: send log records to the console and optionally a file.
import logging
import sys

log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


# setup_logging - configure the root logger
# The clock modules are all top-level, so their loggers hang directly off
# the root. Calling this again replaces the handlers from the last call.
# parameters:
#   level - e.g. logging.DEBUG
#   log_file - if given, records are also written there (overwritten)
def setup_logging(level = logging.INFO, log_file = None):
    logger = logging.getLogger()
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(log_format, datefmt='%H:%M:%S')
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return handlers
