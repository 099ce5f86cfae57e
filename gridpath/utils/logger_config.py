import logging
import os
from logging.handlers import RotatingFileHandler

SEARCH_LOGGER_NAME = 'gridpath.search'


class SearchFormatter(logging.Formatter):
    """
    A compact log formatter for search events.
    It formats logs as '[expansions] message'.
    """
    def format(self, record):
        """Overrides the default format method."""
        if hasattr(record, 'expansions'):
            message = f"[{record.expansions:>6}] {record.getMessage()}"
        else:
            message = f"[{record.levelname}] {record.getMessage()}"
        return message


def setup_logging(log_level=logging.INFO, log_dir="logs"):
    """
    Set up logging for the application.

    This configures two logging streams:
    1. The root logger for general messages (startup, configuration, CLI),
       which logs to the console and a file (`general.log`).
    2. A dedicated 'gridpath.search' logger for per-search events, which uses
       a compact format. Its console output is controlled by `log_level`.

    Args:
        log_level (int): The logging level for the console handlers.
                         Use logging.INFO for concise output and logging.DEBUG
                         for per-search details.
        log_dir (str): Directory for the rotating log files.
    """
    if isinstance(log_level, str):
        log_level = getattr(logging, log_level.upper())

    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    # 1. --- Root Logger Configuration ---
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    general_formatter = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(general_formatter)
    # Search records have their own handlers
    console_handler.addFilter(lambda record: not record.name.startswith(SEARCH_LOGGER_NAME))
    root_logger.addHandler(console_handler)

    general_log_file = os.path.join(log_dir, 'general.log')
    file_handler = RotatingFileHandler(general_log_file, maxBytes=5*1024*1024, backupCount=3)
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    root_logger.addHandler(file_handler)

    # 2. --- Search Logger Configuration ---
    search_logger = logging.getLogger(SEARCH_LOGGER_NAME)
    search_logger.setLevel(logging.DEBUG)
    search_logger.propagate = False
    if search_logger.hasHandlers():
        search_logger.handlers.clear()

    search_console_handler = logging.StreamHandler()
    search_console_handler.setLevel(log_level)
    search_console_handler.setFormatter(SearchFormatter())
    search_logger.addHandler(search_console_handler)

    search_log_file = os.path.join(log_dir, 'search_details.log')
    search_file_handler = RotatingFileHandler(search_log_file, maxBytes=10*1024*1024, backupCount=5)
    search_file_handler.setLevel(logging.DEBUG)
    search_file_handler.setFormatter(
        logging.Formatter('%(asctime)s - %(levelname)s - [%(expansions)6d] - %(name)s - %(message)s')
    )
    # Only records stamped with an expansion count go to the details file
    search_file_handler.addFilter(lambda record: hasattr(record, 'expansions'))
    search_logger.addHandler(search_file_handler)


class SearchLoggerAdapter(logging.LoggerAdapter):
    """
    A logger adapter that stamps records with the expansion count of a search.
    """
    def process(self, msg, kwargs):
        """Adds the expansion count passed as `expansions=` to the record's 'extra' dict."""
        expansions = kwargs.pop('expansions', self.extra.get('expansions', 0))
        kwargs['extra'] = {**kwargs.get('extra', {}), 'expansions': expansions}
        return msg, kwargs


def get_search_logger(name=SEARCH_LOGGER_NAME):
    """
    Get a logger adapter for search events.

    Args:
        name (str): The name of the logger (a child of 'gridpath.search').

    Returns:
        SearchLoggerAdapter: A logger adapter instance.
    """
    logger = logging.getLogger(name)
    return SearchLoggerAdapter(logger, {'expansions': 0})
