import logging.config
from pathlib import Path

NUM_ELEMENTS: int = 4  # Size of each multiset.
NUM_VALUES: int = 32  # Alphabet size. Each value is in [0, NUM_VALUES).
CODE_BITS: int = 16
MAX_MULTISET_SIZE: int = 4
VERIFY_LOG_INTERVAL: int = 10_000


def configure_logging() -> None:
    path = Path(__file__).with_name('logging.conf')
    logging.config.fileConfig(path, disable_existing_loggers=False)
    log = logging.getLogger(__name__)
    log.info('Logging is configured.')
