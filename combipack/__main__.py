import time

from combipack.config import configure_logging
from combipack.verify import verify

configure_logging()

if __name__ == '__main__':
    try:
        verify()
    except Exception:
        time.sleep(.01)  # Wait for logs to flush.
        raise
