import sys
import logging

from .storage import StorageManager
from .api_client import ApiClient
from .constants import VERSION
from .inspector import main as run_inspection


def setup_logging(storage):
    # stdout carries the report only
    handlers = [logging.StreamHandler(sys.stderr)]
    log_path = storage.log_path()
    if log_path:
        handlers.append(logging.FileHandler(log_path))
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )
    return logging.getLogger("bundlepeek")


def run(argv=None):
    storage = StorageManager()
    logger = setup_logging(storage)
    logger.info(f"bundlepeek {VERSION}")
    return run_inspection(argv, storage=storage, api=ApiClient(storage))


if __name__ == '__main__':
    run()
