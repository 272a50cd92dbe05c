import sys
import logging

from .storage import StorageManager
from .api_client import ApiClient, build_extract_query
from .header import read_header, parse_bundle_header, find_anomalies
from .constants import EXPECTED_SHRINES_SIZE

logger = logging.getLogger("bundlepeek.inspector")


def inspect_bundle(url, api, expected_size=EXPECTED_SHRINES_SIZE,
                   verify_first_block=False, out=print):
    status, body = api.fetch_bundle(url)
    if status != 200:
        out(status)

    size, compressed, head, _granularity, count, first, offset = read_header(body)
    header = parse_bundle_header(body)

    query = build_extract_query(url, offset, first, size)

    out("expected", expected_size, "actual", size)
    out("compressed size", compressed)
    out("head size", head)
    out("block count", count)
    out("first block size", first)
    out(api.extract_url(query))

    for note in find_anomalies(header):
        logger.warning(f"Format anomaly in {url}: {note}")

    if verify_first_block:
        block = api.fetch_block(url, offset, first)
        logger.info(f"First block range honoured: {len(block)} compressed bytes")

    summary = dict(header)
    summary["first_block_size"] = first
    summary["offset"] = offset
    summary["query"] = query
    return summary


def main(argv=None, storage=None, api=None):
    if argv is None:
        argv = sys.argv[1:]
    storage = storage or StorageManager()
    api = api or ApiClient(storage)
    config = storage.config

    url = argv[0] if argv else config["bundle_url"]
    logger.info(f"Inspecting {url}")
    return inspect_bundle(
        url, api,
        expected_size=config.get("expected_size", EXPECTED_SHRINES_SIZE),
        verify_first_block=storage.get_flag("verify_first_block"),
    )
