import logging
from urllib.parse import quote, urlsplit

import requests

from .constants import RECOGNIZED_HOSTS

logger = logging.getLogger("bundlepeek.api")

# same unreserved set as JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "!~*'()"


class UnrecognizedHostError(ValueError):
    pass


class RangeIgnoredError(RuntimeError):
    pass


def is_recognized_host(url):
    return url.startswith(RECOGNIZED_HOSTS)


def range_header(offset, compressed):
    return f"bytes={offset}-{offset + compressed - 1}"


def build_extract_query(url, offset, compressed, extracted):
    return (f"?url={quote(url, safe=_URI_COMPONENT_SAFE)}"
            f"&offset={offset}&compressed={compressed}&extracted={extracted}")


def fetch_bundle(url, session=None):
    """
    GET the whole bundle. A non-200 status is logged and handed back to the
    caller together with whatever body came with it.
    """
    http = session or requests
    resp = http.get(url)
    if resp.status_code != 200:
        logger.warning(f"GET {url} returned {resp.status_code}")
    else:
        logger.info(f"Fetched {len(resp.content)} bytes from {url}")
    return resp.status_code, resp.content


def fetch_block(url, offset, compressed, session=None):
    """Ranged GET of one compressed block. Returns the raw (still compressed) bytes."""
    if not is_recognized_host(url):
        raise UnrecognizedHostError(f"host not recognized: {url}")

    http = session or requests
    resp = http.get(url, headers={'Range': range_header(offset, compressed)})

    content_range = resp.headers.get('Content-Range')
    expected = f"bytes {offset}-{offset + compressed - 1}"
    if not content_range or not content_range.startswith(expected):
        raise RangeIgnoredError(f"range header ignored: {content_range!r}")

    logger.debug(f"Block at {offset}: {len(resp.content)} bytes ({content_range})")
    return resp.content


class ApiClient:
    def __init__(self, storage_manager, session=None):
        self.storage = storage_manager
        self.session = session or requests.Session()

    def get_extractor_url(self):
        return self.storage.config.get("extractor_url", "")

    def fetch_bundle(self, url):
        return fetch_bundle(url, session=self.session)

    def fetch_block(self, url, offset, compressed):
        return fetch_block(url, offset, compressed, session=self.session)

    def extract_url(self, query):
        base = self.get_extractor_url()
        if not base:
            return query
        if not urlsplit(base).path:
            # bare host: the query goes on the root path
            return base + "/" + query
        return base + query
