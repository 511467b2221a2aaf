# fetcher.py
from contextlib import contextmanager

import requests
from loguru import logger

from errors import BadStatusError, TransportError


@contextmanager
def fetch(url, session=None):
    """GET `url` once and yield the raw response body stream.

    Redirects follow the requests defaults. The response is closed when the
    block exits, on success and on error alike.
    """
    get = session.get if session is not None else requests.get
    try:
        r = get(url, stream=True)
    except requests.RequestException as e:
        raise TransportError(url, e) from e
    try:
        logger.debug("GET {} -> {}", url, r.status_code)
        if r.status_code != 200:
            raise BadStatusError(url, r.status_code)
        # let urllib3 undo gzip/deflate so the parser sees plain HTML
        r.raw.decode_content = True
        yield r.raw
    finally:
        r.close()
