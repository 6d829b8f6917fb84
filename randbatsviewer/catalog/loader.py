"""HTTP loader for the per-category entry catalogs.

One request enumerates categories (the keys of the index document), then one
request per category fetches its catalog, in index order. Any failure aborts
the whole load with ``DataLoadFailure``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

import requests

from ..errors import DataLoadFailure
from .types import Catalog, EntryCatalog

logger = logging.getLogger(__name__)

DEFAULT_DATA_URL = "https://pkmn.github.io/randbats/data/"
REQUEST_TIMEOUT_SECONDS = 30.0
USER_AGENT = "randbatsviewer"


def _get_json_object(session: requests.Session, url: str, timeout: float) -> Mapping[str, object]:
    logger.debug("GET %s", url)
    response = session.get(url, timeout=timeout, headers={"User-Agent": USER_AGENT})
    response.raise_for_status()
    data = response.json()
    if not isinstance(data, Mapping):
        raise ValueError(f"{url}: expected a JSON object, got {type(data).__name__}")
    return data


def load_catalog(
    base_url: str = DEFAULT_DATA_URL,
    *,
    session: requests.Session | None = None,
    timeout: float = REQUEST_TIMEOUT_SECONDS,
) -> Catalog:
    """Fetch every category catalog under ``base_url``.

    Category URLs are ``base_url`` followed by the category key. Raises
    ``DataLoadFailure`` on transport, HTTP status, or decoding errors.
    """
    own_session = session is None
    http = session if session is not None else requests.Session()
    try:
        index = _get_json_object(http, base_url, timeout)
        catalog: dict[str, EntryCatalog] = {}
        for category in index:
            catalog[category] = _get_json_object(http, base_url + category, timeout)  # type: ignore[assignment]
        logger.info("loaded %d categories from %s", len(catalog), base_url)
        return catalog
    except (requests.RequestException, ValueError) as exc:
        logger.error("catalog load failed: %s", exc)
        raise DataLoadFailure(str(exc)) from exc
    finally:
        if own_session:
            http.close()
