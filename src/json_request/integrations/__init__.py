import importlib
import logging

from json_request.http import HttpClient

logger = logging.getLogger(__name__)


# Transports are tried in order, the first one whose library is
# installed becomes the default client.
integrations = ("httpx", "requests")


def default_client() -> HttpClient:
    """Returns a client backed by the first available HTTP library."""
    for name in integrations:
        try:
            module = importlib.import_module(f"json_request.integrations.{name}")
        except ImportError:
            continue
        logger.debug("using %s integration", name)
        return module.Client()
    raise RuntimeError(
        "no HTTP library available: install httpx or requests"
    )
