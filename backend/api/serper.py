from typing import Any, Dict
import httpx
from config import logger, get_settings, Settings
from config.constants import SEARCH_CONFIG
from exceptions import ConfigError, UpstreamError, TransportError
from utils.validation import InputValidator

async def search_upstream(
    query: Any,
    num: Any = SEARCH_CONFIG.DEFAULT_NUM_RESULTS,
    settings: Settings = None
) -> Dict[str, Any]:
    """
    Forward a search query to the upstream search API.
    Args:
        query: Search string
        num: Number of results to request
        settings: Settings to use; read from the environment when omitted
    Returns:
        The upstream JSON body, unchanged
    Raises:
        ConfigError: no API key is configured (checked before anything else)
        ValidationException: the query is missing or empty
        UpstreamError: the upstream answered with a non-2xx status
        TransportError: the request could not be completed
    """
    settings = settings or get_settings()

    if not settings.SERPER_API_KEY:
        logger.error("SERPER_API_KEY not configured.")
        raise ConfigError("SERPER_API_KEY", SEARCH_CONFIG.MISSING_KEY_MESSAGE)
    query = InputValidator.require_present(query, "query", SEARCH_CONFIG.MISSING_QUERY_MESSAGE)

    params = {"engine": settings.SEARCH_ENGINE, "q": query, "num": num}
    headers = {"Authorization": f"Bearer {settings.SERPER_API_KEY}"}

    try:
        async with httpx.AsyncClient(timeout=settings.SEARCH_TIMEOUT_SECONDS) as client:
            r = await client.get(settings.SERPER_ENDPOINT, params=params, headers=headers)
            if r.is_success:
                return r.json()
            logger.error("Search API HTTP error %s: %s", r.status_code, r.text)
            raise UpstreamError(r.status_code, r.text)
    except UpstreamError:
        raise
    except httpx.RequestError as e:
        logger.error("Search API request error: %s", str(e))
        raise TransportError(str(e) or type(e).__name__)
    except Exception as e:
        logger.exception("Proxy error")
        raise TransportError(str(e))
