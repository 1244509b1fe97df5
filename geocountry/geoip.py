import logging
from typing import Optional
from geocountry.config import settings
from geocountry.fetch import FetchJSON, fetch_json as default_fetch_json

logger = logging.getLogger("geoip")


async def get_country(
    fetch_json: Optional[FetchJSON] = None,
    url: Optional[str] = None,
) -> Optional[str]:
    """Return the caller's country code as reported by the geolocation service.

    Exactly one request is made. Fetch errors are re-raised as-is; a missing
    body or a missing ``country`` field gives None.
    """
    fetch = fetch_json or default_fetch_json
    url = url or settings.geoip_url

    try:
        data = await fetch(url)
    except Exception as e:
        logger.error(f"Geolocation lookup failed: {e!r}")
        raise

    if not isinstance(data, dict):
        return None
    country = data.get("country")
    logger.debug(f"Resolved country: {country}")
    return country
