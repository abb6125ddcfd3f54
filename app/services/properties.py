from httpx import AsyncClient, HTTPError
from pydantic import TypeAdapter, ValidationError
from typing import List
from app.config import settings
from app.schemas.property import Property, PropertyFilter
from structlog import get_logger

logger = get_logger()

class PropertyServiceError(RuntimeError):
    """Fetching or decoding listings from the upstream API failed."""

_property_list = TypeAdapter(List[Property])

# Normalize base from environment
_api_base = settings.PROPERTY_API_URL.rstrip("/")

async def get_properties(filter: PropertyFilter = PropertyFilter.SHOW_ALL) -> List[Property]:
    filter = PropertyFilter(filter)
    async with AsyncClient(timeout=settings.PROPERTY_API_TIMEOUT) as client:
        try:
            response = await client.get(
                f"{_api_base}/realestate",
                params={"filter": filter.value},
            )
            response.raise_for_status()
            data = response.json()
        except HTTPError as e:
            logger.error("Error fetching properties from upstream", filter=filter.value, error=str(e))
            raise PropertyServiceError(f"Error fetching properties: {e}") from e
        except ValueError as e:
            # Body was not JSON
            logger.error("Upstream returned an undecodable body", filter=filter.value, error=str(e))
            raise PropertyServiceError(f"Invalid properties payload: {e}") from e

    try:
        properties = _property_list.validate_python(data)
    except ValidationError as e:
        logger.error("Upstream properties failed validation", filter=filter.value, error=str(e))
        raise PropertyServiceError(f"Invalid properties payload: {e}") from e

    logger.info("Fetched properties", filter=filter.value, total_properties=len(properties))
    return properties
