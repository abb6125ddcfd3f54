from fastapi import APIRouter, Depends, HTTPException
from app.dependencies.controller import get_overview_controller
from app.schemas.property import FilterRequest, OverviewStateResponse, PropertyDetailResponse
from app.viewmodels.detail import PropertyDetailController
from app.viewmodels.overview import PropertyFeedController
from structlog import get_logger

logger = get_logger()
router = APIRouter(prefix="/api/v1/overview", tags=["overview"])

@router.get("", response_model=OverviewStateResponse)
async def get_overview(controller: PropertyFeedController = Depends(get_overview_controller)):
    """Current snapshot of the overview screen state."""
    return {
        "status": controller.status.value,
        "properties": controller.properties.value or [],
        "navigate_to": controller.navigate_to_selected_property.value,
    }

@router.post("/filter", status_code=202)
async def update_filter(data: FilterRequest, controller: PropertyFeedController = Depends(get_overview_controller)):
    controller.update_filter(data.filter)
    logger.info("Requested filter update", filter=data.filter.value)
    return {"status": "accepted", "filter": data.filter.value}

@router.post("/properties/{property_id}/select", response_model=PropertyDetailResponse)
async def select_property(property_id: str, controller: PropertyFeedController = Depends(get_overview_controller)):
    match = next((p for p in controller.properties.value or [] if p.id == property_id), None)
    if match is None:
        raise HTTPException(status_code=404, detail="Property not found")
    controller.request_navigation_to(match)
    logger.info("Selected property", property_id=property_id)
    return PropertyDetailController(match).displayed()

@router.get("/navigation", response_model=PropertyDetailResponse)
async def get_navigation(controller: PropertyFeedController = Depends(get_overview_controller)):
    target = controller.navigate_to_selected_property.value
    if target is None:
        raise HTTPException(status_code=404, detail="No pending navigation")
    return PropertyDetailController(target).displayed()

@router.post("/navigation/complete")
async def complete_navigation(controller: PropertyFeedController = Depends(get_overview_controller)):
    controller.acknowledge_navigation_complete()
    logger.info("Navigation completed")
    return {"status": "success"}
