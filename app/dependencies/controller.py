from fastapi import HTTPException, Request
from app.viewmodels.overview import PropertyFeedController

def get_overview_controller(request: Request) -> PropertyFeedController:
    controller = getattr(request.app.state, "overview_controller", None)
    if controller is None:
        raise HTTPException(status_code=503, detail="Property feed is not running")
    return controller
