from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.config import settings
from app.routers import overview
from app.viewmodels.overview import PropertyFeedController
from structlog import get_logger

logger = get_logger()

app = FastAPI(title="Property Feed Service")
app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_credentials=True, allow_methods=["*"], allow_headers=["*"])

@app.on_event("startup")
async def startup_event():
    # One controller per application lifetime; it starts its first fetch right away
    app.state.overview_controller = PropertyFeedController(initial_filter=settings.DEFAULT_FILTER)
    logger.info("Property feed started", filter=settings.DEFAULT_FILTER.value)

@app.on_event("shutdown")
async def shutdown_event():
    controller = getattr(app.state, "overview_controller", None)
    if controller is not None:
        controller.dispose()
        await controller.join()
        app.state.overview_controller = None
    logger.info("Property feed stopped")

app.include_router(overview.router)
