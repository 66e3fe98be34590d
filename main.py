"""Main application entry point."""

import asyncio
from contextlib import asynccontextmanager, suppress

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.error_handlers import register_error_handlers
from src.api.routes import page_router, router
from src.services.quote_client import QuoteClient
from src.services.subscription_ledger import SubscriptionLedger
from src.services.task_scheduler import TaskScheduler
from src.services.tip_rotation import TipRotationController
from src.utils.config import config
from src.utils.logger import StructuredLogger

logger = StructuredLogger("App")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events."""
    # Startup
    try:
        config.validate()
    except ValueError as e:
        logger.critical("Configuration error", exception=e)
        raise

    task_scheduler = TaskScheduler()
    rotation_controller = TipRotationController(QuoteClient(), task_scheduler)
    subscription_ledger = SubscriptionLedger(task_scheduler)

    task_scheduler.start()
    app.state.rotation_controller = rotation_controller
    app.state.subscription_ledger = subscription_ledger

    # The page shows the loading state until the first batch lands
    init_task = asyncio.create_task(rotation_controller.initialize())
    logger.info("Tip board started", context={"symbols": config.quote.symbols})

    yield

    # Shutdown
    if not init_task.done():
        init_task.cancel()
        with suppress(asyncio.CancelledError):
            await init_task
    rotation_controller.teardown()
    subscription_ledger.teardown()
    task_scheduler.stop()
    logger.info("Tip board stopped")


# Create FastAPI app
app = FastAPI(
    title="SoftWork Trading Tips",
    description="Rotating market trading tips and a free tips mailing list",
    version="1.0.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Include API routes
app.include_router(router, prefix="/api", tags=["tips"])
app.include_router(page_router, tags=["page"])


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
