"""
FastAPI application entry point.
Initializes the FastAPI app, configures logging, and includes webhook and inventory routes.
"""

import structlog
from fastapi import FastAPI

from orderdesk_datastore.config import settings
from orderdesk_datastore.datastore.registry import datastore_registry
from orderdesk_datastore.routers import inventory, webhooks
from orderdesk_datastore.utils.logger import configure_logging

# Configure logging first
configure_logging()
logger = structlog.get_logger()

app = FastAPI(
    title="Foxy OrderDesk Datastore Integration",
    description="Creates OrderDesk orders from Foxy transactions and serves OrderDesk inventory to cart validation",
    version="1.0.0",
)

app.include_router(webhooks.router)
app.include_router(inventory.router)


@app.on_event("startup")
async def startup_event():
    """Application startup event."""
    logger.info(
        "Datastore integration started",
        datastore_provider=settings.datastore_provider,
        available_datastores=datastore_registry.list_available(),
    )


@app.on_event("shutdown")
async def shutdown_event():
    """Application shutdown event."""
    logger.info("Datastore integration shutting down")


@app.get("/")
async def root():
    """Root endpoint - also serves as a simple health check."""
    return {
        "status": "healthy",
        "service": "Foxy OrderDesk Datastore Integration",
        "version": "1.0.0",
        "datastores": datastore_registry.list_available(),
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "datastore_provider": settings.datastore_provider,
    }


@app.get("/healthz")
async def healthz():
    """Alternative health check endpoint (Kubernetes-style)."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("orderdesk_datastore.main:app", host="0.0.0.0", port=8000, reload=True)
