"""FastAPI application for the swap router."""

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from swapper import __version__
from swapper.api.endpoints import router
from swapper.config import RouterConfig
from swapper.errors import SwapperError
from swapper.log_config import configure_logging

logger = structlog.get_logger()

app = FastAPI(
    title="Swapper",
    description="Swap path scoring and settlement order assembly",
    version=__version__,
)


@app.exception_handler(SwapperError)
async def swapper_error_handler(request: Request, exc: SwapperError) -> JSONResponse:
    """Map routing errors to 400 responses."""
    logger.warning("swapper_error", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=400, content={"detail": str(exc)})


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


def run() -> None:
    """Run the API server.

    Configuration via environment variables:
    - SWAPPER_HOST: Host to bind to (default: 0.0.0.0)
    - SWAPPER_PORT: Port to bind to (default: 8000)
    - SWAPPER_DEBUG: Enable debug/reload mode (default: false)
    """
    config = RouterConfig.from_env()
    configure_logging(debug=config.debug)
    uvicorn.run(
        "swapper.api.main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
    )


if __name__ == "__main__":
    run()
