from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from constants import LOG_FILE, LOG_LEVEL
from logging_config import get_logger, setup_logging
from rooms import RoomManager
from routers.rooms import get_room_manager, rooms_router
from schemas.rooms import HealthResponse

# Setup logging
setup_logging(log_level=LOG_LEVEL, log_file=LOG_FILE)
logger = get_logger(__name__)


async def invalid_request_handler(request: Request, exc: RequestValidationError):
    # Undecodable JSON and wrong field types are a plain 400, not FastAPI's 422
    logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"detail": "invalid request"})


def create_app(room_manager: Optional[RoomManager] = None) -> FastAPI:
    """Build the service. Each app owns its own room registry."""
    app = FastAPI(title="Room Registry", version="0.1.0")
    app.state.room_manager = room_manager if room_manager is not None else RoomManager()

    # Configure CORS to allow all origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Allow all origins
        allow_credentials=True,
        allow_methods=["*"],  # Allow all HTTP methods
        allow_headers=["*"],  # Allow all headers
    )

    app.add_exception_handler(RequestValidationError, invalid_request_handler)
    app.include_router(rooms_router)

    @app.get("/health", response_model=HealthResponse)
    def health_check(request: Request):
        manager = get_room_manager(request)
        return HealthResponse(status="ok", rooms=manager.count())

    logger.info("FastAPI application initialized")
    return app


app = create_app()
