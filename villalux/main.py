import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from .config import settings
from .database import engine
from .db_init import init_db
from .errors import BookingServiceError
from .routers import villa_router, booking_router

logger = logging.getLogger("villalux")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Creates missing tables and seeds the villa catalog before serving.
    """
    logger.info("VillaLux service starting up...")
    init_db(engine)

    yield  # The application is now running

    logger.info("VillaLux service shutting down...")


app = FastAPI(
    title="VillaLux API",
    description="Lists luxury villas and records bookings.",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BookingServiceError)
async def booking_service_error_handler(request: Request, exc: BookingServiceError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    problems = []
    for error in exc.errors():
        # Integer positions (e.g. the offset of a JSON decode error) are not field names
        field = ".".join(part for part in error["loc"] if isinstance(part, str) and part != "body")
        problems.append(f"{field}: {error['msg']}" if field else error["msg"])
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"error": "; ".join(problems)}
    )


app.include_router(villa_router.router)
app.include_router(booking_router.router)


@app.get("/", include_in_schema=False)
def read_root():
    index_path = os.path.join(settings.STATIC_DIR, settings.INDEX_FILE)
    if not os.path.isfile(index_path):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    return FileResponse(index_path)


# Mounted last so the API routes above take precedence
app.mount("/", StaticFiles(directory=settings.STATIC_DIR, check_dir=False), name="static")


def run():
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )
    logger.info(f"VillaLux server listening at http://localhost:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
