import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .routers import auth, health, me, departments, vacation_requests, reports, admin_users
from .models.user import Base
from .db import engine, SessionLocal
from .core.config import settings as config
from .core.errors import VacationError
from .core.seed import seed_demo_data
from .core.settings import settings

import vacation_api.models.department  # noqa: F401
import vacation_api.models.vacation_request  # noqa: F401
import vacation_api.models.revoked_token  # noqa: F401

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Vacation Request API")


@app.on_event("startup")
def on_startup():
    if settings.AUTO_DB_BOOTSTRAP:
        # Create tables in dev if missing.
        Base.metadata.create_all(bind=engine)

    if settings.SEED_DEMO_DATA:
        with SessionLocal() as session:
            seed_demo_data(session)


@app.exception_handler(VacationError)
def handle_vacation_error(request: Request, exc: VacationError):
    logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


app.include_router(health.router)
app.include_router(auth.router)
app.include_router(me.router)
app.include_router(departments.router)
app.include_router(vacation_requests.router)
app.include_router(reports.router)
app.include_router(admin_users.router)

# CORS: allow local dev origins by default.
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
