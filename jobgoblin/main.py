import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
import sentry_sdk

from jobgoblin.api.applications import router as applications_router
from jobgoblin.api.auth import router as auth_router
from jobgoblin.api.health import router as health_router
from jobgoblin.api.resumes import router as resumes_router
from jobgoblin.api.tailor import router as tailor_router
from jobgoblin.core.config import settings
from jobgoblin.core.cors import cors_allowed_origins
from jobgoblin.core.errors import register_error_handlers
from jobgoblin.core.lifespan import lifespan
from jobgoblin.core.rate_limit import limiter

load_dotenv()
logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

app = FastAPI(title="JobGoblin API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_allowed_origins(),
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["x-access-token", "x-refresh-token", "Content-Disposition"],
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)
register_error_handlers(app)

app.include_router(health_router, prefix="/api", tags=["Health"])
app.include_router(auth_router, prefix="/api", tags=["Auth"])
app.include_router(resumes_router, prefix="/api", tags=["Resumes"])
app.include_router(applications_router, prefix="/api", tags=["Applications"])
app.include_router(tailor_router, prefix="/api", tags=["Tailor"])
