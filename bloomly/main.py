# bloomly/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bloomly.bootstrap import migrate
from bloomly.config import settings
from bloomly.db import engine
from bloomly.logging_config import setup_logging
from bloomly.routers import auth, children, rules, events, policy

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Opener-Policy": "same-origin",
}


@asynccontextmanager
async def lifespan(_app: FastAPI):
    # no traffic until the schema exists
    try:
        migrate(engine)
    except Exception:
        logger.critical("Fatal startup error: database migration failed", exc_info=True)
        raise
    logger.info("Bloomly backend ready on port %s", settings.PORT)
    yield


app = FastAPI(
    title="Bloomly API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.CORS_ORIGIN],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def security_headers(request: Request, call_next):
    response = await call_next(request)
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    return response


@app.exception_handler(RequestValidationError)
async def validation_error(_request: Request, exc: RequestValidationError):
    # missing/malformed fields are a plain 400 for the clients
    errors = exc.errors()
    field = ".".join(str(p) for p in errors[0]["loc"] if p != "body") if errors else ""
    message = f"{field}: {errors[0]['msg']}" if field else "invalid request"
    return JSONResponse(status_code=400, content={"detail": message})


@app.get("/health")
def health():
    return {"ok": True}


app.include_router(auth.router, prefix="/auth", tags=["auth"])
app.include_router(children.router, prefix="/children", tags=["children"])
app.include_router(rules.router, prefix="/rules", tags=["rules"])
app.include_router(events.router, prefix="/events", tags=["events"])
app.include_router(policy.router, prefix="/policy", tags=["policy"])
