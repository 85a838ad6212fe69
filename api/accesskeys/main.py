from contextlib import asynccontextmanager

from fastapi import FastAPI

from accesskeys.config import settings
from accesskeys.logging_config import configure_logging
from accesskeys.metrics import metrics_endpoint
from accesskeys.middleware.logging_middleware import RequestLoggingMiddleware
from accesskeys.routers import access_keys


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Configure structured logging before anything else
    configure_logging()

    # The provisioning workflow registers itself here; until it does,
    # access key requests are rejected with 503.
    if not hasattr(app.state, "access_key_handler"):
        app.state.access_key_handler = None
    yield


app = FastAPI(title=settings.app_name, version="0.1.0", debug=settings.debug, lifespan=lifespan)

# Register request logging middleware (runs on every request)
app.add_middleware(RequestLoggingMiddleware)

app.include_router(access_keys.router)

# Prometheus metrics endpoint
app.get("/metrics")(metrics_endpoint)


@app.get("/health")
async def health_check():
    return {"status": "ok"}
