import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from instafeed.config import settings
from instafeed.database import engine
from instafeed.exceptions import InstafeedError
from instafeed.middleware import RequestDiagnosticsMiddleware
from instafeed.routers import followers, newsfeeds, profiles, users

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Instafeed API starting (env=%s)", settings.APP_ENV)
    yield
    await engine.dispose()

app = FastAPI(
    title="Instafeed API",
    description="Users, profiles, follow requests and a newsfeed with soft delete",
    version="1.0.0",
    lifespan=lifespan,
)

# Middleware
app.add_middleware(RequestDiagnosticsMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(InstafeedError)
async def instafeed_error_handler(request: Request, exc: InstafeedError):
    logger.info("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": exc.status_code, "message": exc.message},
    )

# Routers
app.include_router(users.router)
app.include_router(profiles.router)
app.include_router(newsfeeds.router)
app.include_router(followers.router)

@app.get("/health")
async def health():
    return {"status": "healthy", "version": "1.0.0"}
