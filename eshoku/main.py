from contextlib import asynccontextmanager
from pathlib import Path
import logging
import os

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates
import httpx
import redis.asyncio as redis
from starlette.middleware.sessions import SessionMiddleware

from eshoku.api.routes.auth import auth_router
from eshoku.api.routes.pages import pages_router
from eshoku.api.routes.rooms import rooms_router
from eshoku.api.routes.users import users_router
from eshoku.application.room_service import RoomService
from eshoku.application.user_service import UserService
from eshoku.config import DEFAULT_SECRET_KEY, Config
from eshoku.env import load_env_file
from eshoku.infrastructure.api_client import ApiClient
from eshoku.infrastructure.identity import SessionIdentityProvider
from eshoku.infrastructure.redis_room_store import RedisRoomStore
from eshoku.infrastructure.redis_user_store import RedisUserStore
from eshoku.logging_setup import configure_logging

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
INTERNAL_BASE_URL = "http://eshoku.internal"


def app_factory(
    redis_url: str,
    config: Config | None = None,
    api_transport: httpx.AsyncBaseTransport | None = None,
):
    config = config or Config()
    if config.session.secret_key == DEFAULT_SECRET_KEY:
        logger.warning(
            "session.secret_key is the built-in default; set SESSION_SECRET"
            " before serving real users"
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.redis = redis.from_url(
            redis_url,
            decode_responses=True,
            health_check_interval=30,
        )
        app.state.room_service = RoomService(RedisRoomStore(app.state.redis))
        app.state.user_service = UserService(RedisUserStore(app.state.redis))

        transport = api_transport
        base_url = config.api.base_url
        if transport is None and base_url is None:
            transport = httpx.ASGITransport(app=app)
        app.state.http_client = httpx.AsyncClient(
            transport=transport,
            base_url=base_url or INTERNAL_BASE_URL,
            timeout=config.api.timeout,
        )
        app.state.api_client = ApiClient(app.state.http_client)
        logger.info("backend api at %s", base_url or "in-process")
        try:
            yield
        finally:
            await app.state.http_client.aclose()
            await app.state.redis.aclose()

    app = FastAPI(lifespan=lifespan)
    app.state.config = config
    app.state.identity_provider = SessionIdentityProvider()
    app.state.templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
    app.add_middleware(
        SessionMiddleware,
        secret_key=config.session.secret_key,
        session_cookie=config.session.cookie_name,
        max_age=config.session.max_age,
    )
    app.include_router(auth_router)
    app.include_router(rooms_router)
    app.include_router(users_router)
    app.include_router(pages_router)

    return app


load_env_file()

CONFIG = Config.load(os.getenv("ESHOKU_CONFIG")).with_secret_key(
    os.getenv("SESSION_SECRET")
)
configure_logging(CONFIG.log_level)

REDIS_URL = os.getenv("REDIS_URL", "redis://redis:6379/0")

app = app_factory(REDIS_URL, CONFIG)
