import logging
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from pydantic_settings import BaseSettings, SettingsConfigDict
from starlette.middleware.sessions import SessionMiddleware

from watchwise_core.config import CHAT_COMPLETION_MODEL
from watchwise_core.llm_client import LlmClient
from watchwise_store.db import get_engine, init_db, make_session_factory

from .error_handlers import register_error_handlers
from .routers import all_routers

log = logging.getLogger(__name__)

DEV_SESSION_SECRET = "dev-insecure-session-secret"


class Settings(BaseSettings):
    app_name: str = "Watchwise API"
    # storage
    database_url: str = "sqlite:///./watchwise.db"
    # credentials
    openai_api_key: str | None = None
    chat_model: str = CHAT_COMPLETION_MODEL
    openai_timeout: float | None = None  # None = wait for the API indefinitely
    # session cookie
    session_secret: str = DEV_SESSION_SECRET
    session_cookie: str = "watchwise_session"
    session_max_age: int = 30 * 24 * 3600  # 30 days
    session_https_only: bool = False
    # http
    cors_origins: list[str] = ["*"]
    static_dir: str | None = None  # built SPA, served when present
    log_level: str = "INFO"
    # env config
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


def _init_storage(app: FastAPI) -> None:
    engine = get_engine(app.state.settings.database_url)
    init_db(engine)
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)


def _init_llm(app: FastAPI) -> None:
    settings = app.state.settings
    app.state.chat_completion_llm = None
    if not (settings.openai_api_key and settings.openai_api_key.strip()):
        log.warning("OPENAI_API_KEY not set; recommendation endpoints will fail")
        return
    app.state.chat_completion_llm = LlmClient(
        model=settings.chat_model,
        timeout=settings.openai_timeout,
        api_key=settings.openai_api_key,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    load_dotenv(find_dotenv(), override=False)

    settings = Settings()
    app.state.settings = settings
    logging.basicConfig(level=settings.log_level.upper())

    _init_storage(app)
    _init_llm(app)
    if settings.session_secret == DEV_SESSION_SECRET:
        log.warning("SESSION_SECRET not set; using the development secret")
    log.info("%s started (db=%s)", settings.app_name, app.state.engine.url.get_backend_name())

    try:
        yield
    finally:
        llm = getattr(app.state, "chat_completion_llm", None)
        if llm is not None:
            await llm.close()
        app.state.engine.dispose()


load_dotenv(find_dotenv(), override=False)
_boot_settings = Settings()

app = FastAPI(title="Watchwise API", lifespan=lifespan)

app.add_middleware(
    SessionMiddleware,
    secret_key=_boot_settings.session_secret,
    session_cookie=_boot_settings.session_cookie,
    max_age=_boot_settings.session_max_age,
    same_site="lax",
    https_only=_boot_settings.session_https_only,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=_boot_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


@app.get("/health")
def health():
    s = app.state.settings
    return {"status": "ok", "service": s.app_name}


for r in all_routers:
    app.include_router(r)


# ---- Single-page UI (registered last so /api and /health win) ----
def _static_root(request: Request) -> Path | None:
    static_dir = request.app.state.settings.static_dir
    if not static_dir:
        return None
    root = Path(static_dir).resolve()
    return root if root.is_dir() else None


@app.get("/", include_in_schema=False)
def read_root(request: Request):
    root = _static_root(request)
    if root and (root / "index.html").is_file():
        return FileResponse(root / "index.html")
    return {"status": "ok"}


@app.get("/{full_path:path}", include_in_schema=False)
def spa_fallback(full_path: str, request: Request):
    root = _static_root(request)
    if root is None or full_path.startswith("api/") or full_path == "api":
        raise HTTPException(status_code=404, detail="Not found")

    candidate = (root / full_path).resolve()
    if candidate.is_file() and candidate.is_relative_to(root):
        return FileResponse(candidate)

    index = root / "index.html"
    if not index.is_file():
        raise HTTPException(status_code=404, detail="Not found")
    return FileResponse(index)
