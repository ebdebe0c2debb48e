import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse

from contacts_app.adapters.seed import seed_contacts
from contacts_app.adapters.sqlite.migrator import SQLiteMigrator
from contacts_app.api.deps import get_contact_repo, get_rules, get_settings
from contacts_app.app_shell.config import validate_ops_rules
from contacts_app.components.contacts import ContactDataError, ContactNotFound
from contacts_app.components.sidebar import render_error_page

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules and validate on startup (fail-fast)
    try:
        rules = get_rules()
        validate_ops_rules(rules)
        logger.info("Rules loaded from %s", settings.rules_path)
    except Exception as e:
        logger.critical("Rules load failed: %s", e)
        sys.exit(1)

    if settings.store == "sqlite":
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        SQLiteMigrator(settings.db_path, str(settings.migrations_dir)).run_migrations()

    if settings.seed or rules.ops.seed_if_empty:
        seed_contacts(get_contact_repo(settings))

    yield


app = FastAPI(
    title="Contacts",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from contacts_app.api.routes import contacts, root  # noqa: E402

app.include_router(root.router, tags=["Root"])
app.include_router(contacts.router, tags=["Contacts"])


# --- Error boundary ---


@app.exception_handler(ContactNotFound)
async def contact_not_found_handler(request: Request, exc: ContactNotFound) -> HTMLResponse:
    return HTMLResponse(content=render_error_page("Not Found", 404), status_code=404)


@app.exception_handler(ContactDataError)
async def contact_data_error_handler(request: Request, exc: ContactDataError) -> HTMLResponse:
    logger.error(
        "%s on %s %s: %s",
        type(exc).__name__,
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return HTMLResponse(content=render_error_page("Internal Server Error", 500), status_code=500)


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "contacts"}
