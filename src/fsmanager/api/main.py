"""FastAPI application for the file manager."""

from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from jinja2 import Environment, FileSystemLoader, select_autoescape

from .. import __version__
from ..config import AppConfig, load_config
from ..filesystem import MountManager
from ..storage import ContentStorage
from ..translation import Translator
from .routes import browse, files, folders

TEMPLATE_DIR = Path(__file__).parent.parent / "templates"


def create_app(config: AppConfig | None = None) -> FastAPI:
    """
    Build the application.

    Args:
        config: Effective configuration. Loaded with load_config() when
            omitted.
    """
    config = config or load_config()

    app = FastAPI(
        title="fsmanager",
        description="Browse and manage files in named filesystem namespaces",
        version=__version__,
    )

    if config.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.state.config = config
    app.state.manager = MountManager.from_config(config)
    app.state.storage = ContentStorage.from_config(config)
    app.state.translator = Translator(config.locale)
    app.state.templates = Environment(
        loader=FileSystemLoader(TEMPLATE_DIR),
        autoescape=select_autoescape(["html", "htm", "xml", "j2"]),
    )

    app.include_router(browse.router, prefix=config.prefix)
    app.include_router(files.router, prefix=config.prefix)
    app.include_router(folders.router, prefix=config.prefix)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "ok"}

    return app
