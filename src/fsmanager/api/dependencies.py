"""Request-scoped access to the collaborators stored on the app."""

from fastapi import Request
from fastapi.responses import HTMLResponse

from ..config import AppConfig
from ..filesystem import MountManager
from ..flashes import FlashBag
from ..storage import ContentStorage
from ..translation import Translator


def get_config(request: Request) -> AppConfig:
    return request.app.state.config


def get_manager(request: Request) -> MountManager:
    return request.app.state.manager


def get_storage(request: Request) -> ContentStorage:
    return request.app.state.storage


def get_translator(request: Request) -> Translator:
    return request.app.state.translator


def get_flashes(request: Request) -> FlashBag:
    """Flash bag of the current request, created on first use."""
    flashes = getattr(request.state, "flashes", None)
    if flashes is None:
        flashes = FlashBag()
        request.state.flashes = flashes
    return flashes


def render_template(
    request: Request, template_name: str, context: dict, title: str | None = None
) -> HTMLResponse:
    """
    Render a Jinja2 template from the package templates directory.

    Pending flash messages are drained into the page.
    """
    env = request.app.state.templates
    template = env.get_template(template_name)
    translator = get_translator(request)
    html = template.render(
        context=context,
        title=title,
        flashes=get_flashes(request).all(),
        url_for=request.url_for,
        trans=translator.trans,
    )
    return HTMLResponse(html)
