"""Start a web app with a startup banner and optional browser launch.

Each server library gets a small adapter implementing ``ServableApp``; the
caller picks the adapter, ``start_app`` only talks to the protocol.
"""

from __future__ import annotations

import platform
import webbrowser
from typing import Any, Callable, Protocol

from .logger import StatusReporter, get_default_reporter
from .schema import AppOptions
from .styles import Style

OpenFn = Callable[[str], Any]


class ServableApp(Protocol):
    label: str

    def serve(self, host: str, port: int) -> Any:
        ...


class AsgiServer:
    """Serve an ASGI app (FastAPI, Starlette, ...) with uvicorn."""

    label = " ASGI"

    def __init__(self, app: Any, **uvicorn_kwargs: Any) -> None:
        self.app = app
        self.uvicorn_kwargs = uvicorn_kwargs

    def serve(self, host: str, port: int) -> None:
        import uvicorn

        uvicorn.run(self.app, host=host, port=port, **self.uvicorn_kwargs)


class WsgiServer:
    """Serve a WSGI callable with the reference wsgiref server."""

    label = " WSGI"

    def __init__(self, app: Callable[..., Any]) -> None:
        self.app = app

    def serve(self, host: str, port: int) -> None:
        from wsgiref.simple_server import make_server

        with make_server(host, port, self.app) as httpd:
            httpd.serve_forever()


def start_app(
    server: ServableApp,
    options: AppOptions | None = None,
    *,
    reporter: StatusReporter | None = None,
    open_fn: OpenFn = webbrowser.open,
) -> Any:
    """Log the startup banner, open the browser if asked, then block in ``server.serve``."""

    options = options or AppOptions()
    reporter = reporter or get_default_reporter()
    render = reporter.renderer.apply

    reporter.info(
        f"App{server.label}: {options.name} [Python {platform.python_version()}]",
        Style.BOLD,
        Style.WHITE,
        Style.UNDERLINE,
    )
    reporter.info(
        f" > running at http://{render(f'{options.host}:{options.port}', Style.YELLOW)}"
        f"\n > started by {render(options.user.upper(), Style.BOLD)}",
        Style.GRAY,
    )

    if options.open:
        open_fn(options.url)

    return server.serve(options.host, options.port)


def start_asgi_app(app: Any, options: AppOptions | None = None, **kwargs: Any) -> Any:
    return start_app(AsgiServer(app), options, **kwargs)


def start_wsgi_app(app: Callable[..., Any], options: AppOptions | None = None, **kwargs: Any) -> Any:
    return start_app(WsgiServer(app), options, **kwargs)
