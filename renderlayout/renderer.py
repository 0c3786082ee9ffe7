"""
Renderer Factory
Binds configuration, discovered partials and the template engine into one
reusable render capability for route handlers
"""
import re
from typing import Any, Awaitable, Callable, Sequence

from sanic import Request
from sanic.response import HTTPResponse

from renderlayout.config import Option, RendererConfig
from renderlayout.logging import getLogger
from renderlayout.view.engine import TemplateEngine
from renderlayout.view.invoker import RenderInvoker
from renderlayout.view.partials import discover_partials
from renderlayout.view.pipeline import DataPipeline, DataProvider

logger = getLogger(__name__)

Handler = Callable[..., Awaitable[HTTPResponse]]


class Renderer:
    """
    Render capability bound to one layout

    Calling the renderer with a view name and data providers returns a
    Sanic handler. Nothing shared is mutated per request; every request
    assembles its own view context.

    Example:
        render = new(layout('app'), default_data(static_data({'app_name': 'demo'})))
        app.add_route(render('dashboard', load_dashboard), '/app')
    """

    def __init__(self, config: RendererConfig, partials: Sequence[str], engine: TemplateEngine):
        self.config = config
        self.partials = tuple(partials)
        self.engine = engine
        self.pipeline = DataPipeline(config)
        self.invoker = RenderInvoker(engine, config)

    @classmethod
    def from_config(cls, config: RendererConfig) -> 'Renderer':
        """
        Discover partials and build the engine

        Raises:
            PartialDiscoveryError: The partials directory cannot be listed
        """
        partials = discover_partials(config)
        engine = TemplateEngine.from_config(config, partials)
        logger.debug(
            f"renderlayout:new => root={config.templates_path} layout={config.master} "
            f"partials={list(partials)} disable_cache={config.disable_cache}"
        )
        return cls(config, partials, engine)

    async def render(self, request: Request, view: str, *providers: DataProvider) -> HTTPResponse:
        """Build the view context for this request and render it"""
        view_data = await self.pipeline.build_view_context(request, providers)
        return await self.invoker.invoke(view, view_data)

    def __call__(self, view: str, *providers: DataProvider) -> Handler:
        providers = tuple(providers)

        async def handler(request: Request, *args: Any, **kwargs: Any) -> HTTPResponse:
            return await self.render(request, view, *providers)

        # Sanic names routes after the handler
        handler.__name__ = 'render_' + re.sub(r'\W', '_', view)
        handler.__qualname__ = handler.__name__
        return handler


def new(*options: Option, **overrides: Any) -> Renderer:
    """
    Build a renderer

    Positional options are applied first, keyword overrides after them.
    Later values for the same field win.

    Args:
        *options: (field, value) pairs from the option helpers
        **overrides: Field overrides by name

    Returns:
        Renderer

    Raises:
        ConfigurationError: Unknown option or invalid value
        PartialDiscoveryError: The partials directory cannot be listed

    Example:
        render = new(templates_path('templates'), extension('html'), disable_cache(True))
        app.add_route(render('home', static_data({'hello': 'world'})), '/')
    """
    config = RendererConfig.resolve(list(options) + list(overrides.items()))
    return Renderer.from_config(config)


def new_from_env(*options: Option, env_path=None, **overrides: Any) -> Renderer:
    """Build a renderer from RENDERLAYOUT_* environment variables, options on top"""
    config = RendererConfig.from_env(list(options) + list(overrides.items()), env_path=env_path)
    return Renderer.from_config(config)
