"""
Render Invoker
Hands the view context to the template engine and degrades to plain
text when rendering fails
"""
import asyncio
import json
from typing import Any, Dict

from sanic import response
from sanic.response import HTTPResponse

from renderlayout.config import RendererConfig
from renderlayout.logging import getLogger
from renderlayout.view.engine import TemplateEngine

logger = getLogger(__name__)


def pretty(data: Dict[str, Any]) -> str:
    """Indented JSON dump of a view context, repr when it cannot be serialised"""
    try:
        return json.dumps(data, indent=2, default=str)
    except (TypeError, ValueError) as e:
        logger.warning(f"renderlayout:pretty => error marshalling: {e}")
        return repr(data)


class RenderInvoker:
    """
    Renders one view per call and always produces a response

    Status is 200 whether the engine succeeds or not. On failure the view,
    extension, error and full context are logged and the configured
    render_error text is returned instead.
    """

    def __init__(self, engine: TemplateEngine, config: RendererConfig):
        self.engine = engine
        self.config = config

    async def invoke(self, view: str, view_data: Dict[str, Any]) -> HTTPResponse:
        try:
            # Template file I/O happens inside the engine
            content = await asyncio.to_thread(self.engine.render, view, view_data)
        except Exception as e:
            logger.error(
                f"renderlayout:render view [{view}{self.config.extension}], error: {e}, "
                f"with data => \n{pretty(view_data)}\n",
                extra={'view': view, 'extension': self.config.extension},
            )
            return response.text(self.config.render_error, status=200)

        if self.config.debug:
            logger.info(
                f"renderlayout:render view: [{view}{self.config.extension}], "
                f"with data => \n{pretty(view_data)}\n",
                extra={'view': view, 'extension': self.config.extension},
            )

        return response.html(content, status=200)
