"""
Template Engine
Jinja2 environment composing a view into the configured layout
"""
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Tuple

from jinja2 import Environment, FileSystemLoader, TemplateNotFound, pass_context, select_autoescape
from markupsafe import Markup

from renderlayout import defaults
from renderlayout.config import RendererConfig
from renderlayout.view.functions import build_function_table

LAYOUT_CONTENT_KEY = 'content'


class TemplateEngine:
    """
    Renders "<view><extension>" and wraps it in the master layout

    The layout receives the rendered view as the safe variable ``content``
    next to the full view context. Discovered partials can be rendered from
    any template with ``partial("partials/header")``; they see the caller's
    context.

    Rendering is synchronous. Call it from a worker thread in async code.
    """

    def __init__(
        self,
        root: str,
        extension: str = defaults.DEFAULT_EXTENSION,
        master: Optional[str] = None,
        partials: Sequence[str] = (),
        disable_cache: bool = False,
        funcs: Optional[Mapping[str, Callable]] = None,
        delimiters: Tuple[str, str] = (defaults.DEFAULT_LEFT_DELIMITER, defaults.DEFAULT_RIGHT_DELIMITER)
    ):
        self.root = root
        self.extension = extension
        self.master = master
        self.partials = tuple(partials)
        self.disable_cache = disable_cache

        left, right = delimiters
        self.env = Environment(
            loader=FileSystemLoader(root),
            autoescape=select_autoescape(
                enabled_extensions=(extension.lstrip('.'), 'html', 'htm', 'xml'),
                default_for_string=True,
            ),
            variable_start_string=left,
            variable_end_string=right,
            cache_size=0 if disable_cache else defaults.DEFAULT_CACHE_SIZE,
            auto_reload=disable_cache,
        )

        self.funcs = dict(funcs or {})
        self.env.globals.update(self.funcs)
        self.env.filters.update(self.funcs)
        self.env.globals['partial'] = self._partial_function()

    @classmethod
    def from_config(cls, config: RendererConfig, partials: Sequence[str]) -> 'TemplateEngine':
        """
        Build the engine for a resolved configuration

        Example:
            engine = TemplateEngine.from_config(config, discover_partials(config))
        """
        return cls(
            root=config.templates_path,
            extension=config.extension,
            master=config.master,
            partials=partials,
            disable_cache=config.disable_cache,
            funcs=build_function_table(config.funcs),
            delimiters=config.delimiters,
        )

    def template_name(self, identifier: str) -> str:
        return f"{identifier}{self.extension}"

    def _partial_function(self):
        engine = self

        @pass_context
        def partial(context, name: str) -> Markup:
            if name not in engine.partials:
                raise TemplateNotFound(engine.template_name(name))
            template = engine.env.get_template(engine.template_name(name))
            return Markup(template.render(context.get_all()))

        return partial

    def render(self, view: str, context: Optional[Dict[str, Any]] = None) -> str:
        """
        Render a view inside the master layout

        Args:
            view: View identifier, without extension
            context: View context

        Returns:
            Rendered document

        Raises:
            jinja2.TemplateError: Missing template or execution error
        """
        context = context or {}
        body = self.env.get_template(self.template_name(view)).render(context)
        if not self.master:
            return body

        layout_context = dict(context)
        layout_context[LAYOUT_CONTENT_KEY] = Markup(body)
        return self.env.get_template(self.template_name(self.master)).render(layout_context)

