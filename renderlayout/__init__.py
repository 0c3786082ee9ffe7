"""
renderlayout
Layout/partial view rendering for Sanic handlers, fed by request-scoped
data providers
"""
from renderlayout.config import (
    RendererConfig,
    templates_path,
    partials_path,
    layouts_path,
    layout,
    extension,
    delimiters,
    error_key,
    error_message,
    render_error,
    disable_cache,
    add_funcs,
    debug,
    default_data,
    merge_strategy,
)
from renderlayout.exceptions import (
    RenderLayoutException,
    ConfigurationError,
    PartialDiscoveryError,
    ProviderError,
    UserFacingError,
)
from renderlayout.renderer import Renderer, new, new_from_env
from renderlayout.view import DataPipeline, static_data

__all__ = [
    # Factory
    'Renderer',
    'new',
    'new_from_env',
    'static_data',
    'DataPipeline',

    # Configuration
    'RendererConfig',
    'templates_path',
    'partials_path',
    'layouts_path',
    'layout',
    'extension',
    'delimiters',
    'error_key',
    'error_message',
    'render_error',
    'disable_cache',
    'add_funcs',
    'debug',
    'default_data',
    'merge_strategy',

    # Exceptions
    'RenderLayoutException',
    'ConfigurationError',
    'PartialDiscoveryError',
    'ProviderError',
    'UserFacingError',
]
