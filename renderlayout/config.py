"""
Renderer Configuration
Resolves ordered (field, value) overrides over the defaults into one frozen config
"""
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple, Union

from renderlayout import defaults
from renderlayout.exceptions import ConfigurationError
from renderlayout.support.env_helper import EnvHelper

Option = Tuple[str, Any]


@dataclass(frozen=True)
class RendererConfig:
    """
    Effective renderer configuration

    Created once per renderer and never mutated. Build it with resolve()
    rather than calling the constructor directly, so values are normalised.

    Attributes:
        templates_path: Root directory for all templates
        partials_path: Partials directory, relative to templates_path
        layouts_path: Layouts directory, relative to templates_path
        layout: Layout template name, without extension
        extension: Template file extension, always with a leading dot
        delimiters: (left, right) variable delimiters
        error_key: Context key holding user-facing errors
        error_message: Message shown in place of internal provider errors
        render_error: Plain text written when rendering fails
        disable_cache: Re-read templates from disk on every render
        funcs: Extra template functions, overlaid on the baseline library
        debug: Log every successful render with its context
        default_data: Provider run before the per-call providers of every view
        merge_strategy: 'accumulate' or 'overwrite'
    """
    templates_path: str = defaults.DEFAULT_TEMPLATES_PATH
    partials_path: str = defaults.DEFAULT_PARTIALS_PATH
    layouts_path: str = defaults.DEFAULT_LAYOUTS_PATH
    layout: str = defaults.DEFAULT_LAYOUT
    extension: str = defaults.DEFAULT_EXTENSION
    delimiters: Tuple[str, str] = (defaults.DEFAULT_LEFT_DELIMITER, defaults.DEFAULT_RIGHT_DELIMITER)
    error_key: Optional[str] = None
    error_message: str = defaults.DEFAULT_ERROR_MESSAGE
    render_error: str = defaults.DEFAULT_RENDER_ERROR
    disable_cache: bool = defaults.DEFAULT_DISABLE_CACHE
    funcs: Mapping[str, Callable] = field(default_factory=lambda: MappingProxyType({}))
    debug: bool = defaults.DEFAULT_DEBUG
    default_data: Optional[Callable] = None
    merge_strategy: str = defaults.DEFAULT_MERGE_STRATEGY

    def __post_init__(self):
        if self.error_key is None:
            object.__setattr__(self, 'error_key', defaults.DEFAULT_ERROR_KEYS[self.merge_strategy])

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def resolve(
        cls,
        overrides: Union[Iterable[Option], Mapping[str, Any], None] = None
    ) -> 'RendererConfig':
        """
        Apply overrides in order over the defaults

        Later overrides of the same field replace earlier ones.

        Args:
            overrides: Ordered (field, value) pairs, or a mapping

        Returns:
            Frozen RendererConfig

        Raises:
            ConfigurationError: Unknown field or invalid value

        Example:
            config = RendererConfig.resolve([
                layout('app'),
                extension('tmpl'),
                disable_cache(True),
            ])
        """
        if overrides is None:
            overrides = ()
        elif isinstance(overrides, Mapping):
            overrides = overrides.items()

        known = cls.field_names()
        values: Dict[str, Any] = {}
        for item in overrides:
            try:
                name, value = item
            except (TypeError, ValueError):
                raise ConfigurationError(f"Option must be a (field, value) pair, got {item!r}")
            if name not in known:
                raise ConfigurationError(f"Unknown option '{name}'")
            values[name] = _normalise(name, value)

        return cls(**values)

    @classmethod
    def from_env(
        cls,
        overrides: Union[Iterable[Option], Mapping[str, Any], None] = None,
        env_path=None,
        prefix: str = defaults.DEFAULT_ENV_PREFIX
    ) -> 'RendererConfig':
        """
        Resolve configuration from environment variables, then overrides

        Explicit overrides are applied after the environment, so they win.

        Example:
            # RENDERLAYOUT_LAYOUT=app RENDERLAYOUT_DISABLE_CACHE=true
            config = RendererConfig.from_env([debug(True)])
        """
        if env_path is not None:
            EnvHelper.load(env_path)

        options = list(env_options(prefix))
        if isinstance(overrides, Mapping):
            options.extend(overrides.items())
        elif overrides is not None:
            options.extend(overrides)
        return cls.resolve(options)

    @property
    def partials_dir(self) -> str:
        return f"{self.templates_path}/{self.partials_path}"

    @property
    def master(self) -> str:
        """Layout identifier, relative to templates_path"""
        return f"{self.layouts_path}/{self.layout}"

    def template_name(self, identifier: str) -> str:
        return f"{identifier}{self.extension}"


def _normalise(name: str, value: Any) -> Any:
    if name == 'extension':
        value = str(value)
        return value if value.startswith('.') else f".{value}"

    if name == 'delimiters':
        try:
            left, right = value
        except (TypeError, ValueError):
            raise ConfigurationError(f"Delimiters must be a (left, right) pair, got {value!r}")
        if not left or not right:
            raise ConfigurationError("Delimiters must not be empty")
        return (str(left), str(right))

    if name == 'merge_strategy':
        if value not in defaults.MERGE_STRATEGIES:
            raise ConfigurationError(
                f"Unknown merge strategy '{value}', expected one of {defaults.MERGE_STRATEGIES}"
            )
        return value

    if name == 'funcs':
        funcs = dict(value or {})
        for func_name, func in funcs.items():
            if not callable(func):
                raise ConfigurationError(f"Template function '{func_name}' is not callable")
        return MappingProxyType(funcs)

    if name == 'default_data':
        if value is not None and not callable(value):
            raise ConfigurationError("default_data must be callable")
        return value

    if name in ('disable_cache', 'debug'):
        return bool(value)

    return value


# ============================================================================
# Option helpers
# ============================================================================

def templates_path(path: str) -> Option:
    """Root directory for templates. Default is "templates" """
    return ('templates_path', path)


def partials_path(path: str) -> Option:
    """Partials directory within the templates path. Default is "partials" """
    return ('partials_path', path)


def layouts_path(path: str) -> Option:
    """Layouts directory within the templates path. Default is "layouts" """
    return ('layouts_path', path)


def layout(name: str) -> Option:
    """Layout used for every view, e.g. "templates/layouts/index.html". Default is "index" """
    return ('layout', name)


def extension(ext: str) -> Option:
    """File extension for views, layouts and partials. Default is ".html" """
    return ('extension', ext)


def delimiters(left: str, right: str) -> Option:
    """Variable delimiters. Default is "{{" and "}}" """
    return ('delimiters', (left, right))


def error_key(key: str) -> Option:
    """Context key holding user-facing errors. Default is "errors" ("error" when overwriting)"""
    return ('error_key', key)


def error_message(message: str) -> Option:
    """Message displayed instead of an internal provider error"""
    return ('error_message', message)


def render_error(message: str) -> Option:
    """Text written when rendering fails completely. Default is "Something went wrong." """
    return ('render_error', message)


def disable_cache(disabled: bool = True) -> Option:
    return ('disable_cache', disabled)


def add_funcs(funcs: Mapping[str, Callable]) -> Option:
    """Extra template functions. Overrides baseline functions with the same name"""
    return ('funcs', funcs)


def debug(enabled: bool = True) -> Option:
    return ('debug', enabled)


def default_data(provider: Callable) -> Option:
    """Provider called before every view rendered by this renderer"""
    return ('default_data', provider)


def merge_strategy(strategy: str) -> Option:
    return ('merge_strategy', strategy)


_ENV_STRING_FIELDS = (
    'templates_path', 'partials_path', 'layouts_path', 'layout', 'extension',
    'error_key', 'error_message', 'render_error', 'merge_strategy',
)
_ENV_BOOL_FIELDS = ('disable_cache', 'debug')


def env_options(prefix: str = defaults.DEFAULT_ENV_PREFIX) -> Iterable[Option]:
    """
    Yield overrides found in prefixed environment variables

    Example:
        RENDERLAYOUT_EXTENSION=tmpl -> ('extension', 'tmpl')
    """
    for name in _ENV_STRING_FIELDS:
        value = EnvHelper.get(f"{prefix}{name.upper()}")
        if value is not None:
            yield (name, value)

    for name in _ENV_BOOL_FIELDS:
        key = f"{prefix}{name.upper()}"
        if EnvHelper.get(key) is not None:
            yield (name, EnvHelper.get_bool(key))

    left = EnvHelper.get(f"{prefix}LEFT_DELIMITER")
    right = EnvHelper.get(f"{prefix}RIGHT_DELIMITER")
    if left is not None or right is not None:
        yield ('delimiters', (left or defaults.DEFAULT_LEFT_DELIMITER,
                              right or defaults.DEFAULT_RIGHT_DELIMITER))
