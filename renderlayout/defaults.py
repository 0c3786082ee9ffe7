"""
Renderer Default Values
All hardcoded values should be defined here and referenced by RendererConfig
These defaults can be overridden with option helpers or RENDERLAYOUT_* env vars
"""

# ============================================================================
# TEMPLATE PATH DEFAULTS
# ============================================================================

DEFAULT_TEMPLATES_PATH = 'templates'
DEFAULT_PARTIALS_PATH = 'partials'
DEFAULT_LAYOUTS_PATH = 'layouts'
DEFAULT_LAYOUT = 'index'
DEFAULT_EXTENSION = '.html'

# ============================================================================
# DELIMITER DEFAULTS
# ============================================================================

DEFAULT_LEFT_DELIMITER = '{{'
DEFAULT_RIGHT_DELIMITER = '}}'

# ============================================================================
# MERGE / ERROR DEFAULTS
# ============================================================================

MERGE_ACCUMULATE = 'accumulate'
MERGE_OVERWRITE = 'overwrite'
MERGE_STRATEGIES = (MERGE_ACCUMULATE, MERGE_OVERWRITE)
DEFAULT_MERGE_STRATEGY = MERGE_ACCUMULATE

# Error key depends on the merge strategy unless set explicitly
DEFAULT_ERROR_KEYS = {
    MERGE_ACCUMULATE: 'errors',
    MERGE_OVERWRITE: 'error',
}
DEFAULT_ERROR_SEPARATOR = ', '

DEFAULT_ERROR_MESSAGE = 'An unexpected error occurred.'
DEFAULT_RENDER_ERROR = 'Something went wrong.'

# ============================================================================
# ENGINE DEFAULTS
# ============================================================================

DEFAULT_DISABLE_CACHE = False
DEFAULT_DEBUG = False
DEFAULT_CACHE_SIZE = 400  # compiled templates kept by Jinja2

# ============================================================================
# ENVIRONMENT DEFAULTS
# ============================================================================

DEFAULT_ENV_PREFIX = 'RENDERLAYOUT_'
