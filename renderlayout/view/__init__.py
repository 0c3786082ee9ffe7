"""
View Package
Data merging, error classification and template rendering
"""
from renderlayout.view.classifier import Internal, UserFacing, classify
from renderlayout.view.engine import TemplateEngine
from renderlayout.view.functions import BASELINE_FUNCTIONS, build_function_table
from renderlayout.view.invoker import RenderInvoker
from renderlayout.view.partials import discover_partials
from renderlayout.view.pipeline import DataPipeline, run_provider, static_data

__all__ = [
    'classify',
    'UserFacing',
    'Internal',
    'TemplateEngine',
    'BASELINE_FUNCTIONS',
    'build_function_table',
    'RenderInvoker',
    'discover_partials',
    'DataPipeline',
    'run_provider',
    'static_data',
]
