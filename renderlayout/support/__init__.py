"""
Renderer Support Classes
"""

from renderlayout.support.env_helper import EnvHelper

__all__ = [
    'EnvHelper',
]
