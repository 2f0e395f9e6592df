"""
Utility modules for localetree
"""

from .key_path import split_key_path, child_path, flatten, set_segments, nest
from .validators import PatchValidator, InputValidator

__all__ = [
    'split_key_path', 'child_path', 'flatten', 'set_segments', 'nest',
    'PatchValidator', 'InputValidator',
]
