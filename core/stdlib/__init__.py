# Nekonomicon Standard Library
"""
Pure helper modules that spells call into:
- text: string operations
- arithmetic: number operations on string records
- lists: SpellList container
"""

from .errors import ErrorCode, StdlibError
from .lists import SpellList
from . import arithmetic, text

__all__ = [
    'ErrorCode',
    'StdlibError',
    'SpellList',
    'arithmetic',
    'text',
]
