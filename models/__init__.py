# This file makes the models directory a Python package
from .verse import BibleVerse, VERSES_TABLE

__all__ = [
    'BibleVerse',
    'VERSES_TABLE',
]
