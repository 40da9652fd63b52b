"""
Reference searchers backed by an in-memory catalog or local files.
"""
from .exact_searcher import ExactNameSearcher
from .fuzzy_searcher import FuzzyNameSearcher
from .template_searcher import TemplateFileSearcher, is_file

__all__ = [
    "ExactNameSearcher",
    "FuzzyNameSearcher",
    "TemplateFileSearcher",
    "is_file",
]
