"""Domain vocabulary: static patterns, term vectors, and keyword lists."""

from .base import get_vocabulary, list_vocabularies  # noqa: F401

# Import domain modules to trigger registration
from . import code  # noqa: F401
from . import writing  # noqa: F401
from . import analysis  # noqa: F401
from . import research  # noqa: F401
