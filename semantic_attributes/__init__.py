"""
semantic-attributes - Pluggable attribute validation for Python applications

This package provides:
- Predicates: reusable validation rules bound to one attribute, each able to
  validate, normalize human input and render stored values for humans
- Concrete predicates for numbers, numeric ranges and URLs
- Symbolic error messages resolved through JSON locale files
- Helpers that apply predicates to a record (create/update phases, conditions,
  empty values)
"""

__version__ = "0.1.0"
__license__ = "MIT"

# core first: the predicate contract depends on core.localization
from .core import *  # noqa: F401,F403
from .core.localization import __, set_locale, get_locale, trans
from .contracts import *  # noqa: F401,F403
from .exceptions import *  # noqa: F401,F403
from .app_provider import boot
