"""Core of semantic-attributes: message lookup, the concrete predicates and record validation helpers.

`localization` is imported first; the predicate contract depends on it.
"""

from .localization import (  # noqa: F401
    __,
    trans,
    translate_error,
    set_locale,
    get_locale,
    clear_cache,
    set_locale_path,
    get_locale_path,
)
from .predicates import *  # noqa: F401,F403
from .validation import (  # noqa: F401
    normalize_record,
    read_attribute,
    should_validate,
    validate_record,
    validate_record_or_fail,
    write_attribute,
)
