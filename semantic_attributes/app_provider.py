import os
from typing import Optional

from semantic_attributes.core.localization import set_locale, set_locale_path
from semantic_attributes.utils.env_utils import configure_env
from semantic_attributes.utils.logging import setup_logging


def boot(*,
    env_file_name: Optional[str] = None,
    log_file_name: Optional[str] = None,
    locale: Optional[str] = None,
    locale_path: Optional[str] = None,
):
    """
    Sets up semantic-attributes for an application.
    - Loads environment variables (`.env.<ENV>` or `.env`, or `env_file_name`)
    - Sets up logging
    - Points error message lookup at the application's `lang/` directory

    Args:
        env_file_name: Optional environment file to load instead of the defaults.
        log_file_name: Optional log file name (default: `LOG_FILE_NAME` or `semantic_attributes.log`).
        locale: Optional locale to switch to.
        locale_path: Optional message directory (default: `LOCALE_PATH` or `<cwd>/lang`).
    """
    configure_env(env_file_name)
    setup_logging(log_file_name)

    set_locale_path(locale_path or os.getenv("LOCALE_PATH", os.path.join(os.getcwd(), "lang")))
    if locale:
        set_locale(locale)
