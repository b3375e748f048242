import os

# Locale used to resolve symbolic error messages
LOCALE_DEFAULT = os.getenv("LOCALE_DEFAULT", "en")

# Locale consulted when a key is missing from the current one
LOCALE_FALLBACK = os.getenv("LOCALE_FALLBACK", "en")

# Directory with application `<locale>.json` message files
LOCALE_PATH = os.getenv("LOCALE_PATH", os.path.join(os.getcwd(), "lang"))

# Messages bundled with the package, overridden key by key by LOCALE_PATH
BUNDLED_LOCALE_PATH = os.path.join(os.path.dirname(__file__), "lang")

# Lookup scope of every symbolic error message
ERROR_MESSAGES_SCOPE = "semantic-attributes.errors.messages"

# Scheme prepended by UrlPredicate.normalize to scheme-less input
URL_IMPLIED_SCHEME = os.getenv("URL_IMPLIED_SCHEME", "http")

# Schemes UrlPredicate accepts unless configured otherwise
URL_SCHEMES = ["http", "https"]

LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"]
