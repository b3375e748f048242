from __future__ import annotations

import ipaddress
import re
from typing import Any, Optional
from urllib.parse import SplitResult, urlsplit

from semantic_attributes import config
from semantic_attributes.contracts.predicate import MessageKey, Predicate
from semantic_attributes.utils.option_utils import Option

# `scheme://` at the start of a full URL
_URL_PREFIX = re.compile(r"([A-Za-z][A-Za-z0-9+.\-]*)://")

# `scheme:` at the start of anything that already names a scheme; `host:port` is not one
_SCHEME_PREFIX = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*:(?!\d)")

_HOST_PATTERN = re.compile(r"[A-Za-z0-9_\-.]+")


def _is_ip_address(host: str) -> bool:
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return False
    return True


class UrlPredicate(Predicate):
    """
    Validates well-formed URLs.

    Options:
        allow_ip_address  Whether hosts may be IP literals (default: True).
        schemes           Allowed schemes, matched exactly (default: ["http", "https"]).
        domains           Allowed top-level domains, e.g. ["com", "org"] (default: any).
        ports             Allowed ports; include None to allow URLs without one (default: any).
        implied_scheme    Scheme `normalize` adds to scheme-less input (default: "http").
                          Set to None to leave such input alone.
    """

    option_names = {
        "allow_ip_address": "allow_ip_address",
        "schemes": "schemes",
        "domains": "domains",
        "ports": "ports",
        "implied_scheme": "implied_scheme",
    }

    allow_ip_address = Option(bool, True)
    schemes = Option(list[str], default_factory=lambda: list(config.URL_SCHEMES))
    domains = Option(Optional[list[str]], None)
    ports = Option(Optional[list[Optional[int]]], None)
    implied_scheme = Option(Optional[str], config.URL_IMPLIED_SCHEME)

    @property
    def default_error_message(self) -> str:
        return MessageKey("not_a_url")

    def validate(self, value: Any, record: Any) -> bool:
        parts = self._split(value)
        if parts is None:
            return False

        scheme = _URL_PREFIX.match(value).group(1)
        host = parts.hostname
        is_ip = _is_ip_address(host)

        if scheme not in self.schemes:
            return False
        if is_ip and not self.allow_ip_address:
            return False
        if not self._valid_domain(host, is_ip):
            return False
        if self.ports is not None and parts.port not in self.ports:
            return False
        return True

    def normalize(self, value: Any) -> Any:
        if not self.implied_scheme or not isinstance(value, str) or not value.strip():
            return value
        if _SCHEME_PREFIX.match(value):
            return value
        return f"{self.implied_scheme}://{value}"

    def _split(self, value: Any) -> Optional[SplitResult]:
        """Split a full URL into its parts; None when `value` is not one."""
        if not isinstance(value, str) or not _URL_PREFIX.match(value):
            return None
        try:
            parts = urlsplit(value)
            # `port` raises for non-numeric or out-of-range ports
            parts.port
        except ValueError:
            return None

        host = parts.hostname
        if not host:
            return None
        if not _is_ip_address(host) and not _HOST_PATTERN.fullmatch(host):
            return None
        return parts

    def _valid_domain(self, host: str, is_ip: bool) -> bool:
        if is_ip:
            return self.domains is None

        labels = host.split(".")
        if len(labels) < 2 or not all(labels[:-1]):
            return False

        tld = labels[-1]
        if not tld or tld.isdigit():
            return False
        if self.domains is not None:
            return tld in {domain.lower() for domain in self.domains}
        return True
