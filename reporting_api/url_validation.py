"""
Generic URL well-formedness checks

No scheme allow-list is enforced: any scheme is accepted as long as the URL
is structurally sound. Only http and https hosts are held to hostname rules.
"""

import ipaddress
import re
import string
from typing import Any
from urllib.parse import urlsplit

# Characters that may appear anywhere in a URL
URL_SAFE_CHARS = frozenset(
    string.ascii_letters + string.digits + "$-_.+!*'(),{}|\\^~[]`<>#%\";/?:@&="
)

# Schemes that are complete without a host (mailto:user@example.com, file:///tmp)
HOSTLESS_SCHEMES = frozenset({"mailto", "news", "file"})

HOSTNAME_SCHEMES = frozenset({"http", "https"})

MAX_HOSTNAME_LENGTH = 253
MAX_LABEL_LENGTH = 63
MAX_PORT = 65535

_USERINFO_PATTERN = re.compile(r"(?:[A-Za-z0-9\-._~!$&'()*+,;=:]|%[0-9A-Fa-f]{2})*")
_LABEL_PATTERN = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9\-]*[A-Za-z0-9])?")


def is_valid_url(value: Any) -> bool:
    """
    Check whether a value is a well-formed absolute URL

    Args:
        value: Candidate URL; anything that is not a non-empty string is rejected

    Returns:
        True if the URL has a scheme and a sound authority/path structure
    """
    if not isinstance(value, str) or not value:
        return False

    if not set(value) <= URL_SAFE_CHARS:
        return False

    try:
        parts = urlsplit(value)
    except ValueError:
        # Unbalanced IPv6 brackets and similar
        return False

    scheme = parts.scheme.lower()
    if not scheme:
        return False

    userinfo, has_userinfo, hostport = parts.netloc.rpartition("@")

    try:
        host, port = _split_host_port(hostport)
    except ValueError:
        return False

    if not host and scheme not in HOSTLESS_SCHEMES:
        return False

    if port and (not port.isdigit() or int(port) > MAX_PORT):
        return False

    if has_userinfo:
        user, _, password = userinfo.partition(":")
        if not (_is_valid_userinfo(user) and _is_valid_userinfo(password)):
            return False

    if scheme in HOSTNAME_SCHEMES:
        if host.startswith("[") and host.endswith("]"):
            return _is_valid_ipv6(host[1:-1])
        return is_valid_hostname(host)

    return True


def is_valid_hostname(host: str) -> bool:
    """
    Check a DNS hostname: letters, digits and inner hyphens per label

    A single trailing dot (fully qualified form) is allowed.
    """
    if host.endswith("."):
        host = host[:-1]

    if not host or len(host) > MAX_HOSTNAME_LENGTH:
        return False

    return all(
        len(label) <= MAX_LABEL_LENGTH and _LABEL_PATTERN.fullmatch(label)
        for label in host.split(".")
    )


def _split_host_port(hostport: str) -> tuple[str, str]:
    """Split 'host:port' or '[v6]:port' into its parts; port may be empty"""
    if hostport.startswith("["):
        end = hostport.find("]")
        if end == -1:
            raise ValueError(f"Unterminated IPv6 literal: {hostport}")
        host, rest = hostport[: end + 1], hostport[end + 1 :]
        if rest and not rest.startswith(":"):
            raise ValueError(f"Unexpected characters after IPv6 literal: {hostport}")
        return host, rest[1:]

    host, _, port = hostport.partition(":")
    return host, port


def _is_valid_userinfo(text: str) -> bool:
    return _USERINFO_PATTERN.fullmatch(text) is not None


def _is_valid_ipv6(text: str) -> bool:
    # No zone identifiers (fe80::1%eth0)
    if "%" in text:
        return False
    try:
        ipaddress.IPv6Address(text)
    except ValueError:
        return False
    return True
