import ipaddress
import re

# DNS label, underscores allowed
_label = re.compile(rb"[A-Z\d_](?:[A-Z\d\-_]{0,61}[A-Z\d_])?", re.IGNORECASE)


def is_valid_host(host: str) -> bool:
    """
    True for IPv4/IPv6 literals and for hostnames that are valid once IDNA-encoded.
    A single trailing dot is allowed.
    """
    try:
        ipaddress.ip_address(host)
        return True
    except ValueError:
        pass
    try:
        encoded = host.encode("idna")
    except UnicodeError:
        return False
    if encoded.endswith(b"."):
        encoded = encoded[:-1]
    # RFC1035: 255 bytes or less.
    if not encoded or len(encoded) > 255:
        return False
    return all(_label.fullmatch(label) for label in encoded.split(b"."))


def is_valid_port(port: int) -> bool:
    return 0 <= port <= 65535


def is_loopback(host: str) -> bool:
    """True for loopback IP literals and for "localhost"."""
    if host.lower() == "localhost":
        return True
    try:
        return ipaddress.ip_address(host).is_loopback
    except ValueError:
        return False
