from __future__ import annotations

from typing import Iterable, Iterator
from urllib.parse import urlsplit

from .errors import InvalidInput
from .log import get_logger

logger = get_logger(__name__)

SCHEME_PREFIXES = ("https://", "http://")


class AllowedHostsValidator:
    """Set of hosts an authentication provider may send credentials to.

    An empty validator places no restriction on the request host. Hosts are
    only ever added; ``set_allowed_hosts`` merges into the current set.
    Instances are not synchronized, so share one across threads only after
    configuration is done.
    """

    def __init__(self, allowed_hosts: Iterable[str] = ()) -> None:
        # dict keeps insertion order for get_allowed_hosts
        self._allowed_hosts: dict[str, None] = {}
        self.set_allowed_hosts(allowed_hosts)

    def set_allowed_hosts(self, hosts: Iterable[str]) -> None:
        if isinstance(hosts, (str, bytes)):
            raise InvalidInput(f"Expected a sequence of hosts, got a single {type(hosts).__name__}")
        for host in hosts:
            if not isinstance(host, str):
                raise InvalidInput(f"Expected a host string, got {type(host).__name__}")
            normalized = normalize_host(host)
            if not normalized or normalized in self._allowed_hosts:
                continue
            self._allowed_hosts[normalized] = None
            logger.debug("Allowed host added: %s", normalized)

    def get_allowed_hosts(self) -> list[str]:
        return list(self._allowed_hosts)

    def is_url_host_valid(self, url: str) -> bool:
        host = extract_host(url)
        if not self._allowed_hosts:
            return True
        if host in self._allowed_hosts:
            return True
        logger.debug("Host %s is not in the allowed hosts", host)
        return False

    def __contains__(self, host: object) -> bool:
        return isinstance(host, str) and normalize_host(host) in self._allowed_hosts

    def __iter__(self) -> Iterator[str]:
        return iter(self.get_allowed_hosts())

    def __len__(self) -> int:
        return len(self._allowed_hosts)

    def __repr__(self) -> str:
        return f"AllowedHostsValidator({self.get_allowed_hosts()!r})"


def normalize_host(value: str) -> str:
    """Trim, drop every leading http:// or https:// (any case), then lower-case."""
    host = value.strip()
    stripped = True
    while stripped:
        stripped = False
        for prefix in SCHEME_PREFIXES:
            if host[: len(prefix)].lower() == prefix:
                host = host[len(prefix) :].strip()
                stripped = True
                break
    return host.lower().strip()


def extract_host(url: str) -> str:
    if not isinstance(url, str):
        raise InvalidInput(f"{url!r} is malformed")
    try:
        parsed = urlsplit(url)
        host = parsed.hostname
    except ValueError as exc:
        raise InvalidInput(f"{url} is malformed") from exc
    if not host or not host.strip():
        raise InvalidInput(f"{url} must contain host")
    host = host.strip().lower()
    # hostname drops the brackets around IPv6 literals
    if ":" in host:
        host = f"[{host}]"
    return host
