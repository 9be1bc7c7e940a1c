import logging
from typing import Protocol

from nsrecords._errors import ResolutionFailure
from nsrecords.dns._parser import sanitize_lines
from nsrecords.process import NSLookupGateway, retry_policy

logger = logging.getLogger(__name__)

# "Server:" and "Address: <server>#53" come before the answer
_SERVER_HEADER_LINES = 2


class HostResolver(Protocol):
    async def resolve(self, hostname: str) -> str:
        ...


def parse_host_address(lines: list[str]) -> str:
    '''
    Pick the first answer address out of sanitized, non-debug
    `nslookup -type=A` output.

    Parameters
    ----------
    lines : list[str]

    Returns
    -------
    str
        The address, or an empty string when there is no answer.
    '''
    if len(lines) <= _SERVER_HEADER_LINES:
        return ""

    for line in lines[_SERVER_HEADER_LINES:]:
        key, sep, value = line.strip().partition(":")
        if sep and key == "Address":
            return value.strip()
    return ""


class NSLookupHostResolver:
    '''
    Resolves name server and mail exchanger hostnames to a single
    address with a secondary address-only nslookup run.
    '''
    __slots__ = ('_gateway', '_retry')

    def __init__(
        self,
        gateway: NSLookupGateway | None = None,
        retry: retry_policy | None = None,
    ) -> None:
        self._gateway = gateway or NSLookupGateway()
        self._retry = retry or retry_policy(attempts=2)

    async def resolve(self, hostname: str) -> str:
        host = hostname.strip().rstrip('.')
        if not host:
            return ""

        try:
            lines = await self._retry.call_with_retries(
                self._gateway.resolve, host, "A", debug=False
            )
        except ResolutionFailure as e:
            logger.info(f"Could not resolve {host}: {e}")
            return ""

        return parse_host_address(sanitize_lines(lines))
