"""Shared fixtures: captured nslookup output and fake collaborators."""

import asyncio

import pytest

from nsrecords.dns import ResolutionFailure

DEBUG_OUTPUT = """\
Server:\t\t8.8.8.8
Address:\t8.8.8.8#53

------------
    QUESTIONS:
\texample.com, type = ANY, class = IN
    ANSWERS:
    ->  example.com
\tinternet address = 93.184.216.34
\tttl = 3600
    ->  example.com
\tnameserver = a.iana-servers.net.
\tttl = 86400
    ->  example.com
\tnameserver = b.iana-servers.net.
\tttl = 86400
    ->  example.com
\tMX preference = 10, mail exchanger = mail.example.com.
\tttl = 300
    ->  example.com
\ttext =

\t"v=spf1 -all"
\tttl = 86400
    ->  example.com
\tAAAA IPv6 address = 2606:2800:220:1:248:1893:25c8:1946
\tttl = 3600
    AUTHORITY RECORDS:
    ADDITIONAL RECORDS:
------------
Non-authoritative answer:
Name:\texample.com
Address: 93.184.216.34
example.com\tnameserver = a.iana-servers.net.
example.com\tnameserver = b.iana-servers.net.
example.com\tmail exchanger = 10 mail.example.com.
example.com\ttext = "v=spf1 -all"
"""

HOST_OUTPUT = """\
Server:\t\t8.8.8.8
Address:\t8.8.8.8#53

Non-authoritative answer:
Name:\t{host}
Address: {ip}
"""


def debug_lines() -> list[str]:
    return [line.rstrip() for line in DEBUG_OUTPUT.splitlines()]


def host_lines(host: str, ip: str) -> list[str]:
    return [line.rstrip() for line in HOST_OUTPUT.format(host=host, ip=ip).splitlines()]


class FakeGateway:
    """Records calls and answers from canned output instead of running nslookup."""

    def __init__(self, lines=None, hosts=None, error=None):
        self.lines = debug_lines() if lines is None else lines
        self.hosts = hosts or {}
        self.error = error
        self.calls = []

    async def resolve(self, target, record_type, *, debug=True):
        self.calls.append((target, record_type, debug))
        await asyncio.sleep(0)
        if debug:
            if self.error is not None:
                raise self.error
            return list(self.lines)
        if target not in self.hosts:
            raise ResolutionFailure(f"** server can't find {target}: NXDOMAIN")
        return host_lines(target, self.hosts[target])


class FakeResolver:
    """Maps hostnames to addresses and tracks how many resolutions overlap."""

    def __init__(self, addresses=None, delay=0.0):
        self.addresses = addresses or {}
        self.delay = delay
        self.calls = []
        self.active = 0
        self.max_active = 0

    async def resolve(self, hostname):
        self.calls.append(hostname)
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            await asyncio.sleep(self.delay)
            return self.addresses.get(hostname, "")
        finally:
            self.active -= 1


@pytest.fixture
def sanitized_debug_lines():
    from nsrecords.dns import sanitize_lines

    return sanitize_lines(debug_lines())
