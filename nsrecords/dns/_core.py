import asyncio
import dataclasses as dc
import logging
import re

import dns.exception
import dns.name
import dns.rdatatype as rtype

from nsrecords._errors import InvalidDomainFormat, InvalidRecordType
from nsrecords.dns import _parser as record_parser
from nsrecords.dns._models import LookupConfig, LookupResult
from nsrecords.dns._records import DNSRecord, MXRecord, NSRecord, freeze_records
from nsrecords.dns._resolver import HostResolver, NSLookupHostResolver
from nsrecords.process import NSLookupGateway, retry_policy

logger = logging.getLogger(__name__)

_DOMAIN_PATTERN = re.compile(
    r"^(?:[a-z0-9_](?:[a-z0-9_-]{0,61}[a-z0-9_])?\.)+[a-z][a-z0-9-]{0,61}[a-z0-9]$"
)

_QUERY_TYPES = (
    rtype.ANY,
    rtype.A,
    rtype.MX,
    rtype.NS,
    rtype.TXT,
)


def normalize_domain(domain: str) -> str:
    '''
    Trim, lower-case and validate a domain name. Underscores are
    allowed below the top-level label so service names such as
    `_dmarc.example.com` can be queried.

    Parameters
    ----------
    domain : str

    Returns
    -------
    str
        The domain without a trailing dot.

    Raises
    ------
    InvalidDomainFormat
    '''
    name = domain.strip().lower().rstrip('.')
    if not _DOMAIN_PATTERN.match(name):
        raise InvalidDomainFormat(f"Invalid domain name {domain!r}")

    try:
        dns.name.from_text(name)
    except dns.exception.DNSException as e:
        raise InvalidDomainFormat(f"Invalid domain name {domain!r}: {e}")

    return name


def resolve_query_type(record_type: str) -> rtype.RdataType:
    '''
    Map a user supplied record type to the type passed to nslookup.
    ALL is accepted as an alias for ANY.

    Parameters
    ----------
    record_type : str

    Returns
    -------
    rtype.RdataType

    Raises
    ------
    InvalidRecordType
    '''
    name = str(record_type).strip().upper()
    if name == "ALL":
        return rtype.ANY

    try:
        rtyped = rtype.from_text(name)
    except (dns.exception.DNSException, ValueError) as e:
        raise InvalidRecordType(f"Unknown record type {record_type!r}: {e}")

    if rtyped not in _QUERY_TYPES:
        raise InvalidRecordType(
            f"Unsupported record type {record_type!r}, expected one of "
            "ALL, ANY, A, MX, NS, TXT"
        )
    return rtyped


class NSLookupBackend:
    '''
    Looks up the A, NS, MX and TXT records of a domain by parsing
    `nslookup -debug` output, then resolves the name server and mail
    exchanger hostnames to addresses.
    '''

    def __init__(
        self,
        config: LookupConfig | None = None,
        *,
        gateway: NSLookupGateway | None = None,
        resolver: HostResolver | None = None,
    ) -> None:
        self._config = config or LookupConfig()
        self._gateway = gateway or NSLookupGateway(self._config.gateway)
        self._resolver = resolver or NSLookupHostResolver(
            self._gateway,
            retry_policy(
                attempts=self._config.resolver_attempts,
                delay=self._config.resolver_delay,
            ),
        )

    async def _resolve_hosts(self, hosts: list[str]) -> dict[str, str]:
        '''
        Resolve hostnames concurrently, at most `max_workers` at a time.

        Parameters
        ----------
        hosts : list[str]
            Unique hostnames in scan order

        Returns
        -------
        dict[str, str]
            hostname -> address, empty string when unresolved
        '''
        semaphore = asyncio.Semaphore(max(1, self._config.max_workers))

        async def _bounded(host: str) -> str:
            async with semaphore:
                return await self._resolver.resolve(host)

        addresses = await asyncio.gather(*(
            _bounded(host) for host in hosts
        ))
        return dict(zip(hosts, addresses))

    async def _attach_addresses(self, bag: dict[str, list[DNSRecord]]) -> None:
        hosts: list[str] = []
        for records in bag.values():
            for record in records:
                if isinstance(record, (NSRecord, MXRecord)) and record.host not in hosts:
                    hosts.append(record.host)

        if not hosts:
            return

        addresses = await self._resolve_hosts(hosts)
        for name, records in bag.items():
            bag[name] = [
                dc.replace(record, ip=addresses[record.host])
                if isinstance(record, (NSRecord, MXRecord)) else record
                for record in records
            ]

    async def lookup(self, domain: str, record_type: str = "ANY") -> LookupResult:
        '''
        Look up the DNS records of a domain.

        Parameters
        ----------
        domain : str
        record_type : str, optional
            One of ALL, ANY, A, MX, NS, TXT (case-insensitive), by default "ANY"

        Returns
        -------
        LookupResult
            The records grouped by type name and the warnings for any
            record that had to be skipped.

        Raises
        ------
        InvalidDomainFormat
        InvalidRecordType
            Both raised before nslookup is run.
        ResolutionFailure
            If the nslookup run for the domain itself fails.
        '''
        query_type = resolve_query_type(record_type)
        name = normalize_domain(domain)
        query_text = rtype.to_text(query_type)

        raw_lines = await self._gateway.resolve(name, query_text)
        lines = record_parser.sanitize_lines(raw_lines)

        warnings: list[str] = []
        bag = record_parser.collect_records(lines, name, warnings)
        await self._attach_addresses(bag)

        logger.debug(
            f"{name} {query_text}: "
            + ", ".join(f"{len(v)} {k}" for k, v in bag.items())
        )
        return LookupResult(
            domain=name,
            query_type=query_text,
            records=freeze_records(bag),
            warnings=tuple(warnings),
        )


def lookup_sync(
    domain: str,
    record_type: str = "ANY",
    config: LookupConfig | None = None,
) -> LookupResult:
    '''
    Blocking wrapper around `NSLookupBackend.lookup`.
    Not usable from inside a running event loop.
    '''
    return asyncio.run(NSLookupBackend(config).lookup(domain, record_type))
