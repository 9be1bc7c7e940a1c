import dataclasses as dc
from types import MappingProxyType
from collections.abc import Mapping
from typing import Any


@dc.dataclass(frozen=True, slots=True)
class ARecord:
    ip: str
    ttl: str


@dc.dataclass(frozen=True, slots=True)
class NSRecord:
    host: str
    ip: str
    ttl: str


@dc.dataclass(frozen=True, slots=True)
class MXRecord:
    host: str
    priority: str
    ip: str
    ttl: str


@dc.dataclass(frozen=True, slots=True)
class TXTRecord:
    text: str
    ttl: str


DNSRecord = ARecord | NSRecord | MXRecord | TXTRecord

QueryResult = Mapping[str, tuple[DNSRecord, ...]]


def freeze_records(bag: dict[str, list[DNSRecord]]) -> QueryResult:
    '''
    Turn the per-type lists built during a lookup into a read-only
    mapping of tuples, dropping types with no records.

    Parameters
    ----------
    bag : dict[str, list[DNSRecord]]

    Returns
    -------
    QueryResult
    '''
    return MappingProxyType({
        name: tuple(records)
        for name, records in bag.items()
        if records
    })


def query_result_to_dict(records: QueryResult) -> dict[str, list[dict[str, Any]]]:
    return {
        name: [dc.asdict(record) for record in entries]
        for name, entries in records.items()
    }
