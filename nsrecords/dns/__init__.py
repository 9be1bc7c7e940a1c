'''
**nsrecords.dns**
-----------------

Looks up A, NS, MX and TXT records for a domain by running `nslookup -debug`
and parsing its output. See `nsrecords.dns._core` for the lookup backend and
`nsrecords.dns._parser` for how the output is read.
'''
from nsrecords._errors import (
    InvalidDomainFormat,
    InvalidRecordType,
    MalformedRecordLine,
    NoAttemptsLeftError,
    NSLookupError,
    ProcessError,
    RecordParseError,
    ResolutionFailure,
    ResolutionTimeout,
    TTLParseFailure,
)
from nsrecords.dns._core import (
    NSLookupBackend,
    lookup_sync,
    normalize_domain,
    resolve_query_type,
)
from nsrecords.dns._models import LookupConfig, LookupResult
from nsrecords.dns._parser import (
    RecordWindow,
    collect_records,
    extract_record,
    sanitize_lines,
    scan_record_windows,
)
from nsrecords.dns._records import (
    ARecord,
    DNSRecord,
    MXRecord,
    NSRecord,
    QueryResult,
    TXTRecord,
    query_result_to_dict,
)
from nsrecords.dns._resolver import HostResolver, NSLookupHostResolver
from nsrecords.dns._ttl import Duration, format_duration, format_ttl, parse_ttl_seconds

__all__ = [
    "InvalidDomainFormat",
    "InvalidRecordType",
    "MalformedRecordLine",
    "NoAttemptsLeftError",
    "NSLookupError",
    "ProcessError",
    "RecordParseError",
    "ResolutionFailure",
    "ResolutionTimeout",
    "TTLParseFailure",
    "NSLookupBackend",
    "lookup_sync",
    "normalize_domain",
    "resolve_query_type",
    "LookupConfig",
    "LookupResult",
    "RecordWindow",
    "collect_records",
    "extract_record",
    "sanitize_lines",
    "scan_record_windows",
    "ARecord",
    "DNSRecord",
    "MXRecord",
    "NSRecord",
    "QueryResult",
    "TXTRecord",
    "query_result_to_dict",
    "HostResolver",
    "NSLookupHostResolver",
    "Duration",
    "format_duration",
    "format_ttl",
    "parse_ttl_seconds",
]
