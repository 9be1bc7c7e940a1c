'''
Parsing for `nslookup -debug` output.

The debug output lists each answer as a small block anchored on the queried
name, e.g.

    ->  example.com
        internet address = 93.184.216.34
        ttl = 3600
    ->  example.com
        text =

        "v=spf1 -all"
        ttl = 86400

`sanitize_lines` drops the noise, `scan_record_windows` finds the blocks, and
`extract_record` turns each block into a typed record.
'''
from __future__ import annotations

import contextlib
import enum
import logging
from collections.abc import Iterator, Sequence
from typing import NamedTuple

import dns.rdatatype as rtype

from nsrecords._errors import MalformedRecordLine, RecordParseError
from nsrecords.dns._records import (
    ARecord,
    DNSRecord,
    MXRecord,
    NSRecord,
    TXTRecord,
)
from nsrecords.dns._ttl import format_ttl

logger = logging.getLogger(__name__)

SEPARATOR = "------------"
PLACEHOLDER = "unknown"
_ANSWER_MARKER = "->"


def sanitize_lines(lines: Sequence[str]) -> list[str]:
    '''
    Drop separator lines, empty lines and lines holding the
    unresolved placeholder, keeping the order of everything else.

    Parameters
    ----------
    lines : Sequence[str]

    Returns
    -------
    list[str]
    '''
    return [
        line for line in lines
        if line and line != SEPARATOR and PLACEHOLDER not in line
    ]


class RecordWindow(NamedTuple):
    record_type: rtype.RdataType
    record_line: str
    ttl_line: str
    index: int


class _ScanState(enum.Enum):
    SEEK_ANCHOR = enum.auto()
    CONFIRM_MARKER = enum.auto()
    EMIT_RECORD = enum.auto()


def _normalize_anchor_line(line: str) -> str:
    line = line.strip().lower()
    if line.startswith(_ANSWER_MARKER):
        line = line[len(_ANSWER_MARKER):].lstrip()
    return line


def _classify(line: str) -> rtype.RdataType | None:
    if "nameserver" in line:
        return rtype.NS
    if "mx" in line:
        return rtype.MX
    if "internet address" in line:
        return rtype.A
    return None


def _confirm_marker(lines: Sequence[str], i: int) -> RecordWindow | None:
    '''
    Decide whether the anchored window at `i` holds a record.

    A/NS/MX carry their value on line `i` and the ttl on `i + 1`. TXT
    carries a bare `text =` on line `i`, the value on `i + 1` and the
    ttl on `i + 2`. An anchored window whose ttl sits on `i + 1` but
    whose line `i` is none of A/NS/MX (AAAA, CNAME, ...) is skipped.
    '''
    cur = lines[i].lower()
    nxt = lines[i + 1].lower()

    if "ttl" in nxt:
        record_type = _classify(cur)
        if record_type is None:
            return None
        return RecordWindow(record_type, lines[i], lines[i + 1], i)

    if i + 2 < len(lines) and "ttl" in lines[i + 2].lower():
        return RecordWindow(rtype.TXT, lines[i + 1], lines[i + 2], i)

    return None


def scan_record_windows(lines: Sequence[str], anchor: str) -> Iterator[RecordWindow]:
    '''
    Walk sanitized lines and yield every record window anchored on
    `anchor`, in order of appearance.

    Parameters
    ----------
    lines : Sequence[str]
        Sanitized nslookup output
    anchor : str
        The queried domain

    Yields
    ------
    RecordWindow
    '''
    anchor = anchor.lower()
    state = _ScanState.SEEK_ANCHOR
    window: RecordWindow | None = None
    i = 1

    while i < len(lines) - 1:
        match state:
            case _ScanState.SEEK_ANCHOR:
                if _normalize_anchor_line(lines[i - 1]) == anchor:
                    state = _ScanState.CONFIRM_MARKER
                else:
                    i += 1
            case _ScanState.CONFIRM_MARKER:
                window = _confirm_marker(lines, i)
                if window is None:
                    state = _ScanState.SEEK_ANCHOR
                    i += 1
                else:
                    state = _ScanState.EMIT_RECORD
            case _ScanState.EMIT_RECORD:
                yield window  # type: ignore[misc]
                window = None
                state = _ScanState.SEEK_ANCHOR
                i += 1


def _split_pair(segment: str, line: str) -> str:
    tokens = segment.split("=")
    if len(tokens) != 2 or not tokens[1]:
        raise MalformedRecordLine(
            f"Expected 'key = value' in record line {line.strip()!r}"
        )
    return tokens[1]


def extract_record(
    record_type: rtype.RdataType,
    record_line: str,
    ttl_line: str,
) -> DNSRecord:
    '''
    Build a record from its source lines. NS and MX records come back
    with an empty `ip`; the lookup backend fills it in afterwards.

    Parameters
    ----------
    record_type : rtype.RdataType
    record_line : str
    ttl_line : str

    Returns
    -------
    DNSRecord

    Raises
    ------
    MalformedRecordLine
        If the record line does not have the expected shape.
    TTLParseFailure
        If the ttl line has no value.
    '''
    compact = "".join(record_line.split())

    match record_type:
        case rtype.A:
            ip = _split_pair(compact, record_line)
            return ARecord(ip=ip, ttl=format_ttl(ttl_line))
        case rtype.NS:
            host = _split_pair(compact, record_line)
            return NSRecord(host=host, ip="", ttl=format_ttl(ttl_line))
        case rtype.MX:
            segments = compact.split(",")
            if len(segments) != 2:
                raise MalformedRecordLine(
                    f"Expected 'preference, exchanger' in MX line {record_line.strip()!r}"
                )
            priority = _split_pair(segments[0], record_line)
            host = _split_pair(segments[1], record_line)
            return MXRecord(
                host=host,
                priority=priority,
                ip="",
                ttl=format_ttl(ttl_line),
            )
        case rtype.TXT:
            return TXTRecord(text=record_line.strip(), ttl=format_ttl(ttl_line))
        case _:
            raise MalformedRecordLine(
                f"Unsupported record type {rtype.to_text(record_type)}"
            )


@contextlib.contextmanager
def _collect_warnings(warnings: list[str], window: RecordWindow):
    '''
    Context manager that turns a failed record extraction into a warning.

    Parameters
    ----------
    warnings : list[str]
    window : RecordWindow
    '''
    try:
        yield
    except RecordParseError as e:
        message = (
            f"Skipped {rtype.to_text(window.record_type)} record at line "
            f"{window.index}: {e}"
        )
        logger.warning(message)
        warnings.append(message)


def collect_records(
    lines: Sequence[str],
    anchor: str,
    warnings: list[str],
) -> dict[str, list[DNSRecord]]:
    '''
    Scan sanitized lines and extract every record found, grouped by
    record type name. Malformed records are dropped and reported
    through `warnings`.

    Parameters
    ----------
    lines : Sequence[str]
    anchor : str
    warnings : list[str]

    Returns
    -------
    dict[str, list[DNSRecord]]
    '''
    bag: dict[str, list[DNSRecord]] = {}
    for window in scan_record_windows(lines, anchor):
        with _collect_warnings(warnings, window):
            record = extract_record(window.record_type, window.record_line, window.ttl_line)
            bag.setdefault(rtype.to_text(window.record_type), []).append(record)
    return bag
