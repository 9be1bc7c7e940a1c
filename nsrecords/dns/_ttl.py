'''
TTL helpers: pull the seconds value out of an nslookup `ttl = N` line and
render it as a human readable duration, e.g. 3661 -> "1 hour 1 minute 1 second".
'''
import re
from typing import NamedTuple

from nsrecords._errors import TTLParseFailure

_TTL_PATTERN = re.compile(r"\w+\s*=\s*(\d+)")

_SECONDS_PER_DAY = 86_400
_SECONDS_PER_HOUR = 3_600
_SECONDS_PER_MINUTE = 60


class Duration(NamedTuple):
    days: int
    hours: int
    minutes: int
    seconds: int

    @classmethod
    def from_seconds(cls, total: int) -> "Duration":
        if total < 0:
            raise ValueError(f"Duration cannot be negative, got {total}")
        return cls(
            days=total // _SECONDS_PER_DAY,
            hours=(total // _SECONDS_PER_HOUR) % 24,
            minutes=(total // _SECONDS_PER_MINUTE) % 60,
            seconds=total % 60,
        )

    def __str__(self) -> str:
        parts = []
        for count, unit in zip(self, ('day', 'hour', 'minute', 'second')):
            if count:
                parts.append(f"{count} {unit}" if count == 1 else f"{count} {unit}s")
        return ' '.join(parts)


def parse_ttl_seconds(line: str) -> int:
    '''
    Extract the seconds from the first `word = digits` match in a line.

    Parameters
    ----------
    line : str

    Returns
    -------
    int

    Raises
    ------
    TTLParseFailure
        If the line holds no `word = digits` pair.
    '''
    match = _TTL_PATTERN.search(line)
    if match is None:
        raise TTLParseFailure(f"No TTL value found in line {line.strip()!r}")
    return int(match.group(1))


def format_duration(seconds: int) -> str:
    return str(Duration.from_seconds(seconds))


def format_ttl(line: str) -> str:
    return format_duration(parse_ttl_seconds(line))
