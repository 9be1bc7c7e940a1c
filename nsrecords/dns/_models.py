import dataclasses as dc
from typing import Any

from nsrecords.dns._records import QueryResult, query_result_to_dict
from nsrecords.process import GatewayConfig


@dc.dataclass(slots=True)
class LookupConfig:
    '''
    Options for a lookup.

    max_workers bounds how many hostname resolutions for NS/MX records
    run at once; resolver_attempts is how many times each of those is tried.
    '''
    gateway: GatewayConfig = dc.field(default_factory=GatewayConfig)
    max_workers: int = 8
    resolver_attempts: int = 2
    resolver_delay: float = 0.25

    @classmethod
    def from_env(cls) -> "LookupConfig":
        return cls(gateway=GatewayConfig.from_env())


@dc.dataclass(frozen=True, slots=True)
class LookupResult:
    domain: str
    query_type: str
    records: QueryResult
    warnings: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            'domain': self.domain,
            'query_type': self.query_type,
            'records': query_result_to_dict(self.records),
            'warnings': list(self.warnings),
        }
