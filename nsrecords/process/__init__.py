'''
**nsrecords.process**
---------------------

The subprocess boundary for nsrecords: `NSLookupGateway` runs the `nslookup`
binary with a bounded timeout, and `retry_policy` retries gateway calls that
failed for transient reasons.
'''
from nsrecords.process._gateway import GatewayConfig, NSLookupGateway
from nsrecords.process._retry import retry_policy

__all__ = [
    'GatewayConfig',
    'NSLookupGateway',
    'retry_policy',
]
