'''
**nsrecords._errors**
---------------------

Exception hierarchy shared by the gateway and the DNS lookup engine.

NSLookupError
├── InvalidDomainFormat      (also a ValueError)
├── InvalidRecordType        (also a ValueError)
├── ResolutionFailure
│   ├── ProcessError
│   ├── ResolutionTimeout
│   └── NoAttemptsLeftError
└── RecordParseError         (also a ValueError)
    ├── MalformedRecordLine
    └── TTLParseFailure
'''


class NSLookupError(Exception):
    ...


class InvalidDomainFormat(NSLookupError, ValueError):
    '''
    Raised when a domain is rejected before any resolution happens.

    Parent: NSLookupError, ValueError
    '''


class InvalidRecordType(NSLookupError, ValueError):
    '''
    Raised when the requested record type is not one of
    ALL, ANY, A, MX, NS or TXT.

    Parent: NSLookupError, ValueError
    '''


class ResolutionFailure(NSLookupError):
    '''
    The gateway could not run nslookup, timed out, or nslookup
    exited abnormally.
    '''


class ProcessError(ResolutionFailure):
    def __init__(self, message: str, *, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode


class ResolutionTimeout(ResolutionFailure):
    def __init__(self, message: str, *, timeout: float) -> None:
        super().__init__(message)
        self.timeout = timeout


class NoAttemptsLeftError(ResolutionFailure):
    ...


class RecordParseError(NSLookupError, ValueError):
    '''
    A single record could not be extracted. Recovered per record,
    never fatal to a lookup.
    '''


class MalformedRecordLine(RecordParseError):
    ...


class TTLParseFailure(RecordParseError):
    ...
