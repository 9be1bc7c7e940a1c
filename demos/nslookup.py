import asyncio
import dataclasses as dc
import sys

from nsrecords import dns


def lookup_result_str(result: dns.LookupResult) -> str:
    sep = '-------------------------'
    string = f'\n{sep}\nDomain: {result.domain} ({result.query_type})\n'
    for rtype_name, records in result.records.items():
        string += f'\n[{rtype_name}]\n'
        for record in records:
            fields = ', '.join(
                f'{field.name}={getattr(record, field.name) or "N/A"}'
                for field in dc.fields(record)
            )
            string += f'- {fields}\n'

    if not result.records:
        string += 'No records found\n'

    for warning in result.warnings:
        string += f'warning: {warning}\n'

    return string + sep


async def main() -> int:
    if len(sys.argv) < 2:
        domain = input('Enter a domain to look up: ').strip()
    else:
        domain = sys.argv[1].strip()

    record_type = sys.argv[2] if len(sys.argv) > 2 else 'ANY'
    backend = dns.NSLookupBackend(dns.LookupConfig.from_env())

    exit_code = 1
    try:
        result = await backend.lookup(domain, record_type)
        print(lookup_result_str(result))
        exit_code = 0
    except ValueError as exc:
        print(f'Invalid input: {exc}')
    except dns.ResolutionFailure as exc:
        print(f'nslookup failed, check that it is installed and your network connection {exc}')

    return exit_code


if __name__ == '__main__':
    sys.exit(
        asyncio.run(main())
    )
