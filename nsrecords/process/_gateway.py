'''
**nsrecords.process._gateway**

Runs the `nslookup` binary as a subprocess and hands back its output lines.
Every call is bounded by a timeout, and cancelling the awaiting task kills
the child process before the cancellation propagates.
'''
import asyncio
import dataclasses as dc
import logging
import os
import shlex

from nsrecords._errors import ProcessError, ResolutionTimeout

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class GatewayConfig:
    '''
    Options for running nslookup.
    '''
    binary: str = "nslookup"
    server: str = "8.8.8.8"
    timeout: float = 10.0

    @classmethod
    def from_env(cls) -> "GatewayConfig":
        '''
        Build a config from the defaults, overridden by the
        `NSRECORDS_BINARY`, `NSRECORDS_SERVER` and `NSRECORDS_TIMEOUT`
        environment variables when set.

        Returns
        -------
        GatewayConfig

        Raises
        ------
        ValueError
            If `NSRECORDS_TIMEOUT` is not a number.
        '''
        config = cls()
        if binary := os.environ.get("NSRECORDS_BINARY"):
            config.binary = binary
        if server := os.environ.get("NSRECORDS_SERVER"):
            config.server = server
        if timeout := os.environ.get("NSRECORDS_TIMEOUT"):
            try:
                config.timeout = float(timeout)
            except ValueError as e:
                raise ValueError(f"Invalid NSRECORDS_TIMEOUT {timeout!r}: {e}")
        return config


async def _kill(proc: asyncio.subprocess.Process) -> None:
    if proc.returncode is None:
        proc.kill()
    await proc.wait()


class NSLookupGateway:
    __slots__ = ('_config',)

    def __init__(self, config: GatewayConfig | None = None) -> None:
        self._config = config or GatewayConfig()

    @property
    def config(self) -> GatewayConfig:
        return self._config

    def build_command(
        self,
        target: str,
        record_type: str,
        *,
        debug: bool = True
    ) -> list[str]:
        cmd = [self._config.binary]
        if debug:
            cmd.append("-debug")
        cmd.append(f"-type={record_type.upper()}")
        cmd.append(target)
        if self._config.server:
            cmd.append(self._config.server)
        return cmd

    async def resolve(
        self,
        target: str,
        record_type: str,
        *,
        debug: bool = True,
    ) -> list[str]:
        '''
        Run nslookup for a target and return its stdout split into lines,
        with trailing whitespace removed from each line.

        Parameters
        ----------
        target : str
            The host or domain to query
        record_type : str
            The value passed to `-type=`
        debug : bool, optional
            Run nslookup with `-debug`, by default True

        Returns
        -------
        list[str]

        Raises
        ------
        ProcessError
            If the binary is missing or exits with a non-zero status.
        ResolutionTimeout
            If nslookup does not finish within the configured timeout.
        '''
        cmd = self.build_command(target, record_type, debug=debug)
        cmd_str = shlex.join(cmd)
        timeout = self._config.timeout
        logger.debug(f"Running {cmd_str}")

        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise ProcessError(
                f"Binary '{cmd[0]}' not found. Is nslookup installed?"
            ) from e
        except OSError as e:
            raise ProcessError(f"Could not start '{cmd_str}': {e}") from e

        try:
            stdout_bytes, stderr_bytes = await asyncio.wait_for(
                proc.communicate(), timeout=timeout
            )
        except asyncio.TimeoutError as e:
            await _kill(proc)
            raise ResolutionTimeout(
                f"'{cmd_str}' timed out after {timeout}s", timeout=timeout
            ) from e
        except asyncio.CancelledError:
            await _kill(proc)
            raise

        stdout = stdout_bytes.decode(errors="replace")
        if proc.returncode != 0:
            # nslookup reports NXDOMAIN and friends on stdout
            detail = stderr_bytes.decode(errors="replace").strip()
            if not detail and (tail := stdout.strip().splitlines()):
                detail = tail[-1].strip()
            raise ProcessError(
                f"'{cmd_str}' exited with status {proc.returncode}: {detail}",
                returncode=proc.returncode,
            )

        return [line.rstrip() for line in stdout.splitlines()]
