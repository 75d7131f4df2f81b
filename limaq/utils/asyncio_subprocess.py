# coding: UTF-8

import asyncio
import logging
from subprocess import CalledProcessError
from typing import Optional


class Executor:
    """
    외부 명령어를 실행하는 객체.

    `logger` 의 level이 `DEBUG` 이하일 경우 실행하는 모든 명령줄을 로그로 남긴다.
    즉 verbose 모드는 전역 변수가 아닌 이 객체에 넘겨주는 logger로 결정된다.
    """
    __slots__ = ('_logger',)

    _logger: logging.Logger

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        if logger is None:
            logger = logging.getLogger(__name__)
        self._logger = logger

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def _trace(self, kind: str, program: str, args) -> None:
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(f'{kind}: \'{program}\' ' + ' '.join(f'\'{arg}\'' for arg in args))

    async def check_run(self, program: str, *args: str) -> None:
        """
        현재 프로세스의 stdin, stdout, stderr를 그대로 물려준 채로 `program` 을 실행하고 종료될 때까지 기다린다.

        :raises subprocess.CalledProcessError: exit code가 0이 아닐 경우
        :raises OSError: 프로그램을 실행할 수 없을 경우

        :param program: 실행할 프로그램
        :type program: str
        :param args: 프로그램에 넘겨줄 argument들
        :type args: typing.Tuple[str, ...]
        """
        self._trace('exec', program, args)

        proc = await asyncio.create_subprocess_exec(program, *args)
        await proc.wait()

        if proc.returncode:
            raise CalledProcessError(proc.returncode, (program, *args))

    async def check_output(self, program: str, *args: str) -> bytes:
        """
        `program` 을 실행하고 stdout을 모두 읽어 반환한다. stderr는 현재 프로세스의 것을 그대로 사용한다.

        :raises subprocess.CalledProcessError: exit code가 0이 아닐 경우
        :raises OSError: 프로그램을 실행할 수 없을 경우

        :param program: 실행할 프로그램
        :type program: str
        :param args: 프로그램에 넘겨줄 argument들
        :type args: typing.Tuple[str, ...]
        :return: 프로그램의 stdout
        :rtype: bytes
        """
        self._trace('dump', program, args)

        proc = await asyncio.create_subprocess_exec(program, *args, stdout=asyncio.subprocess.PIPE)
        out, _ = await proc.communicate()

        if proc.returncode:
            raise CalledProcessError(proc.returncode, (program, *args), output=out)

        return out
