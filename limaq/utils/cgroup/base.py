# coding: UTF-8

from __future__ import annotations

from pathlib import Path
from typing import Iterable, TYPE_CHECKING, Tuple

from .snapshot import read_pids

if TYPE_CHECKING:
    from ..asyncio_subprocess import Executor
    from ...configs.containers import CGroupAttribute, LimaqConfig


class CGroup:
    """
    `<namespace>/<이름>` 경로의 group 하나를 handle하는 클래스.

    .. note::
        * 내부적으로는 `cgcreate`, `cgset`, `cgexec`, `cgdelete` 와 같은 shell command 들을 사용한다.
        * 객체를 생성한다고 group이 바로 생성되지는 않으며, :meth:`create_group` 를 호출해야 생성된다.
    """
    __slots__ = ('_name', '_config', '_executor')

    _name: str
    _config: LimaqConfig
    _executor: Executor

    def __init__(self, name: str, config: LimaqConfig, executor: Executor) -> None:
        """
        :param name: group의 전체 경로 (e.g. `limaqcgroup/<uuid>`)
        :type name: str
        :param config: controller 목록과 mount 위치를 담고있는 설정
        :type config: limaq.configs.containers.LimaqConfig
        :param executor: 명령어를 실행할 객체
        :type executor: limaq.utils.asyncio_subprocess.Executor
        """
        self._name = name
        self._config = config
        self._executor = executor

    @property
    def name(self) -> str:
        """
        controller가 붙지않은 group의 경로. `cgset` 에서 사용한다.

        :rtype: str
        """
        return self._name

    @property
    def identifier(self) -> str:
        """
        `cgcreate`, `cgexec`, `cgdelete` 에서 사용하는 group의 ID (`controllers`:`name` 형식)

        :rtype: str
        """
        return f'{self._config.controller_list}:{self._name}'

    @property
    def procs_path(self) -> Path:
        return self._config.mount_point / self._config.procs_controller / self._name / 'cgroup.procs'

    async def create_group(self) -> None:
        await self._executor.check_run('cgcreate', '-g', self.identifier)

    async def assign(self, attributes: Iterable[CGroupAttribute]) -> None:
        """
        `attributes` 를 순서대로 하나씩 `cgset` 으로 설정한다.
        도중에 실패하면 그 전까지 설정한 값은 그대로 남는다.

        :param attributes: 설정할 값들
        :type attributes: typing.Iterable[limaq.configs.containers.CGroupAttribute]
        """
        for attribute in attributes:
            await self._executor.check_run('cgset', '-r', str(attribute), self._name)

    async def execute(self, *cmd: str) -> None:
        """
        `cmd` 를 이 group 안에서 실행하고 종료될 때까지 기다린다.

        :param cmd: 실행할 프로그램과 argument들
        :type cmd: typing.Tuple[str, ...]
        """
        await self._executor.check_run('cgexec', '-g', self.identifier, *cmd)

    async def pids(self) -> Tuple[str, ...]:
        """ 현재 이 group에 속한 프로세스들의 PID를 커널로부터 새로 읽는다. """
        return await read_pids(self.procs_path)

    async def delete(self) -> None:
        """ 해당 그룹을 하위 그룹까지 삭제한다. """
        await self._executor.check_run('cgdelete', '-r', '-g', self.identifier)
