# coding: UTF-8

"""
:mod:`registry` -- 이 도구가 관리하는 group들의 목록
============================================================

`cgsnapshot` 의 출력과 각 group의 `cgroup.procs` 를 읽어서 매번 새로 만든다.
프로세스 안에 따로 저장해두지 않으며, 커널의 cgroup filesystem이 유일한 상태이다.

.. module:: limaq.registry
    :synopsis: 이 도구가 관리하는 group들의 목록
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from subprocess import CalledProcessError
from typing import Dict, TYPE_CHECKING, Tuple

from .exceptions import CGroupUnavailableError
from .utils.cgroup import CGroup, contains_namespace, parse_snapshot

if TYPE_CHECKING:
    from .configs.containers import LimaqConfig
    from .utils.asyncio_subprocess import Executor


@dataclass(frozen=True)
class ControlGroup:
    """ 특정 시점에 읽은 group 하나와 그 group에 속한 프로세스들 """
    __slots__ = ('name', 'pids')

    name: str
    pids: Tuple[str, ...]

    @property
    def is_active(self) -> bool:
        return len(self.pids) > 0


class CGroupRegistry:
    __slots__ = ('_config', '_executor')

    _config: LimaqConfig
    _executor: Executor

    def __init__(self, config: LimaqConfig, executor: Executor) -> None:
        self._config = config
        self._executor = executor

    @property
    def config(self) -> LimaqConfig:
        return self._config

    @property
    def executor(self) -> Executor:
        return self._executor

    async def snapshot(self) -> str:
        out = await self._executor.check_output('cgsnapshot')
        return out.decode(errors='replace')

    async def is_available(self) -> bool:
        """
        parent group이 존재하는지 확인한다.

        `cgsnapshot` 을 실행하지 못한 경우도 parent group이 없는 것으로 간주한다.
        둘 중 어떤 경우든 사용자가 해야할 일은 같기 때문이다.

        :return: parent group의 존재 유무
        :rtype: bool
        """
        try:
            snapshot = await self.snapshot()
        except (CalledProcessError, OSError) as e:
            self._executor.logger.debug(f'cgsnapshot failed: {e}')
            return False

        return contains_namespace(snapshot, self._config.namespace)

    async def ensure_available(self) -> None:
        """
        :raises limaq.exceptions.CGroupUnavailableError: parent group이 없거나 `cgsnapshot` 을 실행할 수 없을 경우
        """
        if not await self.is_available():
            raise CGroupUnavailableError(f'parent cgroup {self._config.namespace!r} is not available')

    def group(self, name: str) -> CGroup:
        return CGroup(name, self._config, self._executor)

    def new_group(self) -> CGroup:
        """ 새로운 UUID를 이름으로 하는 group의 handle을 만든다. group은 아직 생성되지 않는다. """
        return self.group(f'{self._config.namespace}/{uuid.uuid4()}')

    async def list_groups(self) -> Dict[str, ControlGroup]:
        """
        `namespace` 아래의 모든 group과 각 group에 속한 프로세스를 읽는다.

        하나의 `cgroup.procs` 라도 읽지 못하면 전체가 실패한다.

        :raises subprocess.CalledProcessError: `cgsnapshot` 이 실패한 경우
        :raises OSError: `cgroup.procs` 를 읽지 못한 경우

        :return: group 경로를 key로 하는 목록
        :rtype: typing.Dict[str, limaq.registry.ControlGroup]
        """
        snapshot = await self.snapshot()

        ret: Dict[str, ControlGroup] = dict()

        for name in parse_snapshot(snapshot, self._config.namespace):
            ret[name] = ControlGroup(name, await self.group(name).pids())

        return ret
