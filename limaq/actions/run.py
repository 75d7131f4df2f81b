# coding: UTF-8

from __future__ import annotations

import contextlib
import logging
from subprocess import CalledProcessError
from typing import AsyncIterator, Sequence, TYPE_CHECKING

from ..exceptions import TargetFailedError

if TYPE_CHECKING:
    from ..configs.containers import ResourceProfile
    from ..registry import CGroupRegistry
    from ..utils.cgroup import CGroup

logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def limited_group(registry: CGroupRegistry, profile: ResourceProfile) -> AsyncIterator[CGroup]:
    """
    :keyword:`async with` 과 사용되며, 그 블럭 안에서 `profile` 로 제한된 새 group이 존재하는 것을 보장한다.

    group 생성에 실패하면 지울 것이 없으므로 그대로 예외를 올린다.
    생성된 이후에는 값 설정이나 블럭 안에서 실패하더라도 블럭을 벗어날 때 무조건 group을 지운다.
    지우는 것이 실패하면 경고만 남기며, 원래의 결과나 예외를 바꾸지 않는다.

    :param registry: group을 만들 registry
    :type registry: limaq.registry.CGroupRegistry
    :param profile: 적용할 자원 제한
    :type profile: limaq.configs.containers.ResourceProfile
    """
    group = registry.new_group()
    await group.create_group()

    try:
        await group.assign(profile.attributes(registry.config))
        yield group

    finally:
        try:
            await group.delete()
        except (CalledProcessError, OSError) as e:
            logger.warning(f'failed to delete {group.identifier}: {e}')


async def run(registry: CGroupRegistry, profile: ResourceProfile, cmd: Sequence[str]) -> None:
    """
    `cmd` 를 `profile` 로 제한된 새 group 안에서 실행한다.

    :raises limaq.exceptions.TargetFailedError: 실행한 프로그램이 0이 아닌 값으로 종료된 경우

    :param registry: group을 만들 registry
    :type registry: limaq.registry.CGroupRegistry
    :param profile: 적용할 자원 제한
    :type profile: limaq.configs.containers.ResourceProfile
    :param cmd: 실행할 프로그램과 argument들
    :type cmd: typing.Sequence[str]
    """
    async with limited_group(registry, profile) as group:
        logger.debug(f'running {cmd} in {group.identifier}')

        try:
            await group.execute(*cmd)
        except CalledProcessError as e:
            raise TargetFailedError(e.returncode, tuple(cmd)) from e
