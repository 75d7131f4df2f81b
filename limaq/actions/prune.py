# coding: UTF-8

from __future__ import annotations

import logging
from typing import List, TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from ..registry import CGroupRegistry

logger = logging.getLogger(__name__)


async def prune(registry: CGroupRegistry) -> Tuple[str, ...]:
    """
    프로세스가 하나도 없는 group들을 지우고, 지운 group의 경로를 출력한다.

    목록을 읽은 후 다른 프로세스가 group에 들어왔을 수 있으므로, 지우기 직전에 `cgroup.procs` 를 다시 읽어서
    그 사이에 활성화되었거나 이미 사라진 group은 건너뛴다. 다시 읽은 후 지우기 전까지의 짧은 race는 남는다.

    하나라도 지우는 것에 실패하면 나머지는 시도하지 않으며, 이미 지운 group은 되돌리지 않는다.

    :param registry: group 목록을 읽을 registry
    :type registry: limaq.registry.CGroupRegistry
    :return: 지운 group들의 경로
    :rtype: typing.Tuple[str, ...]
    """
    deleted: List[str] = list()

    for name, cg in (await registry.list_groups()).items():
        if cg.is_active:
            continue

        group = registry.group(name)

        try:
            if await group.pids():
                logger.info(f'{name} became active after listing, skipping')
                continue
        except FileNotFoundError:
            logger.info(f'{name} was removed after listing, skipping')
            continue

        await group.delete()

        print(f'Delete {name}')
        deleted.append(name)

    return tuple(deleted)
