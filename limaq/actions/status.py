# coding: UTF-8

from __future__ import annotations

from typing import Dict, TYPE_CHECKING

if TYPE_CHECKING:
    from ..registry import CGroupRegistry, ControlGroup


async def print_status(registry: CGroupRegistry) -> Dict[str, ControlGroup]:
    """ 모든 group을 한 줄씩 `<경로>: <pid> <pid> ...` 형태로 출력한다. """
    groups = await registry.list_groups()

    for cg in groups.values():
        print(f'{cg.name}: {" ".join(cg.pids)}')

    return groups
