# coding: UTF-8

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class LimaqConfig:
    """
    도구 전체가 공유하는 설정.

    * `namespace` : 이 도구가 만든 모든 group의 parent group 이름. 이 이름 밖의 group은 절대 건드리지 않는다.
    * `controllers` : group을 만들거나 지울 때 쓰는 controller 목록. `blkio` 가 없으면 I/O weight를 설정하지 않는다.
    * `mount_point` : cgroup v1 filesystem이 mount된 경로
    * `procs_controller` : group의 `cgroup.procs` 를 읽을 controller
    """
    __slots__ = ('namespace', 'controllers', 'mount_point', 'procs_controller', 'cfs_period_us', 'default_io_weight')

    namespace: str
    controllers: Tuple[str, ...]
    mount_point: Path
    procs_controller: str
    cfs_period_us: int
    default_io_weight: int

    @property
    def controller_list(self) -> str:
        """
        `cgcreate -g` 등에 넘겨줄 형태의 controller 목록 (e.g. `blkio,memory,cpu`)

        :rtype: str
        """
        return ','.join(self.controllers)

    def has_controller(self, controller: str) -> bool:
        return controller in self.controllers
