# coding: UTF-8

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

from ...exceptions import InvalidProfileError

if TYPE_CHECKING:
    from .limaq import LimaqConfig

MIN_IO_WEIGHT = 100
MAX_IO_WEIGHT = 1000


@dataclass(frozen=True)
class CGroupAttribute:
    """ `cgset -r` 로 설정할 값 하나. `value` 는 이미 최종 문자열 형태이다. """
    __slots__ = ('name', 'value')

    name: str
    value: str

    def __str__(self) -> str:
        return f'{self.name}={self.value}'


@dataclass(frozen=True)
class ResourceProfile:
    """
    한번의 실행에서 요청된 자원 제한.

    생성할 때 값을 검증하므로, 이 객체가 존재한다면 group을 만들어도 되는 값이다.

    :raises limaq.exceptions.InvalidProfileError: 값이 범위를 벗어날 경우
    """
    __slots__ = ('cpu', 'memory_mb', 'io_weight')

    cpu: float
    memory_mb: float
    io_weight: int

    def __post_init__(self) -> None:
        if not (self.cpu > 0 and math.isfinite(self.cpu)):
            raise InvalidProfileError(f'CPU cores should be a positive finite number, but {self.cpu} is given')
        if not (self.memory_mb > 0 and math.isfinite(self.memory_mb)):
            raise InvalidProfileError(f'Memory size should be a positive finite number, but {self.memory_mb} is given')
        if not MIN_IO_WEIGHT <= self.io_weight <= MAX_IO_WEIGHT:
            raise InvalidProfileError(
                    f'I/O weight should be in the range of from {MIN_IO_WEIGHT} to {MAX_IO_WEIGHT}')

    def cpu_quota(self, period: int) -> int:
        return int(period * self.cpu)

    @property
    def memory_limit_in_bytes(self) -> int:
        return int(self.memory_mb * 1000000)

    def attributes(self, config: LimaqConfig) -> Tuple[CGroupAttribute, ...]:
        """
        이 제한을 group에 적용하기 위해 설정해야하는 값들을 적용 순서대로 반환한다.

        `cpu.cfs_period_us` 는 항상 `cpu.cfs_quota_us` 보다 먼저 설정된다.
        `blkio.weight` 는 `config` 의 controller에 `blkio` 가 있을때만 포함된다.

        :param config: 사용할 controller와 CFS period를 담고있는 설정
        :type config: limaq.configs.containers.LimaqConfig
        :return: 설정할 값들
        :rtype: typing.Tuple[limaq.configs.containers.CGroupAttribute, ...]
        """
        period = config.cfs_period_us

        ret = [
            CGroupAttribute('cpu.cfs_period_us', str(period)),
            CGroupAttribute('cpu.cfs_quota_us', str(self.cpu_quota(period))),
            CGroupAttribute('memory.limit_in_bytes', str(self.memory_limit_in_bytes)),
        ]

        if config.has_controller('blkio'):
            ret.append(CGroupAttribute('blkio.weight', str(self.io_weight)))

        return tuple(ret)
