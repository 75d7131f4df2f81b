# coding: UTF-8

from __future__ import annotations

from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .. import get_full_path, validate_and_load
from ..containers import LimaqConfig
from ..containers.profile import MAX_IO_WEIGHT, MIN_IO_WEIGHT

_REQUIRED_CONTROLLERS: Tuple[str, ...] = ('cpu', 'memory')
_OPTIONAL_CONTROLLERS: Tuple[str, ...] = ('blkio',)


class LimaqParser:
    """
    :mod:`limaq.configs` 폴더 안에있는 `limaq.json` 을 기본으로 읽고,
    사용자가 설정파일을 지정했다면 그 파일에 있는 key들로 덮어쓴 후 :class:`~limaq.configs.containers.LimaqConfig` 로 파싱한다.

    사용자 설정파일은 기본 설정의 일부 key만 가지고 있어도 된다.
    한번 파싱한 결과는 객체 안에 저장해두고 :meth:`parse` 를 다시 호출해도 재사용한다.

    :raises FileNotFoundError: 사용자 설정파일이 없을 경우
    :raises ValueError: 설정 내용이 올바르지 않을 경우
    """
    __slots__ = ('_user_config_path', '_cached')

    _user_config_path: Optional[Path]
    _cached: Optional[LimaqConfig]

    def __init__(self, user_config_path: Optional[Path] = None) -> None:
        self._user_config_path = user_config_path
        self._cached = None

    def parse(self) -> LimaqConfig:
        if self._cached is None:
            self._cached = self._parse()

        return self._cached

    def is_cached(self) -> bool:
        return self._cached is not None

    def _parse(self) -> LimaqConfig:
        merged: Dict[str, Any] = dict(validate_and_load(get_full_path('limaq.json')))

        if self._user_config_path is not None:
            user_config = validate_and_load(self._user_config_path)

            known = set(field.name for field in fields(LimaqConfig))
            unknown = set(user_config.keys()) - known
            if unknown:
                raise ValueError(f'Unknown config keys in {self._user_config_path}: {", ".join(sorted(unknown))}')

            merged.update(user_config)

        default_io_weight = self._parse_positive_int('default_io_weight', merged['default_io_weight'])
        if not MIN_IO_WEIGHT <= default_io_weight <= MAX_IO_WEIGHT:
            raise ValueError(f'default_io_weight should be in the range of from {MIN_IO_WEIGHT} to {MAX_IO_WEIGHT}, '
                             f'but {default_io_weight} is given')

        return LimaqConfig(
                namespace=self._parse_namespace(merged['namespace']),
                controllers=self._parse_controllers(merged['controllers']),
                mount_point=self._parse_str('mount_point', merged['mount_point'], Path),
                procs_controller=self._parse_str('procs_controller', merged['procs_controller']),
                cfs_period_us=self._parse_positive_int('cfs_period_us', merged['cfs_period_us']),
                default_io_weight=default_io_weight
        )

    @classmethod
    def _parse_str(cls, key: str, value: Any, convert=str) -> Any:
        if not isinstance(value, str) or not value:
            raise ValueError(f'{key} should be a non-empty string, but {value!r} is given')
        return convert(value)

    @classmethod
    def _parse_namespace(cls, namespace: Any) -> str:
        if not isinstance(namespace, str) or not namespace or namespace.startswith('/') or namespace.endswith('/'):
            raise ValueError(f'namespace should be a relative cgroup path, but {namespace!r} is given')
        return namespace

    @classmethod
    def _parse_controllers(cls, controllers: Any) -> Tuple[str, ...]:
        if isinstance(controllers, str):
            controllers = controllers.split(',')

        if not isinstance(controllers, list) or not all(isinstance(controller, str) for controller in controllers):
            raise ValueError(f'controllers should be a list of names, but {controllers!r} is given')

        controllers = tuple(controller.strip() for controller in controllers)

        for controller in controllers:
            if controller not in _REQUIRED_CONTROLLERS + _OPTIONAL_CONTROLLERS:
                raise ValueError(f'Unsupported controller: {controller!r}')

        for controller in _REQUIRED_CONTROLLERS:
            if controller not in controllers:
                raise ValueError(f'controllers should contain {controller!r}')

        if len(set(controllers)) != len(controllers):
            raise ValueError(f'controllers should not have duplicates: {controllers}')

        return controllers

    @classmethod
    def _parse_positive_int(cls, key: str, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValueError(f'{key} should be a positive integer, but {value!r} is given')
        return value
