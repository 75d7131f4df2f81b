# coding: UTF-8

import re
from pathlib import Path
from typing import Pattern, Tuple

import aiofiles
from ordered_set import OrderedSet

_UUID_PATTERN = '[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}'


def _group_pattern(namespace: str) -> Pattern:
    return re.compile(rf'group {re.escape(namespace)}/({_UUID_PATTERN}) {{')


def parse_snapshot(snapshot: str, namespace: str) -> OrderedSet:
    """
    `cgsnapshot` 의 출력에서 `namespace` 바로 아래에 있는, UUID 형태의 이름을 가진 group들의 경로를 찾는다.

    같은 group이 여러 controller에 대해 반복되어 나와도 한번만 포함되며, 처음 나온 순서를 유지한다.
    UUID 형태가 아닌 이름을 가진 group은 `namespace` 안에 있더라도 무시한다.

    :param snapshot: `cgsnapshot` 의 출력
    :type snapshot: str
    :param namespace: parent group의 이름
    :type namespace: str
    :return: `<namespace>/<uuid>` 형태의 group 경로들
    :rtype: ordered_set.OrderedSet[str]
    """
    return OrderedSet(f'{namespace}/{group_id}' for group_id in _group_pattern(namespace).findall(snapshot))


def contains_namespace(snapshot: str, namespace: str) -> bool:
    return re.search(rf'group {re.escape(namespace)} {{', snapshot) is not None


async def read_pids(procs_path: Path) -> Tuple[str, ...]:
    """
    `cgroup.procs` 파일을 읽어 빈 줄을 제외한 PID들을 반환한다.

    :raises OSError: 파일을 읽을 수 없을 경우

    :param procs_path: 읽을 `cgroup.procs` 파일의 경로
    :type procs_path: pathlib.Path
    :return: 앞뒤 공백이 제거된 PID들
    :rtype: typing.Tuple[str, ...]
    """
    async with aiofiles.open(procs_path) as afp:
        content: str = await afp.read()

    return tuple(filter(None, (line.strip() for line in content.split('\n'))))
