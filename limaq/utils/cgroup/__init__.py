# coding: UTF-8

"""
:mod:`cgroup` -- Linux cgroup v1 API wrapper
============================================================

`libcgroup` 의 명령어들과 cgroup filesystem을 사용하여 group을 생성, 설정, 삭제하고
`cgsnapshot` 의 출력에서 group들을 찾는다.

.. module:: limaq.utils.cgroup
    :synopsis: Linux cgroup v1 API wrapper
"""

from .base import CGroup
from .snapshot import contains_namespace, parse_snapshot, read_pids
