# coding: UTF-8

"""
:mod:`host` -- 호스트의 자원 정보
============================================================

`--cpu` 와 `--mem` 의 기본값으로 쓰이는 호스트의 전체 코어 수와 물리 메모리 크기를 `psutil` 로 읽는다.

.. module:: limaq.utils.host
    :synopsis: 호스트의 자원 정보
"""

import psutil


def total_cores() -> int:
    cores = psutil.cpu_count(logical=False)

    # some virtualized hosts do not expose the physical topology
    if cores is None:
        cores = psutil.cpu_count(logical=True)

    return cores


def total_memory_mb() -> float:
    return psutil.virtual_memory().total / 1000000
