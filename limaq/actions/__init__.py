# coding: UTF-8

"""
:mod:`actions` -- 커맨드라인에서 선택 가능한 동작들
=========================================================

한번의 실행은 아래 중 정확히 하나의 동작을 수행한다.

* :func:`~limaq.actions.run.run` : 새 group을 만들어 프로그램을 실행하고 group을 지운다
* :func:`~limaq.actions.prune.prune` : 프로세스가 없는 group들을 지운다
* :func:`~limaq.actions.status.print_status` : group들과 각 group의 프로세스를 출력한다

.. module:: limaq.actions
    :synopsis: 커맨드라인에서 선택 가능한 동작들
"""

from .prune import prune
from .run import limited_group, run
from .status import print_status
