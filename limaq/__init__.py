# coding: UTF-8

"""
:mod:`limaq` -- cgroup으로 프로세스의 자원 사용량을 제한하는 도구
=====================================================================

실행할 프로그램(과 그 자식들)을 새로 만든 cgroup 안에서 실행하여 CPU, 메모리, block I/O 사용량을 제한하고,
이 도구가 만든 cgroup들의 상태 확인과 정리를 담당한다.

실제 제한은 커널이 하며, 이 패키지는 `libcgroup` 의 `cgcreate`, `cgset`, `cgexec`, `cgdelete`, `cgsnapshot` 을
실행하고 그 출력을 파싱할 뿐이다.

.. module:: limaq
    :synopsis: cgroup으로 프로세스의 자원 사용량을 제한
"""

__version__ = '0.2.0'
