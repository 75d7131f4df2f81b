# coding: UTF-8

"""
:mod:`containers` -- 설정과 입력을 파싱한 결과
=========================================================

설정파일을 :mod:`~limaq.configs.parsers` 로 파싱 한 결과와, 사용자가 요청한 자원 제한을 저장하는 컨테이너들이 정의되어있다.

.. module:: limaq.configs.containers
    :synopsis: 파싱된 설정과 자원 제한 값
"""

from .limaq import LimaqConfig
from .profile import CGroupAttribute, ResourceProfile
