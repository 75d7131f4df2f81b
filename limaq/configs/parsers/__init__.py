# coding: UTF-8

"""
:mod:`parsers` -- 설정파일을 읽어들이는 파서들
=========================================================

JSON 설정파일을 읽어서 파싱하여 :mod:`~limaq.configs.containers` 의 컨테이너를 생성한다.

.. module:: limaq.configs.parsers
    :synopsis: JSON 형태의 설정을 읽는 파서
"""

from .limaq import LimaqParser
