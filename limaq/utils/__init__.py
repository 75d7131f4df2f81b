# coding: UTF-8

"""
:mod:`utils` -- 부수적으로 필요한 기능들
=========================================================

다른 모듈들에서 공통적으로 사용하는 기능들을 모아놓은 모듈.

외부 프로그램 실행, 호스트 정보 조회, cgroup 조작 등 OS API의 wrapper가 있다.

.. module:: limaq.utils
    :synopsis: 부수적으로 필요한 기능들
"""
