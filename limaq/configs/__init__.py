# coding: UTF-8

"""
:mod:`configs` -- JSON 형태의 설정 파일들을 파싱
=========================================================

parent cgroup의 이름이나 사용할 controller 목록처럼 도구 전체가 공유하는 설정을 JSON파일로부터 읽는다.

:mod:`~limaq.configs.parsers` 의 파서들이 파싱하여 :mod:`~limaq.configs.containers` 의 컨테이너를 생성한다.

기본 설정은 패키지 안의 `limaq.json` 이며, 사용자가 지정한 설정파일이 있으면 그 내용으로 덮어쓴다.

.. module:: limaq.configs
    :synopsis: 설정파일들을 파싱
"""

import json
from pathlib import Path
from typing import Any, Dict, Tuple


def get_full_path(config_file_name: str) -> Path:
    """
    읽고싶은 설정파일의 이름을 주면, 파일 읽기를 위한 :class:`~pathlib.Path` 객체로 반환.

    :param config_file_name: 읽고싶은 설정파일의 이름
    :type config_file_name: str
    :return: 설정파일의 경로 객체
    :rtype: pathlib.Path
    """
    return Path(__file__).resolve().parent / config_file_name


_cached_config_map: Dict[Path, Tuple[Dict[str, Any], float]] = dict()


def validate_and_load(config_path: Path) -> Dict[str, Any]:
    """
    JSON 설정파일의 경로를 통해 파일을 읽어 내용을 반환한다.

    .. note::
        * 함수 이름에는 validate이 있지만 여기서 validate이란, 존재하는 파일인지, 읽을 수 JSON object인지만 체크한다.
          내용에대한 validation은 각 파서 내부에서 진행해야한다.

    :raises FileNotFoundError: 해당 경로에 파일이 없을 경우
    :raises ValueError: JSON object가 아닐 경우

    :param config_path: 읽고싶은 파일의 경로
    :type config_path: pathlib.Path
    :return: JSON 설정파일의 내용
    :rtype: typing.Dict[str, typing.Any]
    """
    if not config_path.is_file():
        raise FileNotFoundError(f'\'{config_path.absolute()}\' does not exist.')

    current_mtime = config_path.stat().st_mtime

    if config_path in _cached_config_map \
            and current_mtime <= _cached_config_map[config_path][1]:
        return _cached_config_map[config_path][0]

    else:
        with config_path.open() as fp:
            content = json.load(fp)

        if not isinstance(content, dict):
            raise ValueError(f'\'{config_path.absolute()}\' should contain a JSON object')

        _cached_config_map[config_path] = (content, current_mtime)
        return content
