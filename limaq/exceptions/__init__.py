# coding: UTF-8


class LimaqError(Exception):
    pass


class CGroupUnavailableError(LimaqError):
    pass


class InvalidProfileError(LimaqError, ValueError):
    pass


class TargetFailedError(LimaqError):
    """ cgroup 안에서 실행한 프로그램이 0이 아닌 exit code로 종료되었을 때 발생 """

    def __init__(self, returncode: int, cmd) -> None:
        super().__init__(f'{cmd!r} returned non-zero exit status {returncode}.')
        self.returncode = returncode
        self.cmd = cmd
