# coding: UTF-8

import logging
import shutil
from pathlib import Path
from subprocess import CalledProcessError
from typing import Dict, List, Optional, Sequence, Tuple

import pytest

from limaq.configs.containers import LimaqConfig
from limaq.registry import CGroupRegistry
from limaq.utils.asyncio_subprocess import Executor

NAMESPACE = 'limaqcgroup'

GROUP_A = f'{NAMESPACE}/1b4e28ba-2fa1-11d2-883f-0016d3cca427'
GROUP_B = f'{NAMESPACE}/6fa459ea-ee8a-3ca4-894e-db77e160355e'
GROUP_C = f'{NAMESPACE}/16fd2706-8baf-433b-82eb-8c7fada847da'


def snapshot_text(groups: Sequence[str], namespace: str = NAMESPACE, with_root: bool = True) -> str:
    lines = ['# Configuration file generated by cgsnapshot',
             'mount {',
             '\tcpu = /sys/fs/cgroup/cpu;',
             '\tmemory = /sys/fs/cgroup/memory;',
             '}', '']

    if with_root:
        lines += [f'group {namespace} {{', '\tcpu {', '\t}', '}', '']

    # cgsnapshot repeats a group once per hierarchy it lives in
    for controller in ('cpu', 'memory'):
        for group in groups:
            lines += [f'group {group} {{', f'\t{controller} {{', '\t}', '}', '']

    return '\n'.join(lines)


class FakeKernel(Executor):
    """
    Records every command instead of running it, and keeps the group tree as directories under `root`
    the way the cgroup filesystem would.
    """

    def __init__(self, root: Path, namespace: str = NAMESPACE) -> None:
        super().__init__(logging.getLogger('limaq.tests'))
        self.root = root
        self.namespace = namespace
        self.calls: List[Tuple[str, ...]] = []
        self.failures: Dict[Tuple[str, ...], int] = {}
        self.available = True
        self.root_exists = True
        (root / 'cpu' / namespace).mkdir(parents=True, exist_ok=True)

    def procs_path(self, name: str) -> Path:
        return self.root / 'cpu' / name / 'cgroup.procs'

    def add_group(self, name: str, pids: Sequence[str] = (), raw: Optional[str] = None) -> None:
        path = self.procs_path(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(raw if raw is not None else ''.join(f'{pid}\n' for pid in pids))

    def groups(self) -> List[str]:
        base = self.root / 'cpu' / self.namespace
        return sorted(f'{self.namespace}/{path.name}' for path in base.iterdir() if path.is_dir())

    def fail(self, *prefix: str, returncode: int = 1) -> None:
        self.failures[prefix] = returncode

    def commands(self, program: str) -> List[Tuple[str, ...]]:
        return [call for call in self.calls if call[0] == program]

    def _check(self, cmd: Tuple[str, ...]) -> None:
        self.calls.append(cmd)
        for prefix, returncode in self.failures.items():
            if cmd[:len(prefix)] == prefix:
                raise CalledProcessError(returncode, cmd)

    async def check_run(self, program: str, *args: str) -> None:
        cmd = (program, *args)
        self._check(cmd)

        if program == 'cgcreate':
            self.add_group(args[-1].split(':', 1)[1])
        elif program == 'cgdelete':
            shutil.rmtree(self.procs_path(args[-1].split(':', 1)[1]).parent)

    async def check_output(self, program: str, *args: str) -> bytes:
        cmd = (program, *args)
        self._check(cmd)

        if not self.available:
            raise FileNotFoundError(program)

        return snapshot_text(self.groups(), self.namespace, self.root_exists).encode()


@pytest.fixture
def config(tmp_path: Path) -> LimaqConfig:
    return LimaqConfig(
            namespace=NAMESPACE,
            controllers=('blkio', 'memory', 'cpu'),
            mount_point=tmp_path,
            procs_controller='cpu',
            cfs_period_us=100000,
            default_io_weight=1000
    )


@pytest.fixture
def legacy_config(config: LimaqConfig) -> LimaqConfig:
    return LimaqConfig(
            namespace=config.namespace,
            controllers=('memory', 'cpu'),
            mount_point=config.mount_point,
            procs_controller=config.procs_controller,
            cfs_period_us=config.cfs_period_us,
            default_io_weight=config.default_io_weight
    )


@pytest.fixture
def kernel(tmp_path: Path) -> FakeKernel:
    return FakeKernel(tmp_path)


@pytest.fixture
def registry(config: LimaqConfig, kernel: FakeKernel) -> CGroupRegistry:
    return CGroupRegistry(config, kernel)
