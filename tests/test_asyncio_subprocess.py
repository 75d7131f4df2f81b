# coding: UTF-8

import asyncio
import logging
from subprocess import CalledProcessError

import pytest

from limaq.utils.asyncio_subprocess import Executor


@pytest.fixture
def executor():
    return Executor(logging.getLogger('limaq.tests.exec'))


def test_check_run(executor):
    asyncio.run(executor.check_run('sh', '-c', 'exit 0'))


def test_check_run_failure(executor):
    with pytest.raises(CalledProcessError) as info:
        asyncio.run(executor.check_run('sh', '-c', 'exit 3'))

    assert info.value.returncode == 3
    assert info.value.cmd == ('sh', '-c', 'exit 3')


def test_check_run_inherits_stdout(executor, capfd):
    asyncio.run(executor.check_run('echo', 'passed through'))

    assert capfd.readouterr().out == 'passed through\n'


def test_check_output(executor):
    assert asyncio.run(executor.check_output('echo', 'hello', 'world')) == b'hello world\n'


def test_check_output_failure(executor):
    with pytest.raises(CalledProcessError) as info:
        asyncio.run(executor.check_output('sh', '-c', 'echo partial; exit 2'))

    assert info.value.output == b'partial\n'


def test_missing_program(executor):
    with pytest.raises(FileNotFoundError):
        asyncio.run(executor.check_run('limaq-no-such-program'))


def test_commands_are_traced_in_debug(executor, caplog):
    with caplog.at_level(logging.DEBUG, logger='limaq.tests.exec'):
        asyncio.run(executor.check_run('sh', '-c', 'exit 0'))
        asyncio.run(executor.check_output('echo', 'x'))

    assert "exec: 'sh' '-c' 'exit 0'" in caplog.messages
    assert "dump: 'echo' 'x'" in caplog.messages


def test_commands_are_not_traced_by_default(executor, caplog):
    logging.getLogger('limaq.tests.exec').setLevel(logging.WARNING)

    try:
        with caplog.at_level(logging.DEBUG):
            asyncio.run(executor.check_run('sh', '-c', 'exit 0'))
    finally:
        logging.getLogger('limaq.tests.exec').setLevel(logging.NOTSET)

    assert not [message for message in caplog.messages if message.startswith('exec:')]
