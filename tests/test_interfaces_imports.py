from argvfile.core.interfaces.logging import LoggerLikeProtocol
from argvfile.utils.paths import SystemHostEnvironment


def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import argvfile.core.interfaces as I

    assert hasattr(I, "HostEnvironmentProtocol")
    assert hasattr(I, "LoggerLikeProtocol")


def test_system_host_satisfies_protocol():
    import argvfile.core.interfaces as I

    host = SystemHostEnvironment(program="/opt/tool/bin/tool", environ={}, case_sensitive=False)
    assert isinstance(host, I.HostEnvironmentProtocol)
    assert host.home() is None
    assert host.program_path() == "/opt/tool/bin/tool"
    assert host.case_sensitive() is False


def test_std_logger_is_logger_like():
    import logging

    assert isinstance(logging.getLogger("argvfile"), LoggerLikeProtocol)
