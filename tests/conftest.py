"""
Pytest configuration and shared fixtures for the JWT tool tests

CLI tests call jwt_cli.main.main() in-process - no subprocess needed
for most of them.
"""
import pytest

from jwt_cli.auth.jwt_codec import JWTCodec
from jwt_cli.config import Settings
from jwt_cli.main import main
from jwt_cli.services.token_service import TokenService


@pytest.fixture
def settings():
    """Settings independent of the caller's environment"""
    return Settings(
        log_level="WARNING",
        allowed_algorithms="HS256,HS384,HS512",
        secret="",
        indent=4,
        color=False,
    )


@pytest.fixture
def codec():
    return JWTCodec()


@pytest.fixture
def service(codec):
    return TokenService(codec)


@pytest.fixture
def run_cli(settings, capsys):
    """
    Run the tool in-process and capture its output

    Returns a function taking the arguments after the program name and
    returning (exit_code, stdout, stderr).
    """
    def _run(*args: str, settings_override: Settings | None = None):
        code = main(["jwt-cli", *args], settings=settings_override or settings)
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    return _run
