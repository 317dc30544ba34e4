import platform

from . import __version__

__all__ = ("VERSION", "BUILD_DATE", "GIT_COMMIT", "info", "short")

VERSION = __version__
# overwritten by release builds
BUILD_DATE = "development"
GIT_COMMIT = "development"


def info() -> str:
    return "Password Zen v%s\nBuilt: %s\nCommit: %s\nPython: %s %s/%s" % (
        VERSION,
        BUILD_DATE,
        GIT_COMMIT,
        platform.python_version(),
        platform.system().lower(),
        platform.machine().lower(),
    )


def short() -> str:
    return VERSION
