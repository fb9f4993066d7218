"""Runtime environment and platform detection."""

from __future__ import annotations

import os
import platform
import struct
import sys
import tempfile
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

import platformdirs
import psutil

T = TypeVar("T")

__all__ = [
    "EnvironmentInfo",
    "get_environment_info",
    "is_windows",
    "is_macos",
    "is_linux",
    "is_unix",
    "is_debug",
    "is_release",
    "is_64bit",
    "is_32bit",
    "get_current_dir",
    "get_env_var",
    "get_env_var_or_default",
    "get_all_env_vars",
    "has_env_var",
    "get_cpu_count",
    "get_physical_cpu_count",
    "is_ci",
    "get_home_dir",
    "get_config_dir",
    "get_cache_dir",
    "get_data_dir",
    "get_temp_dir",
    "run_on_os",
    "run_on_windows",
    "run_on_unix",
]

_CI_VARIABLES = (
    "CI",
    "CONTINUOUS_INTEGRATION",
    "GITHUB_ACTIONS",
    "GITLAB_CI",
    "TRAVIS",
    "CIRCLECI",
)

_ARCH_ALIASES = {
    "amd64": "x86_64",
    "x86_64": "x86_64",
    "x64": "x86_64",
    "arm64": "aarch64",
    "aarch64": "aarch64",
    "i386": "x86",
    "i686": "x86",
    "x86": "x86",
}


@dataclass(frozen=True)
class EnvironmentInfo:
    """A description of the platform the interpreter runs on."""

    os: str
    arch: str
    family: str
    exe_suffix: str
    dll_suffix: str
    dll_prefix: str
    is_debug: bool
    is_release: bool


def _os_name() -> str:
    if sys.platform.startswith("win"):
        return "windows"
    if sys.platform == "darwin":
        return "macos"
    if sys.platform.startswith("linux"):
        return "linux"
    return platform.system().lower() or sys.platform


def _arch() -> str:
    machine = platform.machine()
    return _ARCH_ALIASES.get(machine.lower(), machine.lower())


def _family() -> str:
    return "windows" if os.name == "nt" else "unix"


def get_environment_info() -> EnvironmentInfo:
    """Collect the platform description in one object."""
    name = _os_name()
    if name == "windows":
        exe_suffix, dll_suffix, dll_prefix = ".exe", ".dll", ""
    elif name == "macos":
        exe_suffix, dll_suffix, dll_prefix = "", ".dylib", "lib"
    else:
        exe_suffix, dll_suffix, dll_prefix = "", ".so", "lib"
    return EnvironmentInfo(
        os=name,
        arch=_arch(),
        family=_family(),
        exe_suffix=exe_suffix,
        dll_suffix=dll_suffix,
        dll_prefix=dll_prefix,
        is_debug=is_debug(),
        is_release=is_release(),
    )


def is_windows() -> bool:
    """Return True on Windows."""
    return _os_name() == "windows"


def is_macos() -> bool:
    """Return True on macOS."""
    return _os_name() == "macos"


def is_linux() -> bool:
    """Return True on Linux."""
    return _os_name() == "linux"


def is_unix() -> bool:
    """Return True on Unix-like systems."""
    return _family() == "unix"


def is_debug() -> bool:
    """Return True unless the interpreter runs with optimisations (-O)."""
    return __debug__


def is_release() -> bool:
    """Return True when the interpreter runs with optimisations (-O)."""
    return not __debug__


def is_64bit() -> bool:
    """Return True when pointers are 64 bits wide."""
    return struct.calcsize("P") == 8


def is_32bit() -> bool:
    """Return True when pointers are 32 bits wide."""
    return struct.calcsize("P") == 4


def get_current_dir() -> str:
    """Return the current working directory; raises OSError if it is gone."""
    return os.getcwd()


def get_env_var(key: str) -> str | None:
    """Return an environment variable, or None when it is not set."""
    return os.environ.get(key)


def get_env_var_or_default(key: str, default: str) -> str:
    """Return an environment variable, or default when it is not set."""
    return os.environ.get(key, default)


def get_all_env_vars() -> dict[str, str]:
    """Return a copy of all environment variables."""
    return dict(os.environ)


def has_env_var(key: str) -> bool:
    """Return True if the environment variable is set."""
    return key in os.environ


def get_cpu_count() -> int:
    """Return the number of logical CPUs."""
    return os.cpu_count() or 1


def get_physical_cpu_count() -> int:
    """Return the number of physical CPU cores."""
    return psutil.cpu_count(logical=False) or get_cpu_count()


def is_ci() -> bool:
    """Return True when running under a continuous-integration service."""
    return any(has_env_var(name) for name in _CI_VARIABLES)


def get_home_dir() -> str | None:
    """Return the user's home directory, or None if it cannot be found."""
    try:
        return str(Path.home())
    except (RuntimeError, KeyError):
        return None


def get_config_dir() -> str | None:
    """Return the user's configuration directory."""
    return platformdirs.user_config_dir() or None


def get_cache_dir() -> str | None:
    """Return the user's cache directory."""
    return platformdirs.user_cache_dir() or None


def get_data_dir() -> str | None:
    """Return the user's data directory."""
    return platformdirs.user_data_dir() or None


def get_temp_dir() -> str:
    """Return the temporary directory."""
    return tempfile.gettempdir()


def run_on_os(os_name: str, func: Callable[[], T]) -> T | None:
    """Call func and return its result only when running on os_name."""
    return func() if _os_name() == os_name else None


def run_on_windows(func: Callable[[], T]) -> T | None:
    """Call func and return its result only on Windows."""
    return func() if is_windows() else None


def run_on_unix(func: Callable[[], T]) -> T | None:
    """Call func and return its result only on Unix-like systems."""
    return func() if is_unix() else None