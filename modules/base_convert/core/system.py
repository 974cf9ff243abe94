from __future__ import annotations

import logging
import platform
import shutil
import subprocess
from typing import Any, Dict, List

from modules.base_convert.core.overflow import native_word_bits
from modules.base_convert.core.radix import DEFAULT_BC_TIMEOUT, configured_bc_path, default_strategy
from universe.settings import env_float

logger = logging.getLogger(__name__)

INSTALL_HINTS: Dict[str, List[str]] = {
    "linux": [
        "Ubuntu/Debian:  sudo apt-get install bc",
        "CentOS/RHEL:    sudo yum install bc",
        "Fedora:         sudo dnf install bc",
        "Arch Linux:     sudo pacman -S bc",
    ],
    "macos": [
        "Homebrew:  brew install bc",
        "MacPorts:  sudo port install bc",
        "Homebrew itself is available from https://brew.sh/",
    ],
    "windows": [
        "Install WSL (Windows Subsystem for Linux)",
        "Or use Git Bash with the bc package",
        "Or install Cygwin with the bc package",
    ],
}
DEFAULT_HINT = ["Install bc for your operating system."]


def detect_os() -> str:
    system = platform.system()
    if system.startswith("Linux"):
        return "linux"
    if system.startswith("Darwin"):
        return "macos"
    if system.startswith(("Windows", "CYGWIN", "MINGW", "MSYS")):
        return "windows"
    return "unknown"


def bc_install_hint(os_name: str) -> List[str]:
    return list(INSTALL_HINTS.get(os_name, DEFAULT_HINT))


def bc_version(bc_path: str) -> str | None:
    try:
        result = subprocess.run(
            [bc_path, "--version"],
            capture_output=True,
            text=True,
            timeout=env_float("SPARKY_BC_TIMEOUT_SECONDS", DEFAULT_BC_TIMEOUT),
        )
    except (OSError, subprocess.TimeoutExpired) as exc:
        logger.debug("Could not read %s version: %s", bc_path, exc)
        return None
    if result.returncode != 0:
        return None
    lines = result.stdout.strip().splitlines()
    return lines[0] if lines else None


def system_info() -> Dict[str, Any]:
    os_name = detect_os()
    bc_path = shutil.which(configured_bc_path())
    return {
        "os": os_name,
        "system": platform.system(),
        "release": platform.release(),
        "architecture": platform.machine(),
        "native_word_bits": native_word_bits(),
        "bc": {
            "installed": bc_path is not None,
            "path": bc_path,
            "version": bc_version(bc_path) if bc_path else None,
            "install_hint": [] if bc_path else bc_install_hint(os_name),
        },
        "homebrew": shutil.which("brew") is not None,
        "strategy": default_strategy().name,
    }
