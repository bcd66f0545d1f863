"""Best-effort machine fingerprint.

The identifier is neither unique nor secret. The lookup depends on the
platform:

- Windows: BIOS serial number reported by ``wmic``
- macOS: SHA-256 of the ``en0`` hardware address
- Linux: SHA-256 of the D-Bus / systemd machine id

Every failure yields :data:`UNKNOWN`; :func:`identify` never raises.
"""

from __future__ import annotations

import hashlib
import platform
import subprocess
from pathlib import Path

import psutil

from .logging_config import get_logger

logger = get_logger(__name__)

UNKNOWN = "unknown"

LINUX_MACHINE_ID_FILES = (
    Path("/var/lib/dbus/machine-id"),
    Path("/etc/machine-id"),
)
MACOS_INTERFACE = "en0"
WMIC_TIMEOUT = 10


def _sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def windows_identifier() -> str:
    """BIOS serial number, or UNKNOWN."""
    try:
        completed = subprocess.run(
            ["wmic", "bios", "get", "serialnumber"],
            capture_output=True,
            text=True,
            timeout=WMIC_TIMEOUT,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("wmic unavailable: %s", e)
        return UNKNOWN

    tokens = completed.stdout.split()
    for index, token in enumerate(tokens[:-1]):
        if token == "SerialNumber":
            return tokens[index + 1].strip()
    return UNKNOWN


def macos_identifier(interface: str = MACOS_INTERFACE) -> str:
    """Hash of the interface's hardware address, or UNKNOWN."""
    try:
        addresses = psutil.net_if_addrs().get(interface, [])
    except (OSError, psutil.Error) as e:
        logger.debug("Cannot list network interfaces: %s", e)
        return UNKNOWN

    for address in addresses:
        if address.family == psutil.AF_LINK and address.address:
            hardware = bytes.fromhex(address.address.replace(":", "").replace("-", ""))
            return _sha256_hex(hardware)
    return UNKNOWN


def linux_identifier(candidates=None) -> str:
    """Hash of the first readable machine-id file, or UNKNOWN."""
    for path in candidates or LINUX_MACHINE_ID_FILES:
        if not path.exists():
            continue
        try:
            content = path.read_bytes()
        except OSError as e:
            logger.debug("Cannot read %s: %s", path, e)
            return UNKNOWN
        return _sha256_hex(content)
    return UNKNOWN


def identify() -> str:
    """Return a machine fingerprint, or UNKNOWN on any failure."""
    system = platform.system().lower()
    try:
        if system.startswith("win"):
            return windows_identifier()
        if system == "darwin":
            return macos_identifier()
        if system == "linux":
            return linux_identifier()
    except Exception as e:  # the identifier must never abort the caller
        logger.debug("Machine identification failed: %s", e)
    return UNKNOWN
