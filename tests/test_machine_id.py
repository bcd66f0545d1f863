"""Tests for the machine identifier lookups."""

import hashlib
import subprocess
from types import SimpleNamespace

import psutil
import pytest

from proxygen import machine_id
from proxygen.machine_id import (
    UNKNOWN,
    identify,
    linux_identifier,
    macos_identifier,
    windows_identifier,
)


def _completed(stdout):
    return subprocess.CompletedProcess(args=[], returncode=0, stdout=stdout, stderr="")


class TestWindows:
    def test_serial_number(self, monkeypatch):
        monkeypatch.setattr(
            machine_id.subprocess,
            "run",
            lambda *args, **kwargs: _completed("SerialNumber  \r\nABC-123  \r\n\r\n"),
        )
        assert windows_identifier() == "ABC-123"

    def test_missing_serial(self, monkeypatch):
        monkeypatch.setattr(
            machine_id.subprocess, "run", lambda *args, **kwargs: _completed("SerialNumber\n")
        )
        assert windows_identifier() == UNKNOWN

    def test_wmic_unavailable(self, monkeypatch):
        def missing(*args, **kwargs):
            raise FileNotFoundError("wmic")

        monkeypatch.setattr(machine_id.subprocess, "run", missing)
        assert windows_identifier() == UNKNOWN


class TestMacOS:
    def test_hashes_hardware_address(self, monkeypatch):
        link = SimpleNamespace(family=psutil.AF_LINK, address="a4:83:e7:01:02:03")
        inet = SimpleNamespace(family=2, address="10.0.0.2")
        monkeypatch.setattr(machine_id.psutil, "net_if_addrs", lambda: {"en0": [inet, link]})

        expected = hashlib.sha256(bytes.fromhex("a483e7010203")).hexdigest()
        assert macos_identifier() == expected

    def test_interface_missing(self, monkeypatch):
        monkeypatch.setattr(machine_id.psutil, "net_if_addrs", lambda: {"lo0": []})
        assert macos_identifier() == UNKNOWN


class TestLinux:
    def test_hashes_machine_id(self, tmp_path):
        path = tmp_path / "machine-id"
        path.write_bytes(b"0123456789abcdef\n")

        assert linux_identifier([tmp_path / "absent", path]) == hashlib.sha256(
            b"0123456789abcdef\n"
        ).hexdigest()

    def test_no_candidate(self, tmp_path):
        assert linux_identifier([tmp_path / "absent"]) == UNKNOWN

    def test_default_candidates(self, tmp_path, monkeypatch):
        path = tmp_path / "machine-id"
        path.write_bytes(b"id")
        monkeypatch.setattr(machine_id, "LINUX_MACHINE_ID_FILES", (path,))

        assert linux_identifier() == hashlib.sha256(b"id").hexdigest()


@pytest.mark.parametrize(
    "system, lookup",
    [
        ("Windows", "windows_identifier"),
        ("Darwin", "macos_identifier"),
        ("Linux", "linux_identifier"),
    ],
)
def test_identify_dispatches_on_platform(monkeypatch, system, lookup):
    monkeypatch.setattr(machine_id.platform, "system", lambda: system)
    monkeypatch.setattr(machine_id, lookup, lambda: f"id-from-{lookup}")

    assert identify() == f"id-from-{lookup}"


def test_identify_unknown_platform(monkeypatch):
    monkeypatch.setattr(machine_id.platform, "system", lambda: "Plan9")
    assert identify() == UNKNOWN


def test_identify_never_raises(monkeypatch):
    def broken():
        raise RuntimeError("lookup failed")

    monkeypatch.setattr(machine_id.platform, "system", lambda: "Linux")
    monkeypatch.setattr(machine_id, "linux_identifier", broken)

    assert identify() == UNKNOWN
