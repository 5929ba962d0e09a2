"""Runtime detection for standard and constrained Python hosts.

A constrained host is a WebAssembly build of the interpreter (Pyodide in the
browser or on edge workers, WASI). These hosts have no subprocesses, usually
no threads and only a virtual filesystem.
"""

from __future__ import annotations

import functools
import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Container, Optional


class Runtime(str, Enum):
    STANDARD = "standard"
    CONSTRAINED = "constrained"
    UNKNOWN = "unknown"


CONSTRAINED_PLATFORMS = ("emscripten", "wasi")


def probe_runtime(platform: str, modules: Container[str], environ_available: bool) -> Runtime:
    if platform in CONSTRAINED_PLATFORMS or "pyodide" in modules:
        return Runtime.CONSTRAINED
    if environ_available:
        return Runtime.STANDARD
    return Runtime.UNKNOWN


@functools.lru_cache(maxsize=None)
def detect_runtime() -> Runtime:
    return probe_runtime(sys.platform, sys.modules, getattr(os, "environ", None) is not None)


def is_standard_runtime() -> bool:
    return detect_runtime() is Runtime.STANDARD


def is_constrained_runtime() -> bool:
    return detect_runtime() is Runtime.CONSTRAINED


@dataclass(frozen=True)
class RuntimeCapabilities:
    runtime: Runtime
    is_standard: bool
    is_constrained: bool
    supports_filesystem: bool
    supports_threads: bool
    supports_subprocess: bool


def get_runtime_capabilities(runtime: Optional[Runtime] = None) -> RuntimeCapabilities:
    runtime = runtime or detect_runtime()
    standard = runtime is Runtime.STANDARD
    return RuntimeCapabilities(
        runtime=runtime,
        is_standard=standard,
        is_constrained=runtime is Runtime.CONSTRAINED,
        supports_filesystem=standard,
        supports_threads=standard,
        supports_subprocess=standard,
    )


def assert_runtime(expected: Runtime, actual: Optional[Runtime] = None) -> None:
    actual = actual or detect_runtime()
    if actual is not expected:
        raise RuntimeError(
            f"Expected {expected.value} runtime, but detected {actual.value}. "
            f"This code requires {expected.value} runtime to function correctly."
        )


__all__ = [
    "Runtime",
    "RuntimeCapabilities",
    "assert_runtime",
    "detect_runtime",
    "get_runtime_capabilities",
    "is_constrained_runtime",
    "is_standard_runtime",
    "probe_runtime",
]
