# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _pkg_version

# Expose a version if package metadata is present; otherwise fall back
try:
    __version__ = _pkg_version("jobgate")
except PackageNotFoundError:  # source checkout
    __version__ = "0.0.0+local"

__all__ = ["__version__"]
