from __future__ import annotations


class CCDSError(RuntimeError):
    """Base class for every error the `init` pipeline reports and exits on."""
