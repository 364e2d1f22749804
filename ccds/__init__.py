"""
ccds package

Cookiecutter-style data science project scaffolder.

Key responsibilities are split across modules:
- `resolver.py`: gather author / license / language from flags or prompts
- `manifest.py`: map a resolved configuration to directories and template files
- `skeleton.py`: apply a manifest to the filesystem and persist the configuration
- `licenses.py`: render the LICENSE file
- `repo.py`: initialize git and commit the skeleton in a fixed narrative
- `cli.py`: CLI entrypoint and orchestration (resolve -> skeleton -> license -> git)
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
