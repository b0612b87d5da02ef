"""
`python -m appx_toolkit` entrypoint.

This is mainly for convenience; the installed console script `appx-toolkit` calls
the same `appx_toolkit.cli:main`.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
