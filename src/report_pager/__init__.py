"""Top-level package for the clinical report pager.

Provides subpackages:
- report_pager.core – immutable data models (raster buffers, pages, jobs)
- report_pager.exporter – whitespace-aware pagination and page export
- report_pager.cli – command line entry point
"""

def _get_version() -> str:
    """Get version from importlib.metadata (installed) or pyproject.toml (dev)."""
    try:
        from importlib.metadata import version as pkg_version
        return pkg_version("report-pager")
    except Exception:
        pass

    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text().splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.3.0"
                return line.split("=")[1].strip().strip('"').strip("'")
    return "0.0.0"

__version__ = _get_version()
__copyright__ = "Copyright 2026 The report-pager authors. Licensed under the MIT License"
__all__: list[str] = ["__version__", "__copyright__"]
