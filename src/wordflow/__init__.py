"""Top-level package for wordflow.

Reflows long-form text into bounded pages for a viewer's presentation
context (background theme).

Provides subpackages:
- wordflow.layout – profiles, wrapping, pagination, restyling, process()
- wordflow.templates – mood-driven styling of newly authored text
- wordflow.core – models, payload validation, serialization
- wordflow.utils – debug page previews
"""

def _get_version() -> str:
    """Get version from installed metadata, or pyproject.toml in a checkout."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    from pathlib import Path

    try:
        return pkg_version("wordflow")
    except PackageNotFoundError:
        pass

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text(encoding="utf-8").splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
