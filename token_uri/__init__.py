"""Decode base64 JSON token URIs (`data:application/json;base64,...`)."""
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("token-uri-decoder")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"
