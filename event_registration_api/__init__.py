"""
Top‑level package for the Event Registration API.

Everything lives in submodules: the web application under ``app`` and
a ``requests`` based HTTP client in ``client``.
"""

__all__ = []
