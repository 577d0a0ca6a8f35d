"""Search backend seam.

Capy does not run searches itself. The window reports what the user asked for
to a backend object; the default one only logs and echoes the request.
"""

from __future__ import annotations

import logging
from typing import Protocol

_LOGGER = logging.getLogger(__name__)


class SearchBackend(Protocol):
    def tag_selected(self, name: str) -> None:
        ...

    def query_submitted(self, query: str) -> None:
        ...


class EchoSearchBackend:
    """Backend that prints every request to stdout."""

    def tag_selected(self, name: str) -> None:
        _LOGGER.info("Tag selected: %s", name)
        print(name)

    def query_submitted(self, query: str) -> None:
        _LOGGER.info("Query submitted: %s", query)


__all__ = ["EchoSearchBackend", "SearchBackend"]
