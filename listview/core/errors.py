# File: /listview/core/errors.py | Version: 1.0 | Title: Data-access failure type
from __future__ import annotations

from typing import Optional


class NetworkError(Exception):
    """
    A users API request failed: transport error or non-success response.

    ``message`` is human readable and is what the store surfaces as its
    session-visible error.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
