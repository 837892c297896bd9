"""Mock accrual service package (order accrual endpoint for e2e tests).

Serves ``GET /api/orders/<digits>`` with a delayed canned result; every other
request gets an empty 204.
"""

from __future__ import annotations

__all__ = ["__version__"]
__version__ = "0.1.0"
