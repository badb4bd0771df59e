"""
HTTP layer.

``router`` aggregates the per‑resource routers defined in
``endpoints``.  The routes are mounted at the application root so that
existing clients keep using paths such as ``/deals`` and ``/bids``.
"""
