"""
Pydantic schema definitions for API payloads.

Deals and bids are schema‑less documents: the models below give typed
access to the fields the API reads (``email``, ``created_at``,
``buyer_email``, ``bid_price``, ``product``) and keep every other
caller‑supplied field unchanged.
"""
