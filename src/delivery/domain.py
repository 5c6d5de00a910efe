"""Delivery bounded context — Courier Movement and Order Dispatch.

Couriers travel across a bounded grid toward delivery destinations; orders are
bound to couriers and tracked until they are handed over. The context owns the
consistency rules of both lifecycles. Choosing which courier serves which order,
and driving the simulation clock, belong to its callers.
"""

from protean.domain import Domain

from delivery.utils.logging import configure_logging

configure_logging()

delivery = Domain(name="delivery")
