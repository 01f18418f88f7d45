"""
Service layer.

The stores wrap a single ``Database`` handle and own one entity type
each.  ``BookingService`` is the only thing the API handlers talk to.
"""
