"""
Core building blocks shared by every route.

``endpoint`` defines the uniform endpoint shape and the middleware
chaining combinator, ``middleware`` provides ready‑made middleware and
``transport`` adapts an endpoint to an HTTP route.  Configuration,
logging setup and the error hierarchy also live here.
"""
