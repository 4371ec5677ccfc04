"""
Service layer abstraction.

Services hold the business logic and know nothing about endpoints or
HTTP.  A service can be decorated by another object exposing the same
methods, which is how call logging is added.
"""
