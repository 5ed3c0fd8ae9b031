"""
HTTP layer of the Event Registration API.

Handlers parse requests, call services and map business errors to
status codes.  They never contain business logic.
"""
