"""
Service layer abstraction.

Business logic lives here, independent of the HTTP handlers: the
product store and the payload validators.
"""
