"""
HTTP layer of the Products API: routers, endpoints and shared
dependencies.
"""
