"""
API Package

FastAPI application, routes, dependencies and middleware.
"""
