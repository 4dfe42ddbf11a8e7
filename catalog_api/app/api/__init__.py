"""
API package containing versioned routes and shared request
dependencies.
"""
