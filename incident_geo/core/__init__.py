"""Core utilities and shared infrastructure.

- bounds: Service-region registry and coordinate range checks
- config: Configuration loading and validation
- constants: Named constants (targets, GeoJSON type names)
- exceptions: Custom exception hierarchy
"""
