"""Core utilities and shared infrastructure.

- config: Validator options loaded from defaults or the environment
- constants: GeoJSON discriminants and array length bounds
- exceptions: Custom exception hierarchy
"""
