"""Domain layer: classification, conversion, and display rules.

This layer depends only on stdlib, pydantic, and dateutil.
It must never import from services, commands, output, or config.
"""
