"""Domain layer: invocation and layout value objects, built-in commands.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
