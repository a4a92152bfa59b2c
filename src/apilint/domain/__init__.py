"""Domain layer — type model, tags, and dry-run strategy.

This layer depends only on stdlib and pydantic.
It must never import from rules, services, infrastructure, commands, or config.
"""
