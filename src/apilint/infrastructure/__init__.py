"""Infrastructure layer — schema document I/O.

This layer depends on stdlib and third-party libs (ruamel.yaml).
It must never import from domain, rules, services, commands, or output.
The service layer bridges between domain models and infrastructure.
"""
