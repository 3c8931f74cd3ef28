"""Domain layer: entities, commands, and the error taxonomy.

This layer depends only on stdlib.
It must never import from services, infrastructure, facade, or commands.
"""
