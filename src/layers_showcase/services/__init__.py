"""Service layer: business rules over the repository.

Services may import from domain and infrastructure layers.
They must never import from facade, actions, commands, or output.
"""
