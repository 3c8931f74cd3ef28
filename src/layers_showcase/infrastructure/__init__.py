"""Infrastructure layer: database engine, persistence gateways, repositories.

This layer depends on stdlib and third-party libs (SQLAlchemy).
It may import the domain layer for entities and errors, and must never
import from services, facade, or commands.
"""
