"""
Catalog package for the lolomo service.

This package holds the in-memory title catalogue (``store``), the slow
artwork generator (``artwork``), the service composing them
(``service``), their pydantic schemas and a small REST router. The
GraphQL layer in ``lolomo.graphql`` and the router both talk to a single
``LolomoService`` instance created by ``lolomo.main.create_app``.
"""

from .router import router as catalog_router  # noqa: F401
