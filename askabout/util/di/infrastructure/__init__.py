"""Infrastructure component providers.

Importing the production subclass registers it with ``get_provider``.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = ["PersistenceProvider", "ProdPersistenceProvider"]
