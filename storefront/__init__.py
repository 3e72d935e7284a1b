"""
Storefront core

- commerce: cart/catalog client over the live API or the mock dataset
- cart: cart actions, the reconciling cart store, layout view preference
- routers: FastAPI endpoints over the client and the store
"""

__version__ = "0.1.0"
