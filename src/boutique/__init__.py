"""Boutique storefront: cart, checkout and back office over a managed store."""

__version__ = "0.1.0"
