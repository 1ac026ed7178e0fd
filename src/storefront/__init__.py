"""Storefront API.

HTTP backend for a small clothing storefront: users, categories, products,
orders and product reviews stored through SQLModel and served with FastAPI.
"""

__version__ = "0.1.0"
