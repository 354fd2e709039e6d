"""
Use cases for the portfolio API.

Services validate request bodies against the entity schemas, call the
configured store and raise ``portfolio.core.errors`` exceptions; routers stay
thin and never touch storage directly.
"""
