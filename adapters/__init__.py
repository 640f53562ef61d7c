"""
Adapters package.

Implementations of the domain interfaces: storage backends and the recipe
API client.
"""
