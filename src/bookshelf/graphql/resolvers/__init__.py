"""Resolver package for the GraphQL schema.

Resolvers read records from the catalog in the GraphQL context and convert
them to Strawberry types.
"""
