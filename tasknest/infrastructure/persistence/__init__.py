"""Persistence: async engine, ORM models, visibility predicates, repositories."""
