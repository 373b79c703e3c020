"""TaskNest: multi-tenant task lifecycle and visibility service."""
