"""HTTP middleware. Applied in tasknest.main; last added = outermost."""

from tasknest.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
