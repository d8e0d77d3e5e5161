from .middleware import RequestIDMiddleware
from .router import health_check, v1_router

__all__ = ["health_check", "v1_router", "RequestIDMiddleware"]
