from .fizzbuzz import router as fizzbuzz_router
from .health import router as health_router
from .rot13 import router as rot13_router

_routers = [fizzbuzz_router, health_router, rot13_router]

__all__ = ["get_routers"]


def get_routers():
    return _routers
