from .sector import Sector

__all__ = ["Sector"]
