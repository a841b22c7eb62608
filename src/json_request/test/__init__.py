from .server import PingServer, ReceivedRequest

__all__ = ["PingServer", "ReceivedRequest"]
