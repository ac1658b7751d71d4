"""Plugin RPC messages and the service and client that exchange them."""

__all__ = ["protocol", "rpc"]