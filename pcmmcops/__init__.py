"""Build and validate COPS messages and objects for PacketCable Multimedia."""

__version__ = "0.1.0"
__all__ = ["cops"]