"""Session models, plugin RPC and SDK, and terminal UI components for SSH workspaces."""

__version__ = "0.1.0"