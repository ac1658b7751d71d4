"""Text-mode user interface components and views."""

__all__ = [
    "ansi",
    "commandbar",
    "completer",
    "editor",
    "enhancement",
    "hostlist",
    "modal",
    "parser",
    "shell",
    "statusbar",
    "styles",
    "tabs",
    "tunnel_edit",
    "tunnel_list",
]