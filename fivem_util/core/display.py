"""Terminal rendering for parsed configurations and resource reports.

Output goes through :mod:`rich`, which drops colors automatically when the
stream is not a terminal. User supplied strings are always wrapped in
:class:`~rich.text.Text` so brackets in resource names are never read as
markup.
"""

from __future__ import annotations

from typing import Dict, Optional

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from .resources import ResourceUsage
from .server_config import ServerConfig

# ^0 .. ^9 color codes used in server names.
HOSTNAME_COLOURS = {
    0: "white",
    1: "red",
    2: "green",
    3: "yellow",
    4: "blue",
    5: "bright_blue",
    6: "magenta",
}
DEFAULT_COLOUR = "white"

SECRET_VISIBLE_CHARS = 4
SECRET_MIN_LENGTH = 8


def stdout_console() -> Console:
    return Console(highlight=False)


def stderr_console() -> Console:
    return Console(stderr=True, highlight=False)


def colorize_hostname(hostname: str) -> Text:
    """Turn ``^N`` color codes into styled text.

    A ``^`` that is not followed by a digit is kept as a literal character.
    """
    text = Text()
    colour = DEFAULT_COLOUR
    part = []
    index = 0
    while index < len(hostname):
        char = hostname[index]
        following = hostname[index + 1] if index + 1 < len(hostname) else ""
        if char == '^' and following.isdigit():
            if part:
                text.append(''.join(part), style=colour)
                part = []
            colour = HOSTNAME_COLOURS.get(int(following), DEFAULT_COLOUR)
            index += 2
            continue
        part.append(char)
        index += 1
    if part:
        text.append(''.join(part), style=colour)
    return text


def strip_colour_codes(hostname: str) -> str:
    """Hostname without its ``^N`` color codes."""
    return colorize_hostname(hostname).plain


def mask_secret(value: str) -> str:
    """Mask a secret, keeping the last few characters of long values."""
    if len(value) < SECRET_MIN_LENGTH:
        return '*' * len(value)
    hidden = len(value) - SECRET_VISIBLE_CHARS
    return '*' * hidden + value[hidden:]


def _field(label: str, value, pad: int = 0) -> Text:
    line = Text("  ")
    line.append(f"{label}:", style="bold")
    line.append(" " * (pad + 1))
    line.append(str(value))
    return line


def _mapping_tree(title: str, values: Dict[str, str]) -> Tree:
    tree = Tree(Text(title, style="bold"), guide_style="dim")
    for key, value in values.items():
        tree.add(Text(f"{key} = {value}"))
    return tree


def render_config(config: ServerConfig, console: Optional[Console] = None) -> None:
    """Print a readable summary of ``config``."""
    console = console or stdout_console()

    header = Text()
    header.append("FiveM Server Configuration", style="underline")
    header.append(": ")
    hostname = colorize_hostname(config.hostname)
    hostname.stylize("italic")
    header.append_text(hostname)
    console.print(header, soft_wrap=True)

    console.print(_field("Script Hook", "Allowed" if config.allow_scripthook else "Disabled", 2), soft_wrap=True)
    console.print(_field("Rcon Password", mask_secret(config.rcon_password)), soft_wrap=True)
    console.print(_field("License Key", mask_secret(config.license_key), 2), soft_wrap=True)
    console.print(_field("Server Icon", config.server_icon, 2), soft_wrap=True)
    console.print(_field("Max Clients", config.max_clients, 2), soft_wrap=True)

    if config.convars:
        console.print(_mapping_tree("Convars", config.convars), soft_wrap=True)

    if config.replicated_convars:
        console.print(_mapping_tree("Replicated Convars", config.replicated_convars), soft_wrap=True)

    if config.resources:
        tree = Tree(Text("Resources", style="bold"), guide_style="dim")
        for name in config.resources:
            tree.add(Text(name))
        console.print(tree, soft_wrap=True)


def render_resource_usage(
    usage: ResourceUsage,
    console: Optional[Console] = None,
    err_console: Optional[Console] = None,
) -> None:
    """Print found resources to stdout, missing and extra ones to stderr."""
    console = console or stdout_console()
    err_console = err_console or stderr_console()

    for name, path in usage.found:
        line = Text("[  FOUND  ]", style="green")
        line.append(" ")
        line.append(name, style="bold")
        line.append(f" @ {path}")
        console.print(line, soft_wrap=True)

    for name in usage.missing:
        line = Text("[ MISSING ]", style="red")
        line.append(" ")
        line.append(name, style="bold")
        err_console.print(line, soft_wrap=True)

    for name, path in usage.extra:
        line = Text("[  EXTRA  ]", style="yellow")
        line.append(" ")
        line.append(name, style="bold")
        line.append(f" @ {path}")
        err_console.print(line, soft_wrap=True)


__all__ = [
    "colorize_hostname",
    "mask_secret",
    "render_config",
    "render_resource_usage",
    "stderr_console",
    "stdout_console",
    "strip_colour_codes",
]
