"""Help text rendering for registered options."""

from __future__ import annotations

from typing import Iterable

from smart_cmdline.core.config import HelpConfig
from smart_cmdline.core.constants import DEFAULT_HELP
from smart_cmdline.options.models import Option


def render_help(
    options: Iterable[Option],
    prefix: str | None = None,
    config: HelpConfig | None = None,
) -> str:
    """
    Render one aligned entry per option, in registration order.

    Each entry is the option label (joined switches, or ``<name>`` for
    positional options) padded to the widest label, followed by the help
    text. Continuation lines of multi-line help are indented to the help
    column. Entries are separated by a blank line.

    Args:
        options: Registered options, in display order
        prefix: Text at the start of every line (defaults to config.prefix)
        config: Layout settings (defaults to DEFAULT_HELP)

    Returns:
        Help text ending with exactly one newline
    """
    config = config or DEFAULT_HELP
    if prefix is None:
        prefix = config.prefix
    options = list(options)

    labels = [opt.label(config.separator) for opt in options]
    width = max((len(label) for label in labels), default=0) + config.padding
    indent = prefix + " " * width

    lines = []
    for opt, label in zip(options, labels):
        entry = prefix + label.ljust(width)
        if opt.help:
            first, *rest = opt.help.split("\n")
            lines.append(entry + first)
            lines.extend(indent + line for line in rest)
        else:
            lines.append(entry)
        lines.append("")

    return "\n".join(lines).rstrip() + "\n"
