"""Command pattern compilation.

Commands are written in a shorthand form (``"echo (.+)"``) and expanded into a
regular expression anchored at both ends that also accepts the bot mention
Telegram appends in group chats::

    >>> compile_command("echo (.+)", "rock")
    '^/echo(?:@rock)? (.+)$'
"""

import logging
import re
from typing import Optional, Tuple


logger = logging.getLogger(__name__)


def compile_command(shorthand: str, username: str) -> str:
    """Expand a command shorthand into an anchored regular expression."""
    words = shorthand.split()

    if words:
        command = words[0]
        end_anchor = ""
        if command.endswith("$"):
            end_anchor = "$"
            command = command[:-1]
        words[0] = f"{command}(?:@{re.escape(username)})?{end_anchor}"

    expanded = " ".join(words)
    if not expanded.startswith("^/"):
        if not expanded.startswith("/"):
            expanded = "/" + expanded
        # gated on the shorthand: "^test" keeps its own anchor after the slash
        if not shorthand.startswith("^"):
            expanded = "^" + expanded
    if not expanded.endswith("$"):
        expanded += "$"
    return expanded


def try_compile(pattern: str) -> Tuple[Optional[re.Pattern], str]:
    """Compile ``pattern``; on failure return ``None`` and the reason."""
    try:
        return re.compile(pattern), ""
    except re.error as exc:
        logger.debug("Pattern %r failed to compile: %s", pattern, exc)
        return None, str(exc)


def compile_regex(pattern: str) -> Optional[re.Pattern]:
    """Compile ``pattern``, returning ``None`` when it is not a valid expression."""
    return try_compile(pattern)[0]


def captures(match: re.Match) -> list[str]:
    """Whole match followed by every group, with ``""`` for groups that did not match."""
    return [match.group(0)] + [group or "" for group in match.groups()]
