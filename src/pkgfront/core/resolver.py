"""Pure command-name resolution.

Every function in this module is a deterministic transformation with no
I/O: printing diagnostics is the dispatcher's job.

Resolution order (enforced by :func:`resolve`):

1. **Exact**: an entry whose name equals the token wins immediately,
   even when that name is also a prefix of other entries.
2. **Prefix**: otherwise every entry whose name starts with the token
   is a candidate; one candidate resolves, several are ambiguous, none
   is not found.
"""

from __future__ import annotations

from pkgfront.core.models import (
    Ambiguous,
    CommandEntry,
    CommandRegistry,
    NotFound,
    ResolutionResult,
    Resolved,
)


def find_exact(registry: CommandRegistry, token: str) -> CommandEntry | None:
    """Return the entry named exactly *token*, or ``None``."""
    return registry.get(token)


def prefix_matches(
    registry: CommandRegistry,
    token: str,
) -> tuple[CommandEntry, ...]:
    """Return every entry whose name starts with *token*, in registry order.

    The empty token is a prefix of every name.
    """
    return tuple(entry for entry in registry if entry.name.startswith(token))


def resolve(registry: CommandRegistry, token: str) -> ResolutionResult:
    """Resolve *token* against *registry*.

    Returns
    -------
    Resolved
        Exact match, or the single entry *token* abbreviates.
    Ambiguous
        *token* is a prefix of two or more names.
    NotFound
        Nothing matches.
    """
    exact = find_exact(registry, token)
    if exact is not None:
        return Resolved(exact)

    matches = prefix_matches(registry, token)
    if len(matches) == 1:
        return Resolved(matches[0])
    if len(matches) > 1:
        return Ambiguous(token=token, matches=matches)
    return NotFound(token=token)
