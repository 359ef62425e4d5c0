"""Markdown outline rendering."""

from __future__ import annotations

from collections.abc import Sequence

from doxnav.table.model import NavEntry


def _escape_markdown_link_text(text: str) -> str:
    """Escape characters that break markdown link syntax.

    Args:
        text: The link text to escape.

    Returns:
        Text with [ and ] escaped as \\[ and \\].
    """
    return text.replace("[", r"\[").replace("]", r"\]")


def target_to_url(base_url: str, target: str) -> str:
    """Join a navigation target onto the base URL of the rendered site.

    Args:
        base_url: Base URL of the site, may be empty.
        target: Page reference, optionally with a ``#anchor``.

    Returns:
        URL of the target.
    """
    if not base_url:
        return target
    return f"{base_url.rstrip('/')}/{target}"


def _outline_lines(
    entries: Sequence[NavEntry], base_url: str, indent: int, level: int
) -> list[str]:
    lines: list[str] = []
    prefix = " " * (indent * level)
    for entry in entries:
        if entry.target is None:
            # Group label
            lines.append(f"{prefix}- {entry.title}")
        else:
            url = target_to_url(base_url, entry.target)
            text = _escape_markdown_link_text(entry.title)
            lines.append(f"{prefix}- [{text}]({url})")
        lines.extend(_outline_lines(entry.subentries, base_url, indent, level + 1))
    return lines


def render_markdown(
    entries: Sequence[NavEntry],
    base_url: str = "",
    indent: int = 2,
    title: str | None = None,
) -> str:
    """Render entries as a nested Markdown bullet list.

    Args:
        entries: Top-level entries.
        base_url: Prefix for entry targets.
        indent: Spaces per nesting level.
        title: Optional ``#`` heading written above the list.

    Returns:
        Markdown text ending with a newline (empty for an empty table).
    """
    lines: list[str] = []
    if title:
        lines.extend([f"# {title}", ""])
    lines.extend(_outline_lines(entries, base_url, indent, 0))
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
