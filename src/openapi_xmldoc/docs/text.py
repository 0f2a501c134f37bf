"""Turns the inner XML of a documentation element into display text."""

import html
import re

REF_TAG = re.compile(r'<(?:see|paramref|typeparamref) (?:name|cref|langword)="(?:[TPFME]:)?(?P<display>.+?)" ?/>')
HREF_TAG = re.compile(r'<see href="(?P<href>.+?)">(?P<display>.+?)</see>')
CODE_TAG = re.compile(r"<c>(?P<display>.+?)</c>")
MULTILINE_CODE_TAG = re.compile(r"<code>(?P<display>.+?)</code>", re.DOTALL)
PARA_TAG = re.compile(r"<para>(?P<display>.+?)</para>", re.DOTALL)


def humanize(text: str | None) -> str:
    """Convert raw doc comment markup into plain text with light Markdown."""
    if text is None:
        return ""
    text = _normalize_indentation(text)
    text = REF_TAG.sub(lambda m: m.group("display"), text)
    text = HREF_TAG.sub(lambda m: f"[{m.group('display')}]({m.group('href')})", text)
    text = CODE_TAG.sub(lambda m: f"`{m.group('display')}`", text)
    text = MULTILINE_CODE_TAG.sub(lambda m: f"```{m.group('display')}```", text)
    text = PARA_TAG.sub(lambda m: f"\n\n{m.group('display')}", text)
    return html.unescape(text).strip()


def _normalize_indentation(text: str) -> str:
    """Strip blank edge lines and the indentation shared by all lines."""
    lines = text.splitlines()
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()

    indents = [len(line) - len(line.lstrip()) for line in lines if line.strip()]
    padding = min(indents) if indents else 0
    return "\n".join(line[padding:] for line in lines)
