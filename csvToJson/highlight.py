#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Syntax highlighting for converted JSON text.

Works on already-serialized JSON: tokens are found with a regular expression
and wrapped in HTML spans or ANSI colour codes. The data itself is untouched.
"""

import html
import re
from collections.abc import Callable, Iterator

from csvToJson.logging_config import Colors

# Strings (optionally followed by a colon, making them keys), literals, numbers
_TOKEN_RE = re.compile(
    r'(?P<string>"(?:\\.|[^"\\])*")(?P<colon>\s*:)?'
    r'|(?P<boolean>\btrue\b|\bfalse\b)'
    r'|(?P<null>\bnull\b)'
    r'|(?P<number>-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?)'
)

HTML_CLASSES = {
    "key": "json-key",
    "string": "json-string",
    "number": "json-number",
    "boolean": "json-boolean",
    "null": "json-null",
}

ANSI_COLORS = {
    "key": Colors.BLUE,
    "string": Colors.GREEN,
    "number": Colors.YELLOW,
    "boolean": Colors.MAGENTA,
    "null": Colors.GRAY,
}


def tokenize(json_text: str) -> Iterator[tuple[str, str]]:
    """
    Split JSON text into (kind, text) pairs.
    
    Kinds are key, string, number, boolean, null, and "" for punctuation
    and whitespace between tokens. Concatenating the texts gives back the input.
    """
    position = 0
    for match in _TOKEN_RE.finditer(json_text):
        if match.start() > position:
            yield "", json_text[position:match.start()]
            
        if match.group("string") is not None:
            if match.group("colon") is not None:
                yield "key", match.group("string")
                yield "", match.group("colon")
            else:
                yield "string", match.group("string")
        else:
            yield match.lastgroup, match.group(0)
            
        position = match.end()
        
    if position < len(json_text):
        yield "", json_text[position:]


def _render(json_text: str, wrap: Callable[[str, str], str]) -> str:
    return "".join(wrap(kind, text) for kind, text in tokenize(json_text))


def highlight_html(json_text: str) -> str:
    """
    Decorate JSON text with HTML spans for display in a <pre> block.
    
    Args:
        json_text: Serialized JSON
        
    Returns:
        HTML-escaped JSON with spans using the json-key, json-string,
        json-number, json-boolean and json-null classes
    """
    def wrap(kind: str, text: str) -> str:
        escaped = html.escape(text, quote=False)
        if not kind:
            return escaped
        return f'<span class="{HTML_CLASSES[kind]}">{escaped}</span>'
        
    return _render(json_text, wrap)


def highlight_ansi(json_text: str) -> str:
    """Colour JSON text for a terminal."""
    def wrap(kind: str, text: str) -> str:
        if not kind:
            return text
        return f"{ANSI_COLORS[kind]}{text}{Colors.RESET}"
        
    return _render(json_text, wrap)


def highlight(json_text: str, style: str = "none") -> str:
    """
    Highlight JSON text in the given style.
    
    Args:
        json_text: Serialized JSON
        style: One of "none", "ansi" or "html"
        
    Returns:
        The decorated text
        
    Raises:
        ValueError: If the style is unknown
    """
    if style == "none":
        return json_text
    if style == "ansi":
        return highlight_ansi(json_text)
    if style == "html":
        return highlight_html(json_text)
    raise ValueError(f"Unknown highlight style: {style}")
