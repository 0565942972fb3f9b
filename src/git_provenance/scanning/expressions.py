"""Detection of traditional control-flow constructs.

Files are cleaned before matching: string literals are emptied and comments
removed, so a ``for (`` inside a comment or a string does not count. The
cleaning is regex based and approximate; nested comments and some escaped
quote sequences can slip through.

The patterns target C-family syntax. Python's ``for x in y:`` and
``while x:`` never match, which is intended.
"""

import re

from .languages import CommentSyntax, LanguageTable

# Masked to an empty literal of the same quote kind, in this order.
_STRING_LITERALS = (
    (re.compile(r'"(?:[^"\\]|\\.)*"'), '""'),
    (re.compile(r"'(?:[^'\\]|\\.)*'"), "''"),
    (re.compile(r"`(?:[^`\\]|\\.)*`"), "``"),
)

NON_TYPICAL_PATTERNS = {
    "for_loop": re.compile(r"\bfor\s*\("),
    "while_loop": re.compile(r"\bwhile\s*\("),
    "do_while_loop": re.compile(r"\bdo\s*\{"),
    "switch_statement": re.compile(r"\bswitch\s*\("),
}


def mask_string_literals(content: str) -> str:
    for pattern, placeholder in _STRING_LITERALS:
        content = pattern.sub(placeholder, content)
    return content


def strip_comments(content: str, syntax: CommentSyntax) -> str:
    """Remove single-line comment tails, then block comment spans."""
    single = re.compile(re.escape(syntax.single) + r".*$", re.MULTILINE)
    content = single.sub("", content)

    if syntax.has_block:
        block = re.compile(
            re.escape(syntax.block_start) + r"[\s\S]*?" + re.escape(syntax.block_end)
        )
        content = block.sub("", content)

    return content


def clean_source(content: str, syntax: CommentSyntax) -> str:
    return strip_comments(mask_string_literals(content), syntax)


def find_non_typical_constructs(cleaned: str) -> list[str]:
    """Names of the constructs present in already-cleaned source."""
    return [name for name, pattern in NON_TYPICAL_PATTERNS.items() if pattern.search(cleaned)]


def has_non_typical_construct(content: str, extension: str, table: LanguageTable) -> bool:
    """True if the file uses a ``for``/``while``/``do``/``switch`` construct.

    Args:
        content: Raw file content
        extension: File extension including the dot (e.g. ``.ts``)
        table: Language table used to look up comment syntax

    Returns:
        Whether at least one construct survives cleaning
    """
    cleaned = clean_source(content, table.comment_syntax_for(extension))
    return any(pattern.search(cleaned) for pattern in NON_TYPICAL_PATTERNS.values())
