"""snipper — keeps code snippets, LaTeX documents and extracted files in step.

Snippets are tagged in source files:
    // SNIPPET:BEGIN {some_snippet_name} ${optional description}
    ...snippet body...
    // SNIPPET:END {some_snippet_name}

An inactive snippet carries the deactivation sigil on both tags:
    // !SNIPPET:BEGIN {old_snippet}
    ...
    // !SNIPPET:END {old_snippet}

Documents pull extracted snippets in with:
    \\lstinputlisting{snippets/some_snippet_name.cpp}
"""

__version__ = "0.3.0"

# Tag defaults used by the scanners and the configuration layer
DEFAULT_COMMENT = "//"
DEFAULT_KEYWORD = "SNIPPET"
DEFAULT_INACTIVE_SIGIL = "!"
