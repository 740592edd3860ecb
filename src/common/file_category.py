"""Classification of source files by extension."""

import os
from typing import Dict, Tuple

from constants import Constants

# Checked in order; first match wins. Extensions are case-sensitive.
CATEGORIES: Dict[str, Tuple[str, ...]] = {
    "sourceC": (".c", ".C"),
    "sourceCpp": (".cpp", ".c++", ".C++", ".cxx", ".cc", ".CC"),
    "sourceAsm": (".asm", ".s", ".S"),
    "header": (".h", ".hpp"),
    "library": (".a", ".lib"),
    "object": (".o",),
    "linkerScript": (".sct", ".scf", ".ld", ".icf"),
    "doc": (".txt", ".md", ".pdf", ".htm", ".html"),
}


def get_category(file: str) -> str:
    """Return the file category for ``file`` according to its extension."""
    extension = os.path.splitext(file)[1]
    for category, extensions in CATEGORIES.items():
        if extension in extensions:
            return category
    return Constants.OTHER_CATEGORY
