"""
The closed set of file extensions that count as source or text.

Kept as one constant so the counter never grows ad-hoc conditionals;
extend the set here and every scan picks it up.
"""

from pathlib import Path

RECOGNIZED_EXTENSIONS = frozenset(
    {
        # Systems languages
        "rs",
        "c",
        "h",
        "cpp",
        "cc",
        "cxx",
        "hpp",
        "hh",
        "hxx",
        "go",
        "zig",
        # JVM / .NET
        "java",
        "kt",
        "kts",
        "scala",
        "groovy",
        "cs",
        "fs",
        # Scripting
        "py",
        "pyi",
        "rb",
        "php",
        "pl",
        "lua",
        "sh",
        "bash",
        "zsh",
        "ps1",
        "r",
        "jl",
        # Web
        "js",
        "mjs",
        "cjs",
        "jsx",
        "ts",
        "tsx",
        "vue",
        "svelte",
        "html",
        "htm",
        "css",
        "scss",
        "sass",
        "less",
        # Mobile
        "swift",
        "m",
        "mm",
        "dart",
        # Functional
        "hs",
        "ml",
        "ex",
        "exs",
        "erl",
        "clj",
        "elm",
        # Data, config and docs
        "sql",
        "json",
        "yaml",
        "yml",
        "toml",
        "ini",
        "cfg",
        "xml",
        "md",
        "rst",
        "txt",
        "proto",
        "graphql",
    }
)


def is_recognized(path) -> bool:
    """Return True when the file's extension (case-insensitive) is in the set."""
    suffix = Path(path).suffix
    if not suffix:
        return False
    return suffix[1:].lower() in RECOGNIZED_EXTENSIONS
