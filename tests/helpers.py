"""Helpers shared by test modules."""


def write_lines(path, count, prefix="line"):
    """Write ``count`` newline-terminated lines to ``path``."""
    path.write_text("".join(f"{prefix} {i}\n" for i in range(count)), encoding="utf-8")
