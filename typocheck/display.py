"""Terminal rendering of check results."""

from __future__ import annotations

from typocheck.checker import CheckResult


def render_result(result: CheckResult) -> str:
    """Render a check result as the lines shown in the terminal."""
    if result.known:
        return f"'{result.word}' is correct."

    lines: list[str] = [f"'{result.word}' is not in the dictionary."]
    if not result.suggestions:
        lines.append("No suggestions found.")
        return "\n".join(lines)

    lines.append("Suggestions:")
    for s in result.suggestions:
        lines.append(f" - {s}")
    if result.best is not None:
        lines.append(f"Best suggestion: {result.best}")
    return "\n".join(lines)


def print_result(result: CheckResult) -> None:
    """Print a check result to the terminal."""
    print(render_result(result))
