"""Terminal prompts: text input, confirmations and option pickers.

Pickers shell out to ``fzf`` when it is installed and fall back to a
numbered list read from stdin otherwise.
"""
from __future__ import annotations

import logging
import shutil
import subprocess
from typing import Callable, List, Optional, Sequence, Tuple

from initializr.models import DependencyGroup, MetadataOption

logger = logging.getLogger(__name__)

FIELD_SEP = "│"
InputFn = Callable[[str], str]


def fzf_available() -> bool:
    return shutil.which("fzf") is not None


def get_input(prompt: str, default: str, input_fn: InputFn = input) -> str:
    value = input_fn(f"{prompt} [{default}]: ").strip()
    return value or default


def confirm(prompt: str, default: bool = False, input_fn: InputFn = input) -> bool:
    """Yes/no question; an empty answer returns ``default``."""
    suffix = "(Y/n)" if default else "(y/N)"
    answer = input_fn(f"{prompt} {suffix}: ").strip().lower()
    if not answer:
        return default
    return answer in ("y", "yes")


def run_fzf(lines: Sequence[str], options: Sequence[str]) -> Optional[List[str]]:
    """Run fzf over ``lines``; None when the user cancels or nothing matched."""
    try:
        proc = subprocess.run(
            ["fzf", *options],
            input="\n".join(lines),
            stdout=subprocess.PIPE,
            text=True,
            check=False,
        )
    except OSError as exc:
        logger.warning("Could not start fzf: %s", exc)
        return None
    if proc.returncode != 0:
        return None
    return [line for line in proc.stdout.splitlines() if line]


def _first_field(line: str) -> str:
    return line.split(FIELD_SEP, 1)[0]


def _pick_one_fzf(title: str, options: Sequence[MetadataOption]) -> Optional[str]:
    lines = [FIELD_SEP.join((o.id, o.name, o.description or "")) for o in options]
    selected = run_fzf(lines, [
        "--height=50%",
        "--border=rounded",
        f"--prompt={title} > ",
        "--header=↑↓ Navigate • Enter Select • Esc Cancel",
        "--preview=echo {} | cut -d'│' -f2,3 | sed 's/│/\\n\\n/'",
        "--preview-window=up:3:wrap",
        f"--delimiter={FIELD_SEP}",
        "--with-nth=1,2",
        "--ansi",
    ])
    if not selected:
        return None
    return _first_field(selected[0])


def _pick_many_fzf(entries: Sequence[Tuple[DependencyGroup, MetadataOption]]) -> Optional[List[str]]:
    lines = [
        FIELD_SEP.join((dep.id, dep.name, group.name, dep.description or "No description"))
        for group, dep in entries
    ]
    selected = run_fzf(lines, [
        "--multi",
        "--height=80%",
        "--border=rounded",
        "--prompt=Dependencies (Tab to select multiple) > ",
        "--header=Tab: Select • Enter: Confirm • Ctrl-A: Select All • Ctrl-D: Deselect All • Esc: Skip",
        "--preview=echo {} | cut -d'│' -f2,4 | sed 's/│/\\n\\n/'",
        "--preview-window=up:5:wrap",
        f"--delimiter={FIELD_SEP}",
        "--with-nth=1,2,3",
        "--bind=ctrl-a:select-all",
        "--bind=ctrl-d:deselect-all",
        "--ansi",
    ])
    if selected is None:
        return None
    return [_first_field(line) for line in selected]


def _match_choice(token: str, ids: Sequence[str]) -> Optional[str]:
    token = token.strip()
    if token in ids:
        return token
    if token.isdigit():
        index = int(token) - 1
        return ids[index] if 0 <= index < len(ids) else None
    return None


def _pick_one_numbered(
    title: str,
    options: Sequence[MetadataOption],
    default: Optional[str],
    input_fn: InputFn,
) -> Optional[str]:
    ids = [o.id for o in options]
    for i, o in enumerate(options, start=1):
        marker = "*" if o.id == default else " "
        print(f" {marker}{i:3d}) {o.id} - {o.name}")
    while True:
        hint = f" [{default}]" if default else ""
        answer = input_fn(f"{title}{hint} (number or id, empty to {'accept' if default else 'cancel'}): ").strip()
        if not answer:
            return default
        choice = _match_choice(answer, ids)
        if choice is not None:
            return choice
        print(f"Unknown option: {answer}")


def _pick_many_numbered(
    entries: Sequence[Tuple[DependencyGroup, MetadataOption]],
    input_fn: InputFn,
) -> List[str]:
    ids = [dep.id for _, dep in entries]
    current = None
    for i, (group, dep) in enumerate(entries, start=1):
        if group.name != current:
            current = group.name
            print(f"\n{group.name}")
        print(f"  {i:3d}) {dep.id} - {dep.name}")
    while True:
        answer = input_fn("Dependencies (comma separated numbers or ids, empty to skip): ").strip()
        if not answer:
            return []
        picked = [_match_choice(tok, ids) for tok in answer.split(",") if tok.strip()]
        if all(p is not None for p in picked):
            return list(dict.fromkeys(picked))
        print(f"Unknown dependency in: {answer}")


def pick_one(
    title: str,
    options: Sequence[MetadataOption],
    default: Optional[str] = None,
    use_fzf: Optional[bool] = None,
    input_fn: InputFn = input,
) -> Optional[str]:
    """Let the user pick one option id; None means cancelled."""
    if not options:
        logger.error("No options available for %s", title)
        return None
    if use_fzf is None:
        use_fzf = fzf_available()
    if use_fzf:
        return _pick_one_fzf(title, options)
    return _pick_one_numbered(title, options, default, input_fn)


def pick_many(
    entries: Sequence[Tuple[DependencyGroup, MetadataOption]],
    use_fzf: Optional[bool] = None,
    input_fn: InputFn = input,
) -> List[str]:
    """Let the user pick any number of dependency ids; skipping yields []."""
    if not entries:
        return []
    if use_fzf is None:
        use_fzf = fzf_available()
    if use_fzf:
        return _pick_many_fzf(entries) or []
    return _pick_many_numbered(entries, input_fn)
