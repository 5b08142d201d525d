# taskboard/flash.py
"""
One-shot status messages kept in the signed session cookie.

Handlers queue a message before redirecting; the next rendered page pops
the queue, so each message is shown exactly once.
"""
from typing import List, Tuple

from fastapi import Request

FLASH_KEY = "_flashes"
KINDS = ("success", "error")


def flash(request: Request, kind: str, text: str) -> None:
    if kind not in KINDS:
        raise ValueError(f"unknown flash kind: {kind!r}")
    queue = list(request.session.get(FLASH_KEY, []))
    queue.append([kind, text])
    # reassign so the session middleware sees the change
    request.session[FLASH_KEY] = queue


def peek_flashes(request: Request) -> List[Tuple[str, str]]:
    return [(k, t) for k, t in request.session.get(FLASH_KEY, [])]


def pop_flashes(request: Request) -> List[Tuple[str, str]]:
    queue = request.session.pop(FLASH_KEY, [])
    return [(k, t) for k, t in queue]


def get_flashed(flashes: List[Tuple[str, str]], kind: str) -> List[str]:
    return [t for k, t in flashes if k == kind]
