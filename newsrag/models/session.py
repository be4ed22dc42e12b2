"""
Session log entry shape.

A turn is a one-key mapping, {"user": text} or {"bot": text}, stored as a
JSON string in the session list.

Dependencies: None
System role: Session log entry shape
"""

from typing import Literal

Role = Literal["user", "bot"]


def make_turn(role: Role, text: str) -> dict[str, str]:
    """Build a session log entry."""
    return {role: text}
