from __future__ import annotations

import uuid
from typing import Any, Dict
from typing_extensions import TypedDict
from dataclasses import dataclass, field


class BaseGraphState(TypedDict, total=False):
    """Base state shared by every pipeline graph"""
    request_id: str
    warnings: list
    issues: list
    audit: Dict[str, Any]


@dataclass
class BaseResult:
    """Base result shared by every pipeline"""
    request_id: str
    issues: list = field(default_factory=list)
    warnings: list = field(default_factory=list)
    audit: Dict[str, Any] = field(default_factory=lambda: {"events": []})


def generate_request_id() -> str:
    return str(uuid.uuid4())
