from __future__ import annotations

from typing import Any, Dict, Optional


def new_audit() -> Dict[str, Any]:
    return {"events": []}


def append_event(audit: Dict[str, Any], name: str, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Append event to audit trail (returns a new dict)"""
    events = list(audit.get("events", []))
    events.append({"name": name, "payload": payload or {}})
    return {**audit, "events": events}
