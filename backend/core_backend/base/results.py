"""
Result structures returned by every public service operation.

A service never raises for an expected domain failure; it returns
``{"ok": False, "error": "<message>"}`` instead. Successful calls return
``{"ok": True}`` plus any payload keys.
"""
from typing import Any, Dict


def success(**payload: Any) -> Dict[str, Any]:
    return {"ok": True, "error": None, **payload}


def failure(error: str) -> Dict[str, Any]:
    return {"ok": False, "error": error}
