from __future__ import annotations


def success_response(
    data: object,
    meta: dict[str, object] | None = None,
    *,
    message: str | None = None,
) -> dict[str, object]:
    payload: dict[str, object] = {"success": True, "data": data, "meta": meta or {}}
    if message is not None:
        payload["message"] = message
    return payload


def error_response(code: str, message: str) -> dict[str, object]:
    return {"success": False, "error": {"code": code, "message": message}}
