from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Literal, Optional

from ..config import get_settings
from .request_id import get_request_id

AuditAction = Literal[
    "purchase.completed",
    "purchase.rejected",
]
AuditInitiator = Literal["account", "system"]

_audit_logger = logging.getLogger("audit")
_audit_logger.setLevel(get_settings().log_level)
if not _audit_logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    _audit_logger.addHandler(handler)
_audit_logger.propagate = False


def emit_audit_log(
    *,
    action: AuditAction,
    initiator: AuditInitiator,
    account_id: Optional[int],
    total_cost: Optional[int] = None,
    total_seats: Optional[int] = None,
    request_count: Optional[int] = None,
    message: Optional[str] = None,
    extra: Optional[dict[str, Any]] = None,
) -> None:
    """Emit structured JSON audit log. Raises RuntimeError if logging fails."""
    if not get_settings().audit_enabled:
        return
    level = logging.WARNING if action == "purchase.rejected" else logging.INFO
    payload: dict[str, Any] = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "level": logging.getLevelName(level).lower(),
        "action": action,
        "initiator": initiator,
        "request_id": get_request_id(),
        "account_id": account_id,
        "total_cost": total_cost,
        "total_seats": total_seats,
        "request_count": request_count,
    }
    if message is not None:
        payload["message"] = message
    if extra:
        payload.update(extra)

    # Drop None values to keep the log compact.
    compact_payload = {k: v for k, v in payload.items() if v is not None}
    try:
        _audit_logger.log(level, json.dumps(compact_payload, ensure_ascii=True))
    except Exception as exc:
        raise RuntimeError("failed to emit audit log") from exc
