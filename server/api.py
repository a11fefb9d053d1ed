"""FastAPI server exposing the outfit judge and aunty chat."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import FastAPI, HTTPException

from aunty_app.app import OmanaAuntyApp
from logic.safety import SENSITIVE_ATTRIBUTES_NOTE
from logic.validation import (
    ChatMessageRequest,
    ChatSessionRequest,
    DetectRequest,
    JudgeRequest,
    JudgeResponse,
)
from tools.vision import detect_outfit, detect_outfit_items


def create_app(aunty_app: OmanaAuntyApp | None = None) -> FastAPI:
    """Build the API around an :class:`OmanaAuntyApp`, creating one from env if needed."""

    aunty = aunty_app or OmanaAuntyApp()
    api = FastAPI(title="Omana Aunty", version="0.1.0")
    api.state.aunty = aunty

    @api.get("/healthz")
    async def healthcheck() -> dict:
        """Lightweight readiness probe."""

        return {
            "status": "ok",
            "service": "omana-aunty",
            "environment": aunty.config.environment or "local",
            "model": aunty.config.model,
        }

    @api.post("/outfit/detect")
    async def detect(request: DetectRequest) -> Dict[str, Any]:
        """Structured clothing slots inferred from the image identifier."""

        detected = await detect_outfit(request.image_uri)
        return {**detected.to_dict(), "note": SENSITIVE_ATTRIBUTES_NOTE}

    @api.post("/outfit/items")
    async def items(request: DetectRequest) -> Dict[str, Any]:
        detection = await detect_outfit_items(request.image_uri)
        return detection.to_dict()

    @api.post("/outfit/judge", response_model=JudgeResponse)
    def judge(request: JudgeRequest) -> Dict[str, Any]:
        response = aunty.judge_outfit(request.image_uri, address_as=request.address_as)
        if response.get("status") != "ok":
            raise HTTPException(status_code=502, detail=response.get("roast", "outfit judge failed"))
        return response

    @api.post("/chat/sessions")
    def create_session(request: ChatSessionRequest) -> dict:
        session_id = aunty.start_chat(request.user_id)
        greeting = aunty.chat_agent.history(session_id)[0]["content"]
        return {"session_id": session_id, "greeting": greeting}

    @api.post("/chat/{session_id}/messages")
    def send_message(session_id: str, request: ChatMessageRequest) -> dict:
        if not aunty.session_manager.session_exists(session_id):
            raise HTTPException(status_code=404, detail=f"Unknown session {session_id}")
        # A failed model call still yields an in-character reply with status "error".
        return aunty.chat(session_id, request.message)

    return api


def get_app() -> FastAPI:
    """Expose a FastAPI instance for ASGI servers (``uvicorn server.api:get_app --factory``)."""

    return create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:get_app", factory=True, host="0.0.0.0", port=8080, reload=False)
