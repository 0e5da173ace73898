"""Career assistant chat endpoint."""
from fastapi import APIRouter

from youthconnect.schemas.chat import ChatRequest, ChatReply
from youthconnect.services.chat import GREETING, reply_to

router = APIRouter()


@router.get("/greeting", response_model=ChatReply)
async def greeting():
    return ChatReply(reply=GREETING)


@router.post("/", response_model=ChatReply)
async def send_message(chat_request: ChatRequest):
    """Reply to a chat message."""
    return ChatReply(reply=reply_to(chat_request.message))
