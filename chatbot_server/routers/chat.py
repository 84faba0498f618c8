from fastapi import APIRouter
from loguru import logger

from chatbot_server.bot import MessageExchange
from chatbot_server.errors import UnexpectedError
from chatbot_server.schema import ChatReply, ChatRequest, ErrorResponse


router = APIRouter(prefix="/api", tags=["chat"])


@router.post(
    "/chat",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat(body: ChatRequest) -> ChatReply:
    try:
        exchange = MessageExchange.respond_to(body.message)
    except Exception as e:
        raise UnexpectedError from e
    logger.info(f'Received message: "{exchange.text}", responding with: "{exchange.reply}"')
    return ChatReply(reply=exchange.reply)
