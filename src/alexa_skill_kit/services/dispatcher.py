"""Route a request to the skill handler registered for it."""

import inspect
import logging

from ..models.request import (
    GameEngineInputHandlerEventRequest,
    IntentRequest,
    LaunchRequest,
    RequestEnvelope,
    SessionEndedRequest,
)
from ..models.response import OutgoingResponse
from ..skill import Skill

logger = logging.getLogger(__name__)


def _select_handler(envelope: RequestEnvelope, skill: Skill):
    request = envelope.request

    if isinstance(request, IntentRequest):
        intent_name = request.intent.name
        logger.info(f"Alexa intent: {intent_name}")
        handler = skill.intents.get(intent_name, skill.on_intent)
        if handler is None:
            logger.warning(f"No handler registered for intent {intent_name}")
        return handler

    if isinstance(request, LaunchRequest):
        handler = skill.on_launch
    elif isinstance(request, SessionEndedRequest):
        handler = skill.on_session_ended
    elif isinstance(request, GameEngineInputHandlerEventRequest):
        handler = skill.on_game_engine_input_handler_event
    else:
        handler = None

    if handler is None:
        logger.warning(f"No handler registered for request type {request.type}")
    return handler


async def handle_request(envelope: RequestEnvelope, skill: Skill) -> OutgoingResponse:
    """
    Invoke the handler matching the request and return the response it built.

    At most one handler runs. Requests without a handler (unknown request
    types, unregistered intents with no ``on_intent`` fallback) produce an
    empty response.

    Args:
        envelope: Validated request envelope
        skill: Skill holding the registered handlers

    Returns:
        A new OutgoingResponse populated by the handler
    """
    logger.info(f"Alexa request type: {envelope.request.type}")

    outgoing = OutgoingResponse()
    handler = _select_handler(envelope, skill)
    if handler is None:
        return outgoing

    result = handler(envelope, envelope.request, outgoing)
    if inspect.isawaitable(result):
        await result

    return outgoing
