"""Pydantic models for the Alexa request/response schema."""

from .directive import Directive
from .game_engine import (
    GameEngineDeviationRecognizer,
    GameEngineInputEvent,
    GameEngineInputEventItem,
    GameEnginePattern,
    GameEnginePatternRecognizer,
    GameEngineProgressRecognizer,
    GameEngineRegistrationEvent,
    GameEngineStartInputDirective,
    GameEngineStopInputHandlerDirective,
)
from .request import (
    Application,
    Context,
    GameEngineInputHandlerEventRequest,
    Intent,
    IntentRequest,
    LaunchRequest,
    RequestEnvelope,
    Session,
    SessionEndedRequest,
    Slot,
    UnknownRequest,
)
from .response import Card, OutgoingResponse, OutputSpeech, Reprompt, Response

__all__ = [
    "Application",
    "Context",
    "Session",
    "Slot",
    "Intent",
    "RequestEnvelope",
    "LaunchRequest",
    "IntentRequest",
    "SessionEndedRequest",
    "GameEngineInputHandlerEventRequest",
    "UnknownRequest",
    "OutputSpeech",
    "Reprompt",
    "Card",
    "Response",
    "OutgoingResponse",
    "Directive",
    "GameEngineStartInputDirective",
    "GameEngineStopInputHandlerDirective",
    "GameEnginePatternRecognizer",
    "GameEngineDeviationRecognizer",
    "GameEngineProgressRecognizer",
    "GameEnginePattern",
    "GameEngineRegistrationEvent",
    "GameEngineInputEvent",
    "GameEngineInputEventItem",
]
