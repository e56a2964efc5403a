"""Skill configuration record and handler registration."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from .config import Settings
from .models.request import (
    GameEngineInputHandlerEventRequest,
    IntentRequest,
    LaunchRequest,
    RequestEnvelope,
    SessionEndedRequest,
)
from .models.response import OutgoingResponse

# Handlers may be plain functions or coroutine functions.
LaunchHandler = Callable[[RequestEnvelope, LaunchRequest, OutgoingResponse], Awaitable[Any] | None]
IntentHandler = Callable[[RequestEnvelope, IntentRequest, OutgoingResponse], Awaitable[Any] | None]
SessionEndedHandler = Callable[
    [RequestEnvelope, SessionEndedRequest, OutgoingResponse], Awaitable[Any] | None
]
GameEngineInputHandler = Callable[
    [RequestEnvelope, GameEngineInputHandlerEventRequest, OutgoingResponse], Awaitable[Any] | None
]


@dataclass
class Skill:
    """A skill backend: its id, validation options and request handlers.

    Build it once at startup and register handlers either through the
    constructor or with the decorators::

        skill = Skill(application_id="amzn1.ask.skill.123")

        @skill.intent("HelloWorldIntent")
        def hello(envelope, request, outgoing):
            outgoing.response.set_output_speech("Hello world")

    ``intents`` maps an intent name to its handler. ``on_intent`` receives
    any intent without a dedicated handler. Requests without a matching
    handler get an empty response.
    """

    application_id: str = ""
    verbose: bool = False
    skip_validation: bool = False
    verify_signature: bool = False
    timestamp_tolerance: int = 150  # seconds
    cert_fetch_timeout: float = 5.0  # seconds
    on_launch: LaunchHandler | None = None
    on_intent: IntentHandler | None = None
    on_session_ended: SessionEndedHandler | None = None
    on_game_engine_input_handler_event: GameEngineInputHandler | None = None
    intents: dict[str, IntentHandler] = field(default_factory=dict)

    @classmethod
    def from_settings(cls, settings: Settings, **handlers: Any) -> "Skill":
        """Create a skill from environment settings."""
        return cls(
            application_id=settings.application_id,
            verbose=settings.verbose,
            skip_validation=settings.skip_validation,
            verify_signature=settings.verify_signature,
            timestamp_tolerance=settings.timestamp_tolerance_seconds,
            cert_fetch_timeout=settings.cert_fetch_timeout,
            **handlers,
        )

    def intent(self, *names: str) -> Callable[[IntentHandler], IntentHandler]:
        """Register the decorated function for one or more intent names."""

        def decorator(func: IntentHandler) -> IntentHandler:
            for name in names:
                self.intents[name] = func
            return func

        return decorator

    def launch(self, func: LaunchHandler) -> LaunchHandler:
        self.on_launch = func
        return func

    def session_ended(self, func: SessionEndedHandler) -> SessionEndedHandler:
        self.on_session_ended = func
        return func

    def game_engine_input_handler_event(
        self, func: GameEngineInputHandler
    ) -> GameEngineInputHandler:
        self.on_game_engine_input_handler_event = func
        return func
