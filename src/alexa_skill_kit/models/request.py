"""Alexa request envelope models."""

from datetime import datetime
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag

from .game_engine import GameEngineInputEvent

LAUNCH_REQUEST = "LaunchRequest"
INTENT_REQUEST = "IntentRequest"
SESSION_ENDED_REQUEST = "SessionEndedRequest"
GAME_ENGINE_INPUT_HANDLER_EVENT = "GameEngine.InputHandlerEvent"


class Application(BaseModel):
    """Skill the request is addressed to."""

    applicationId: str


class User(BaseModel):
    """Alexa account user."""

    userId: str
    accessToken: str | None = None


class Device(BaseModel):
    """Device the request originated from."""

    deviceId: str | None = None
    supportedInterfaces: dict[str, Any] = {}


class Session(BaseModel):
    """Alexa session information."""

    new: bool = False
    sessionId: str
    application: Application | None = None
    attributes: dict[str, Any] = {}
    user: User | None = None


class SystemContext(BaseModel):
    """The ``context.System`` object."""

    application: Application | None = None
    user: User | None = None
    device: Device | None = None
    apiEndpoint: str | None = None
    apiAccessToken: str | None = None


class Context(BaseModel):
    """Device and platform state sent with every request."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    system: SystemContext | None = Field(None, alias="System")


class Slot(BaseModel):
    """Alexa slot value."""

    name: str
    value: str | None = None
    confirmationStatus: str | None = None


class Intent(BaseModel):
    """Alexa intent with slots."""

    name: str
    confirmationStatus: str | None = None
    slots: dict[str, Slot] = {}

    def slot_value(self, name: str) -> str | None:
        """Return the value of a slot, or None if it is missing or unfilled."""
        slot = self.slots.get(name)
        return slot.value if slot else None


class BaseRequest(BaseModel):
    """Fields shared by every request type."""

    type: str
    requestId: str = ""
    timestamp: datetime | None = None
    locale: str | None = None


class LaunchRequest(BaseRequest):
    """User opened the skill without a specific intent."""

    type: Literal["LaunchRequest"] = LAUNCH_REQUEST


class IntentRequest(BaseRequest):
    """User spoke an utterance mapped to one of the skill's intents."""

    type: Literal["IntentRequest"] = INTENT_REQUEST
    dialogState: str | None = None
    intent: Intent


class SessionEndedError(BaseModel):
    type: str
    message: str | None = None


class SessionEndedRequest(BaseRequest):
    """Session ended for a reason other than the skill closing it."""

    type: Literal["SessionEndedRequest"] = SESSION_ENDED_REQUEST
    reason: str | None = None
    error: SessionEndedError | None = None


class GameEngineInputHandlerEventRequest(BaseRequest):
    """Sent by the GameEngine to notify the skill about Echo Button events."""

    type: Literal["GameEngine.InputHandlerEvent"] = GAME_ENGINE_INPUT_HANDLER_EVENT
    originatingRequestId: str
    events: list[GameEngineInputEvent] = []


class UnknownRequest(BaseRequest):
    """Any request type the SDK does not model. Extra fields are kept."""

    model_config = ConfigDict(extra="allow")


_KNOWN_REQUEST_TYPES = {
    LAUNCH_REQUEST,
    INTENT_REQUEST,
    SESSION_ENDED_REQUEST,
    GAME_ENGINE_INPUT_HANDLER_EVENT,
}


def _request_tag(value: Any) -> str:
    if isinstance(value, dict):
        request_type = value.get("type")
    else:
        request_type = getattr(value, "type", None)
    return request_type if request_type in _KNOWN_REQUEST_TYPES else "unknown"


AnyRequest = Annotated[
    Union[
        Annotated[LaunchRequest, Tag(LAUNCH_REQUEST)],
        Annotated[IntentRequest, Tag(INTENT_REQUEST)],
        Annotated[SessionEndedRequest, Tag(SESSION_ENDED_REQUEST)],
        Annotated[GameEngineInputHandlerEventRequest, Tag(GAME_ENGINE_INPUT_HANDLER_EVENT)],
        Annotated[UnknownRequest, Tag("unknown")],
    ],
    Discriminator(_request_tag),
]


class RequestEnvelope(BaseModel):
    """Full Alexa request envelope."""

    version: str = "1.0"
    session: Session | None = None
    context: Context | None = None
    request: AnyRequest

    @property
    def application_id(self) -> str | None:
        """Declared skill id, read from ``context.System`` then from the session."""
        if self.context and self.context.system and self.context.system.application:
            return self.context.system.application.applicationId
        if self.session and self.session.application:
            return self.session.application.applicationId
        return None
