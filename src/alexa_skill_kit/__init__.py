"""Build Alexa custom skill backends with FastAPI and pydantic."""

from .exceptions import (
    AuthenticationError,
    DecodeError,
    EncodeError,
    SignatureError,
    SkillError,
    StaleRequestError,
)
from .lambda_handler import get_http_lambda_handler, get_lambda_skill_handler
from .main import create_app
from .models import (
    Directive,
    IntentRequest,
    LaunchRequest,
    OutgoingResponse,
    RequestEnvelope,
    Response,
    SessionEndedRequest,
)
from .skill import Skill

__all__ = [
    "Skill",
    "create_app",
    "get_lambda_skill_handler",
    "get_http_lambda_handler",
    "RequestEnvelope",
    "LaunchRequest",
    "IntentRequest",
    "SessionEndedRequest",
    "OutgoingResponse",
    "Response",
    "Directive",
    "SkillError",
    "DecodeError",
    "AuthenticationError",
    "SignatureError",
    "StaleRequestError",
    "EncodeError",
]
