"""Hello World skill.

Run locally with ``uvicorn alexa_skill_kit.examples.helloworld:app`` or deploy
``handler`` as a Lambda function. Set ``ALEXA_SKILL_APPLICATION_ID`` to the
skill id from the developer console.
"""

import logging
from dataclasses import replace

from ..config import settings
from ..lambda_handler import get_lambda_skill_handler
from ..main import create_app
from ..models.request import IntentRequest, LaunchRequest, RequestEnvelope, SessionEndedRequest
from ..models.response import OutgoingResponse
from ..skill import Skill

# Configure logging
logging.basicConfig(
    level=logging.INFO if not settings.debug else logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

CARD_TITLE = "HelloWorld"


def launch_request_handler(
    envelope: RequestEnvelope, request: LaunchRequest, outgoing: OutgoingResponse
) -> None:
    speech_text = "Welcome to the Alexa Skills Kit, you can say hello"
    outgoing.response.set_output_speech(speech_text)
    outgoing.response.set_reprompt(speech_text)
    outgoing.response.simple_card(CARD_TITLE, speech_text)
    outgoing.response.set_should_end_session(False)


def hello_world_intent_handler(
    envelope: RequestEnvelope, request: IntentRequest, outgoing: OutgoingResponse
) -> None:
    speech_text = "Hello world"
    outgoing.response.set_output_speech(speech_text)
    outgoing.response.simple_card(CARD_TITLE, speech_text)
    outgoing.response.set_should_end_session(True)


def help_intent_handler(
    envelope: RequestEnvelope, request: IntentRequest, outgoing: OutgoingResponse
) -> None:
    speech_text = "You can say hello to me!"
    outgoing.response.set_output_speech(speech_text)
    outgoing.response.set_reprompt(speech_text)
    outgoing.response.simple_card(CARD_TITLE, speech_text)
    outgoing.response.set_should_end_session(False)


def cancel_and_stop_intent_handler(
    envelope: RequestEnvelope, request: IntentRequest, outgoing: OutgoingResponse
) -> None:
    speech_text = "Goodbye"
    outgoing.response.set_output_speech(speech_text)
    outgoing.response.simple_card(CARD_TITLE, speech_text)
    outgoing.response.set_should_end_session(True)


def session_ended_request_handler(
    envelope: RequestEnvelope, request: SessionEndedRequest, outgoing: OutgoingResponse
) -> None:
    # Alexa ignores any response to SessionEndedRequest
    logger.info(f"Session ended: {request.reason}")


def build_skill(**overrides) -> Skill:
    """Create the Hello World skill from settings, optionally overriding Skill fields."""
    skill = Skill.from_settings(
        settings,
        on_launch=launch_request_handler,
        on_session_ended=session_ended_request_handler,
    )
    if overrides:
        skill = replace(skill, **overrides)

    skill.intents["HelloWorldIntent"] = hello_world_intent_handler
    skill.intents["AMAZON.HelpIntent"] = help_intent_handler
    skill.intent("AMAZON.StopIntent", "AMAZON.CancelIntent")(cancel_and_stop_intent_handler)
    return skill


skill = build_skill()
app = create_app(skill, path="/echo/api/helloworld")
handler = get_lambda_skill_handler(skill)
