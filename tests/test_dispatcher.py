"""Tests for routing requests to skill handlers."""

import asyncio
from unittest.mock import MagicMock

from alexa_skill_kit.models import Directive, IntentRequest, LaunchRequest, OutgoingResponse
from alexa_skill_kit.services.dispatcher import handle_request
from alexa_skill_kit.services.pipeline import decode_request, encode_response
from alexa_skill_kit.skill import Skill

from .factories import build_envelope, intent_request


def _dispatch(skill: Skill, request: dict) -> OutgoingResponse:
    return asyncio.run(handle_request(decode_request(build_envelope(request)), skill))


def test_intent_invokes_only_matching_handler() -> None:
    """Test HelloWorldIntent calls exactly its own handler."""
    hello = MagicMock(return_value=None)
    goodbye = MagicMock(return_value=None)
    fallback = MagicMock(return_value=None)
    skill = Skill(intents={"HelloWorldIntent": hello, "GoodbyeIntent": goodbye}, on_intent=fallback)

    outgoing = _dispatch(skill, intent_request("HelloWorldIntent"))

    hello.assert_called_once()
    goodbye.assert_not_called()
    fallback.assert_not_called()
    envelope, request, response = hello.call_args.args
    assert isinstance(request, IntentRequest)
    assert request is envelope.request
    assert response is outgoing


def test_unregistered_intent_yields_empty_response() -> None:
    """Test an unknown intent runs no handler and returns an empty response."""
    hello = MagicMock(return_value=None)
    launch = MagicMock(return_value=None)
    skill = Skill(intents={"HelloWorldIntent": hello}, on_launch=launch)

    outgoing = _dispatch(skill, intent_request("UnknownIntent"))

    hello.assert_not_called()
    launch.assert_not_called()
    assert outgoing.response.outputSpeech is None
    assert outgoing.response.card is None
    assert not outgoing.response.directives
    assert encode_response(outgoing)["response"] == {}


def test_unregistered_intent_falls_back_to_on_intent() -> None:
    """Test on_intent receives intents without a dedicated handler."""
    fallback = MagicMock(return_value=None)
    skill = Skill(on_intent=fallback)

    _dispatch(skill, intent_request("AnythingIntent"))

    fallback.assert_called_once()
    assert fallback.call_args.args[1].intent.name == "AnythingIntent"


def test_launch_request_invokes_on_launch() -> None:
    launch = MagicMock(return_value=None)
    skill = Skill(on_launch=launch)

    _dispatch(skill, {"type": "LaunchRequest"})

    launch.assert_called_once()
    assert isinstance(launch.call_args.args[1], LaunchRequest)


def test_session_ended_and_game_engine_requests() -> None:
    """Test each request type reaches its own handler."""
    ended = MagicMock(return_value=None)
    game = MagicMock(return_value=None)
    skill = Skill(on_session_ended=ended, on_game_engine_input_handler_event=game)

    _dispatch(skill, {"type": "SessionEndedRequest", "reason": "USER_INITIATED"})
    _dispatch(
        skill,
        {"type": "GameEngine.InputHandlerEvent", "originatingRequestId": "r0", "events": []},
    )

    ended.assert_called_once()
    game.assert_called_once()


def test_missing_type_handler_yields_empty_response() -> None:
    """Test request types without a handler produce an empty response."""
    skill = Skill()

    for request in (
        {"type": "LaunchRequest"},
        {"type": "SessionEndedRequest"},
        {"type": "Alexa.Presentation.APL.UserEvent"},
    ):
        assert encode_response(_dispatch(skill, request))["response"] == {}


def test_async_handler_is_awaited() -> None:
    """Test coroutine handlers are awaited."""
    skill = Skill()

    @skill.intent("HelloWorldIntent")
    async def hello(envelope, request, outgoing):
        await asyncio.sleep(0)
        outgoing.response.set_output_speech("Hello from async")

    outgoing = _dispatch(skill, intent_request("HelloWorldIntent"))

    assert outgoing.response.outputSpeech.text == "Hello from async"


def test_each_request_gets_a_fresh_response() -> None:
    """Test nothing carries over between requests."""
    skill = Skill()

    @skill.intent("AddIntent")
    def add(envelope, request, outgoing):
        outgoing.response.add_directive(Directive(type="Dialog.Delegate"))
        outgoing.sessionAttributes["count"] = 1

    first = _dispatch(skill, intent_request("AddIntent"))
    second = _dispatch(skill, intent_request("AddIntent"))

    assert first is not second
    assert len(second.response.directives) == 1
    assert second.sessionAttributes == {"count": 1}


def test_decorators_register_handlers() -> None:
    """Test registration decorators fill in the skill record."""
    skill = Skill()

    @skill.launch
    def launch(envelope, request, outgoing):
        pass

    @skill.session_ended
    def ended(envelope, request, outgoing):
        pass

    @skill.game_engine_input_handler_event
    def game(envelope, request, outgoing):
        pass

    @skill.intent("AMAZON.StopIntent", "AMAZON.CancelIntent")
    def stop(envelope, request, outgoing):
        pass

    assert skill.on_launch is launch
    assert skill.on_session_ended is ended
    assert skill.on_game_engine_input_handler_event is game
    assert skill.intents == {"AMAZON.StopIntent": stop, "AMAZON.CancelIntent": stop}
