"""Alexa response envelope and response builder."""

from typing import Any, Literal

from pydantic import BaseModel, Field, SerializeAsAny

from .directive import Directive
from .game_engine import GameEngineStartInputDirective, GameEngineStopInputHandlerDirective


class OutputSpeech(BaseModel):
    """Alexa speech output."""

    type: Literal["PlainText", "SSML"] = "PlainText"
    text: str | None = None
    ssml: str | None = None


class Reprompt(BaseModel):
    """Speech used when the user does not answer."""

    outputSpeech: OutputSpeech


class Image(BaseModel):
    smallImageUrl: str | None = None
    largeImageUrl: str | None = None


class Card(BaseModel):
    """Alexa card for visual display."""

    type: Literal["Simple", "Standard", "LinkAccount"] = "Simple"
    title: str | None = None
    content: str | None = None
    text: str | None = None
    image: Image | None = None


class Response(BaseModel):
    """Response body, filled in by the skill's handlers.

    Singular fields (speech, reprompt, card) are overwritten by later calls.
    Directives are kept in the order they were added.
    """

    outputSpeech: OutputSpeech | None = None
    card: Card | None = None
    reprompt: Reprompt | None = None
    directives: list[SerializeAsAny[Directive]] | None = None
    shouldEndSession: bool | None = None

    def set_output_speech(self, text: str) -> None:
        self.outputSpeech = OutputSpeech(type="PlainText", text=text)

    def set_output_ssml(self, ssml: str) -> None:
        self.outputSpeech = OutputSpeech(type="SSML", ssml=ssml)

    def set_reprompt(self, text: str) -> None:
        """Set the reprompt. Only spoken when the session stays open."""
        self.reprompt = Reprompt(outputSpeech=OutputSpeech(type="PlainText", text=text))

    def simple_card(self, title: str, content: str) -> None:
        self.card = Card(type="Simple", title=title, content=content)

    def standard_card(
        self,
        title: str,
        text: str,
        small_image_url: str | None = None,
        large_image_url: str | None = None,
    ) -> None:
        image = None
        if small_image_url or large_image_url:
            image = Image(smallImageUrl=small_image_url, largeImageUrl=large_image_url)
        self.card = Card(type="Standard", title=title, text=text, image=image)

    def set_should_end_session(self, should_end: bool) -> None:
        self.shouldEndSession = should_end

    def add_directive(self, directive: Directive) -> Directive:
        """Append a directive; the platform executes directives in order."""
        if self.directives is None:
            self.directives = []
        self.directives.append(directive)
        return directive

    def add_game_engine_start_input_directive(self, timeout: int) -> GameEngineStartInputDirective:
        """Add a StartInputHandler directive and return it for further setup."""
        directive = GameEngineStartInputDirective(timeout=timeout)
        self.add_directive(directive)
        return directive

    def add_game_engine_stop_input_handler_directive(
        self, originating_request_id: str
    ) -> GameEngineStopInputHandlerDirective:
        directive = GameEngineStopInputHandlerDirective(
            originatingRequestId=originating_request_id
        )
        self.add_directive(directive)
        return directive


class OutgoingResponse(BaseModel):
    """Full Alexa response envelope."""

    version: str = "1.0"
    sessionAttributes: dict[str, Any] = Field(default_factory=dict)
    response: Response = Field(default_factory=Response)
