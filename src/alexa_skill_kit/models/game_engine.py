"""GameEngine (Echo Buttons) directives, recognizers and input events."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from .directive import Directive

START_INPUT_HANDLER = "GameEngine.StartInputHandler"
STOP_INPUT_HANDLER = "GameEngine.StopInputHandler"


class GameEnginePattern(BaseModel):
    """One step of a pattern recognizer; all steps must occur in order."""

    gadgetIds: list[str] | None = None
    colors: list[str] | None = None
    action: str | None = None


class GameEnginePatternRecognizer(BaseModel):
    """True when all of the specified events have occurred in the specified order."""

    type: Literal["match"] = "match"
    anchor: Literal["start", "end", "anywhere"] | None = None
    fuzzy: bool = False
    gadgetIds: list[str] | None = None
    actions: list[str] | None = None
    pattern: list[GameEnginePattern] = Field(default_factory=list)

    def add_pattern(
        self,
        gadget_ids: list[str] | None = None,
        colors: list[str] | None = None,
        action: str | None = None,
    ) -> GameEnginePattern:
        """Append a pattern step to this recognizer."""
        step = GameEnginePattern(gadgetIds=gadget_ids, colors=colors, action=action)
        self.pattern.append(step)
        return step


class GameEngineDeviationRecognizer(BaseModel):
    """True when the referenced recognizer reports the player deviated from its pattern."""

    type: Literal["deviation"] = "deviation"
    recognizer: str


class GameEngineProgressRecognizer(BaseModel):
    """True when the referenced recognizer's completion is above a threshold (percent)."""

    type: Literal["progress"] = "progress"
    recognizer: str
    completion: int


GameEngineRecognizer = Annotated[
    Union[
        GameEnginePatternRecognizer,
        GameEngineDeviationRecognizer,
        GameEngineProgressRecognizer,
    ],
    Field(discriminator="type"),
]


class GameEngineRegistrationEvent(BaseModel):
    """Conditions under which the skill is notified of button input."""

    meets: list[str]
    fails: list[str] | None = None
    reports: Literal["history", "matches", "nothing"] | None = None
    shouldEndInputHandler: bool = False
    maximumInvocations: int | None = None
    triggerTimeMilliseconds: int | None = None


class GameEngineStartInputDirective(Directive):
    """Start listening for Echo Button input.

    The platform rejects the directive unless at least one event is
    registered. Recognizer names referenced by events and by deviation or
    progress recognizers are not checked here.
    """

    type: str = START_INPUT_HANDLER
    timeout: int
    maximumHistoryLength: int | None = None
    proxies: list[str] | None = None
    recognizers: dict[str, GameEngineRecognizer] = Field(default_factory=dict)
    events: dict[str, GameEngineRegistrationEvent] = Field(default_factory=dict)

    def add_pattern_recognizer(self, name: str) -> GameEnginePatternRecognizer:
        recognizer = GameEnginePatternRecognizer()
        self.recognizers[name] = recognizer
        return recognizer

    def add_deviation_recognizer(
        self, name: str, recognizer_name: str
    ) -> GameEngineDeviationRecognizer:
        recognizer = GameEngineDeviationRecognizer(recognizer=recognizer_name)
        self.recognizers[name] = recognizer
        return recognizer

    def add_progress_recognizer(
        self, name: str, recognizer_name: str, completion: int
    ) -> GameEngineProgressRecognizer:
        recognizer = GameEngineProgressRecognizer(
            recognizer=recognizer_name, completion=completion
        )
        self.recognizers[name] = recognizer
        return recognizer

    def add_event(
        self,
        name: str,
        should_end_input_handler: bool,
        meets: list[str],
        fails: list[str] | None = None,
        reports: str | None = None,
    ) -> GameEngineRegistrationEvent:
        """Register an event that fires once all ``meets`` recognizers are true."""
        event = GameEngineRegistrationEvent(
            meets=meets,
            fails=fails,
            reports=reports,
            shouldEndInputHandler=should_end_input_handler,
        )
        self.events[name] = event
        return event


class GameEngineStopInputHandlerDirective(Directive):
    """Stop Echo Button events from being sent to the skill."""

    type: str = STOP_INPUT_HANDLER
    originatingRequestId: str


class GameEngineInputEventItem(BaseModel):
    """A single raw button event."""

    gadgetId: str
    timestamp: str
    action: str
    color: str | None = None
    feature: str | None = None


class GameEngineInputEvent(BaseModel):
    """A registered event that became true, with the input that triggered it."""

    name: str
    inputEvents: list[GameEngineInputEventItem] = []
