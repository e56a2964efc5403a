"""AWS Lambda entrypoints."""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from mangum import Mangum

from .main import create_app
from .services.pipeline import process_request
from .skill import Skill

logger = logging.getLogger(__name__)

LambdaHandler = Callable[[dict[str, Any], Any], dict[str, Any]]


def get_lambda_skill_handler(skill: Skill) -> LambdaHandler:
    """
    Handler for a Lambda function invoked directly by Alexa.

    The event is the request envelope itself. Errors are raised to the
    Lambda runtime, which reports them back to Alexa.
    """

    def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
        return asyncio.run(process_request(skill, event))

    return handler


def get_http_lambda_handler(skill: Skill, path: str = "/alexa") -> Mangum:
    """Handler for a Lambda behind API Gateway or a function URL."""
    return Mangum(create_app(skill, path), lifespan="off")
