"""Base model for response directives."""

from pydantic import BaseModel, ConfigDict


class Directive(BaseModel):
    """A platform directive identified by its ``type``.

    Directives the SDK does not model can be built directly, extra fields are
    passed through untouched::

        Directive(type="Dialog.Delegate", updatedIntent={"name": "OrderIntent"})
    """

    model_config = ConfigDict(extra="allow")

    type: str
