"""Base model configuration for all data structures."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable model that ignores unknown keys.

    Input values are kept out of validation error messages so a rejected
    credentials file never echoes its token.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", hide_input_in_errors=True)
