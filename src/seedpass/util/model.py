import pydantic
import pydantic_core

__all__ = ("convert_errors",)


CUSTOM_TYPES = {
    "model_type": "mapping_type",
    "model_attributes_type": "mapping_type",
    "dict_type": "mapping_type",
    "list_type": "sequence_type",
    "tuple_type": "sequence_type",
    "unexpected_keyword_argument": "extra_field",
    "extra_forbidden": "extra_field",
}
CUSTOM_MESSAGES = {
    # https://docs.pydantic.dev/latest/errors/validation_errors/#model_type
    "extra_field": "Extra fields not allowed",
    "missing": "Field is required",
    "mapping_type": "Input should be a valid YAML mapping",
    "sequence_type": "Input should be a valid sequence",
    "too_short": (
        "Sequence should have at least {min_length} item after validation, not "
        "{actual_length}"
    ),
}


def convert_errors(
    ex: pydantic.ValidationError,
    custom_messages: dict[str, str] = CUSTOM_MESSAGES,
    custom_types: dict[str, str] = CUSTOM_TYPES,
) -> list[pydantic_core.ErrorDetails]:
    new_errors: list[pydantic_core.ErrorDetails] = []
    for error in ex.errors(include_url=False):
        ctx = error.get("ctx")

        if custom_type := custom_types.get(error["type"]):
            error["type"] = custom_type
        if custom_message := custom_messages.get(error["type"]):
            error["msg"] = custom_message.format(**ctx) if ctx else custom_message
        if ctx:
            # we don't want to show the context to the user
            del error["ctx"]

        new_errors.append(error)
    return new_errors
