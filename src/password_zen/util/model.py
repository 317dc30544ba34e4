import pydantic
import pydantic_core

__all__ = ("convert_errors", "format_errors")


CUSTOM_TYPES = {
    "dict_type": "mapping_type",
    "model_type": "mapping_type",
    "model_attributes_type": "mapping_type",
    "extra_forbidden": "extra_field",
    "unexpected_keyword_argument": "extra_field",
}
CUSTOM_MESSAGES = {
    # https://docs.pydantic.dev/latest/errors/validation_errors/
    "extra_field": "Extra fields not allowed",
    "missing": "Field is required",
    "mapping_type": "Input should be a valid YAML mapping",
    "greater_than_equal": "Input must be greater than or equal to {ge}",
    "less_than_equal": "Input must be less than or equal to {le}",
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

        # the raw input may hold a password, never echo it back
        error.pop("input", None)  # type: ignore[misc]

        new_errors.append(error)

    return new_errors


def format_errors(errors: list[pydantic_core.ErrorDetails]) -> str:
    return "\n".join(
        "  * %s: %s"
        % (".".join(str(part) for part in err["loc"]) or "<root>", err["msg"])
        for err in errors
    )
