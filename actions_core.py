"""
Minimal GitHub Actions host bindings.

GitHub Actions hands inputs to a step as ``INPUT_<NAME>`` environment
variables, collects outputs from the file named by ``GITHUB_OUTPUT`` and
reads workflow commands (``::error::...``) from stdout.
"""

import logging
import os
import uuid

logger = logging.getLogger("colabra-comment-action")


class InputError(ValueError):
    """A required action input was not supplied."""


def _input_env_name(name: str) -> str:
    return "INPUT_" + name.replace(" ", "_").upper()


def get_input(name: str, required: bool = False, trim_whitespace: bool = True) -> str:
    """Return the value of an action input, or ``""`` when it is unset."""
    value = os.environ.get(_input_env_name(name), "")

    if required and not value:
        raise InputError(f"Input required and not supplied: {name}")

    return value.strip() if trim_whitespace else value


def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(value: str) -> str:
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


def set_output(name: str, value: str) -> None:
    output_path = os.environ.get("GITHUB_OUTPUT", "")

    if not output_path:
        # Runners without GITHUB_OUTPUT only understand the legacy command
        print(f"::set-output name={_escape_property(name)}::{escape_data(value)}")
        return

    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in name or delimiter in value:
        raise ValueError(f"Unexpected input: output {name!r} contains the delimiter")

    with open(output_path, "a", encoding="utf-8") as fh:
        fh.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")


def is_debug() -> bool:
    return (
        os.environ.get("RUNNER_DEBUG") == "1"
        or os.environ.get("ACTIONS_STEP_DEBUG", "").lower() == "true"
    )


def debug(message: str) -> None:
    logger.debug(message)


def info(message: str) -> None:
    logger.info(message)


def set_failed(message: str) -> None:
    """Mark the step as failed; the caller is responsible for the exit code."""
    logger.debug("Step failed: %s", message)
    print(f"::error::{escape_data(message)}")
