"""Shared fixtures and host records for optional value tests."""

from collections.abc import Iterator

import pytest
from loguru import logger
from pydantic import BaseModel, Field

from optional_value import OptionalValue, OptionalValueConfig

STRING_VAL = "an example string"
ELSE_STRING = "something else"
DEFAULT_STRING = ""


class User(BaseModel):
    """Host record with a plain field next to an optional one."""

    Name: str
    Email: OptionalValue[str] = Field(default_factory=OptionalValue[str])


class Address(BaseModel):
    city: str
    postcode: str | None = None


class Customer(BaseModel):
    """Host record with structured optional fields."""

    id: int
    address: OptionalValue[Address] = Field(default_factory=OptionalValue[Address])
    tags: OptionalValue[list[str]] = Field(default_factory=OptionalValue[list[str]])


@pytest.fixture
def log_messages() -> Iterator[list[str]]:
    """Enable package logging and collect emitted messages."""
    messages: list[str] = []
    logger.enable(OptionalValueConfig.LOGGER_NAME)
    handler_id = logger.add(messages.append, level="TRACE", format="{message}")
    try:
        yield messages
    finally:
        logger.remove(handler_id)
        logger.disable(OptionalValueConfig.LOGGER_NAME)
