"""Message components: buttons and the result picker."""

from enum import IntEnum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class ButtonStyle(IntEnum):
    PRIMARY = 1
    SECONDARY = 2


class Button(BaseModel):
    type: Literal[2] = 2
    style: ButtonStyle = ButtonStyle.SECONDARY
    label: str
    custom_id: str = Field(max_length=100)
    disabled: bool = False


class SelectOption(BaseModel):
    label: str = Field(max_length=100)
    value: str = Field(max_length=100)
    description: str | None = Field(default=None, max_length=100)


class SelectMenu(BaseModel):
    type: Literal[3] = 3
    custom_id: str = Field(max_length=100)
    placeholder: str | None = None
    options: list[SelectOption] = Field(min_length=1, max_length=25)
    min_values: int = 1
    max_values: int = 1


Component = Annotated[Union[Button, SelectMenu], Field(discriminator="type")]


class ActionRow(BaseModel):
    type: Literal[1] = 1
    components: list[Component] = Field(min_length=1, max_length=5)
