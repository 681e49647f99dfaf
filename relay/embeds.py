"""Mensagens enviadas ao webhook do Discord (content + embeds)."""
from enum import IntEnum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from .constants import COLOR_GREEN, COLOR_GREY, COLOR_RED


class Color(IntEnum):
    RED = COLOR_RED
    GREEN = COLOR_GREEN
    # reservado, o renderizador não seleciona
    GREY = COLOR_GREY


class EmbedField(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: str


class Embed(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    color: Color
    fields: List[EmbedField]


class DiscordContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: Optional[str] = None
    embeds: List[Embed]

    def to_payload(self) -> Dict[str, Any]:
        # content sai como null quando ausente; color como inteiro
        return self.model_dump(mode="json")
