"""Modelo tipado do payload de webhook do Alertmanager.

Formato: https://prometheus.io/docs/alerting/latest/configuration/#webhook_config

Apenas os campos usados pelo relay são modelados; chaves extras
(``receiver``, ``groupKey``, ``startsAt``...) são ignoradas.
"""
import json
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError

from .exceptions import PayloadValidationError


class AlertStatus(str, Enum):
    FIRING = "firing"
    RESOLVED = "resolved"

    @property
    def display(self) -> str:
        # "Firing" / "Resolved" nos títulos e campos
        return self.value.capitalize()


class Annotations(BaseModel):
    model_config = ConfigDict(frozen=True)

    summary: StrictStr
    description: Optional[StrictStr] = None


class Alert(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: AlertStatus
    labels: Dict[StrictStr, StrictStr]
    annotations: Optional[Annotations] = None
    fingerprint: StrictStr


class AlertGroup(BaseModel):
    # só aceita os nomes camelCase do Alertmanager
    model_config = ConfigDict(frozen=True)

    version: StrictStr
    status: AlertStatus
    alerts: List[Alert]
    group_labels: Dict[StrictStr, StrictStr] = Field(alias="groupLabels")
    common_labels: Dict[StrictStr, StrictStr] = Field(alias="commonLabels")
    common_annotations: Optional[Annotations] = Field(alias="commonAnnotations", default=None)
    truncated_alerts: StrictInt = Field(alias="truncatedAlerts")

    @classmethod
    def parse(cls, document: Any) -> "AlertGroup":
        try:
            return cls.model_validate(document)
        except ValidationError as exc:
            raise PayloadValidationError(_summarize(exc)) from exc


def parse_alert_group(document: Union[bytes, str, Dict[str, Any]]) -> AlertGroup:
    """Converte o corpo (bytes/str JSON ou dict já decodificado) em AlertGroup.

    Qualquer erro de JSON ou de schema vira PayloadValidationError; nunca
    retorna um grupo parcial.
    """
    if isinstance(document, (bytes, str)):
        try:
            document = json.loads(document)
        except (ValueError, RecursionError) as exc:
            raise PayloadValidationError(f"invalid JSON body: {exc}") from exc
    return AlertGroup.parse(document)


def _summarize(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or str(exc)
