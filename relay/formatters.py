from typing import Dict, List

from .constants import (
    DEFAULT_GROUP_NAME,
    DEFAULT_GROUP_SUMMARY,
    DEFAULT_LABEL_VALUE,
    DEFAULT_SEVERITY,
    EMPTY_PLACEHOLDER,
    PLACEHOLDER_INSTANCES,
)
from .embeds import Color, DiscordContent, Embed, EmbedField
from .models import Alert, AlertGroup, AlertStatus

# Ordem fixa de emissão: firing antes de resolved
STATUS_ORDER = (AlertStatus.FIRING, AlertStatus.RESOLVED)

STATUS_COLORS = {
    AlertStatus.FIRING: Color.RED,
    AlertStatus.RESOLVED: Color.GREEN,
}


def color_for_status(status: AlertStatus) -> Color:
    return STATUS_COLORS[status]


def partition_by_status(alerts: List[Alert]) -> Dict[AlertStatus, List[Alert]]:
    """Agrupa os alertas por status mantendo a ordem original dentro de cada grupo.

    Só aparecem no resultado os status presentes, na ordem de STATUS_ORDER.
    """
    buckets: Dict[AlertStatus, List[Alert]] = {status: [] for status in STATUS_ORDER}
    for alert in alerts:
        buckets[alert.status].append(alert)
    return {status: items for status, items in buckets.items() if items}


def resolve_instance(labels: Dict[str, str]) -> str:
    instance = labels.get('instance', DEFAULT_LABEL_VALUE)
    exported = labels.get('exported_instance')
    # scrape via pushgateway/federação: a instância real vem em exported_instance
    if instance in PLACEHOLDER_INSTANCES and exported is not None:
        return exported
    return instance


def alert_summary_text(alert: Alert) -> str:
    if alert.annotations is None:
        return EMPTY_PLACEHOLDER
    if alert.annotations.description is not None:
        return alert.annotations.description
    return alert.annotations.summary


def render_field(status: AlertStatus, alert: Alert) -> EmbedField:
    labels = alert.labels
    alertname = labels.get('alertname', DEFAULT_LABEL_VALUE)
    name = f"[{status.display}]: {alertname} on {resolve_instance(labels)}"

    severity = labels['severity'].upper() if 'severity' in labels else DEFAULT_SEVERITY
    job = labels.get('job', EMPTY_PLACEHOLDER)
    value = f"{severity} {job} {alert_summary_text(alert)}"
    return EmbedField(name=name, value=value)


def build_title(status: AlertStatus, count: int, alert_name: str) -> str:
    return f"[{status.display}:{count}] {alert_name}"


def render(group: AlertGroup) -> List[DiscordContent]:
    """Transforma um AlertGroup em um envelope do Discord por status presente.

    Função pura: sem I/O, mesma entrada gera sempre a mesma saída. Grupo sem
    alertas gera lista vazia (nada é enviado).
    """
    alert_name = group.common_labels.get('alertname', DEFAULT_GROUP_NAME)
    has_summary = group.common_annotations is not None
    alert_summary = group.common_annotations.summary if has_summary else DEFAULT_GROUP_SUMMARY
    content = alert_summary if has_summary else None

    envelopes = []
    for status, alerts in partition_by_status(group.alerts).items():
        embed = Embed(
            title=build_title(status, len(alerts), alert_name),
            description=alert_summary,
            color=color_for_status(status),
            fields=[render_field(status, alert) for alert in alerts],
        )
        # sempre um único embed por envelope
        envelopes.append(DiscordContent(content=content, embeds=[embed]))
    return envelopes
