#!/usr/bin/env python3
import unittest

from relay.embeds import Color
from relay.formatters import partition_by_status, render, resolve_instance
from relay.models import AlertGroup, AlertStatus


def _alert(status="firing", fingerprint="fp", annotations=None, **labels):
    alert = {"status": status, "labels": labels, "fingerprint": fingerprint}
    if annotations is not None:
        alert["annotations"] = annotations
    return alert


def _group(alerts, common_labels=None, common_annotations=None):
    data = {
        "version": "4",
        "status": "firing",
        "alerts": alerts,
        "groupLabels": {},
        "commonLabels": common_labels or {},
        "truncatedAlerts": 0,
    }
    if common_annotations is not None:
        data["commonAnnotations"] = common_annotations
    return AlertGroup.parse(data)


class TestRender(unittest.TestCase):
    def test_empty_group_renders_nothing(self):
        self.assertEqual(render(_group([])), [])

    def test_title_and_color_for_resolved_partition(self):
        group = _group(
            [_alert("resolved", fingerprint=str(i), alertname="DiskFull") for i in range(3)],
            common_labels={"alertname": "DiskFull"},
        )
        envelopes = render(group)
        self.assertEqual(len(envelopes), 1)
        embed = envelopes[0].embeds[0]
        self.assertEqual(embed.title, "[Resolved:3] DiskFull")
        self.assertEqual(embed.color, Color.GREEN)
        self.assertEqual(len(embed.fields), 3)

    def test_mixed_statuses_split_into_firing_then_resolved(self):
        group = _group([
            _alert("resolved", alertname="A", instance="r1"),
            _alert("firing", alertname="A", instance="f1"),
            _alert("resolved", alertname="A", instance="r2"),
            _alert("firing", alertname="A", instance="f2"),
            _alert("firing", alertname="A", instance="f3"),
        ])
        envelopes = render(group)
        self.assertEqual(len(envelopes), 2)

        firing, resolved = envelopes[0].embeds[0], envelopes[1].embeds[0]
        self.assertEqual(firing.title, "[Firing:3] unnamed")
        self.assertEqual(firing.color, Color.RED)
        self.assertEqual(resolved.title, "[Resolved:2] unnamed")
        self.assertEqual(resolved.color, Color.GREEN)

        # ordem original preservada dentro de cada partição
        self.assertEqual([f.name for f in firing.fields], [
            "[Firing]: A on f1", "[Firing]: A on f2", "[Firing]: A on f3",
        ])
        self.assertEqual([f.name for f in resolved.fields], [
            "[Resolved]: A on r1", "[Resolved]: A on r2",
        ])

        total = sum(len(e.embeds[0].fields) for e in envelopes)
        self.assertEqual(total, 5)

    def test_each_envelope_carries_a_single_embed(self):
        group = _group([_alert("firing"), _alert("resolved")])
        for envelope in render(group):
            self.assertEqual(len(envelope.embeds), 1)

    def test_identical_alerts_are_not_deduplicated(self):
        group = _group([_alert(alertname="Same", instance="h"), _alert(alertname="Same", instance="h")])
        fields = render(group)[0].embeds[0].fields
        self.assertEqual(len(fields), 2)
        self.assertEqual(fields[0], fields[1])

    def test_content_and_description_with_common_annotations(self):
        group = _group([_alert()], common_annotations={"summary": "cluster degraded", "description": "ignored"})
        envelope = render(group)[0]
        self.assertEqual(envelope.content, "cluster degraded")
        self.assertEqual(envelope.embeds[0].description, "cluster degraded")

    def test_content_absent_without_common_annotations(self):
        envelope = render(_group([_alert()]))[0]
        self.assertIsNone(envelope.content)
        self.assertEqual(envelope.embeds[0].description, "no summary")

    def test_field_value_uses_severity_job_and_summary(self):
        group = _group([
            _alert(alertname="HighCPU", instance="host-7", severity="critical", job="node",
                   annotations={"summary": "S"}),
        ])
        field = render(group)[0].embeds[0].fields[0]
        self.assertEqual(field.name, "[Firing]: HighCPU on host-7")
        self.assertEqual(field.value, "CRITICAL node S")

    def test_field_value_defaults(self):
        field = render(_group([_alert()]))[0].embeds[0].fields[0]
        self.assertEqual(field.name, "[Firing]: unknown on unknown")
        self.assertEqual(field.value, "INFO - -")

    def test_summary_fallbacks(self):
        group = _group([
            _alert(annotations={"summary": "S"}),
            _alert(annotations={"summary": "S", "description": "D"}),
            _alert(),
        ])
        values = [f.value for f in render(group)[0].embeds[0].fields]
        self.assertTrue(values[0].endswith("S"))
        self.assertTrue(values[1].endswith("D"))
        self.assertTrue(values[2].endswith("-"))

    def test_render_is_deterministic(self):
        group = _group(
            [_alert("firing", alertname="X", instance="a"), _alert("resolved", alertname="X", instance="b")],
            common_labels={"alertname": "X"},
            common_annotations={"summary": "sum"},
        )
        self.assertEqual(render(group), render(group))


class TestResolveInstance(unittest.TestCase):
    def test_localhost_replaced_by_exported_instance(self):
        self.assertEqual(resolve_instance({"instance": "localhost", "exported_instance": "db-1"}), "db-1")

    def test_missing_instance_replaced_by_exported_instance(self):
        self.assertEqual(resolve_instance({"exported_instance": "db-2"}), "db-2")

    def test_real_instance_kept(self):
        self.assertEqual(resolve_instance({"instance": "host-7"}), "host-7")
        self.assertEqual(resolve_instance({"instance": "host-7", "exported_instance": "db-1"}), "host-7")

    def test_placeholder_kept_without_exported_instance(self):
        self.assertEqual(resolve_instance({"instance": "localhost"}), "localhost")
        self.assertEqual(resolve_instance({}), "unknown")

    def test_field_name_contains_exported_instance(self):
        group = _group([_alert(alertname="Down", instance="localhost", exported_instance="db-1")])
        self.assertIn("db-1", render(group)[0].embeds[0].fields[0].name)


class TestPartitionByStatus(unittest.TestCase):
    def test_partitions_cover_all_alerts_once(self):
        group = _group([_alert("firing", fingerprint="1"), _alert("resolved", fingerprint="2"),
                        _alert("firing", fingerprint="3")])
        parts = partition_by_status(group.alerts)
        self.assertEqual(list(parts), [AlertStatus.FIRING, AlertStatus.RESOLVED])
        self.assertEqual([a.fingerprint for a in parts[AlertStatus.FIRING]], ["1", "3"])
        self.assertEqual([a.fingerprint for a in parts[AlertStatus.RESOLVED]], ["2"])

    def test_only_present_statuses_are_returned(self):
        group = _group([_alert("resolved")])
        self.assertEqual(list(partition_by_status(group.alerts)), [AlertStatus.RESOLVED])


if __name__ == '__main__':
    unittest.main()
