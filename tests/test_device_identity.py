"""Tests de extracción del device id."""

import pytest

from shellyplug_exporter.core.adapters import extract_device_id
from shellyplug_exporter.core.domain import MalformedTopic


class TestExtractDeviceId:
    """El device id es el segundo segmento del topic."""

    @pytest.mark.parametrize("topic,expected", [
        ("shellies/shellyplug-s-AAAAAA/relay/0/power", "shellyplug-s-AAAAAA"),
        ("shellies/shellyplug-s-BBBBBB/overtemperature", "shellyplug-s-BBBBBB"),
        ("unrelated/topic/here", "topic"),
        ("a/b", "b"),
        ("a/", ""),
        ("a//b", ""),
    ])
    def test_second_segment(self, topic, expected):
        assert extract_device_id(topic) == expected

    @pytest.mark.parametrize("topic", ["", "shellies", "shellyplug-s-AAAAAA"])
    def test_requires_two_segments(self, topic):
        with pytest.raises(MalformedTopic):
            extract_device_id(topic)

    def test_stable_for_same_device(self):
        topics = [
            "shellies/shellyplug-s-AAAAAA/relay/0/power",
            "shellies/shellyplug-s-AAAAAA/relay/0/energy",
            "shellies/shellyplug-s-AAAAAA/temperature",
        ]

        assert {extract_device_id(t) for t in topics} == {"shellyplug-s-AAAAAA"}
