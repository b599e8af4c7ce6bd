"""Tests for the keyed-map codec."""

import logging

from cube_entity.codec import keyed_map
from cube_entity.models import HandKeypoint, Point, PoseKeypoint, SpeechEmotion


class TestDecode:
    def test_known_keys(self):
        result = keyed_map.decode({"Wrist": 1, "ThumbTip": 2}, HandKeypoint.parse)
        assert result == {HandKeypoint.Wrist: 1, HandKeypoint.ThumbTip: 2}

    def test_value_parser(self):
        result = keyed_map.decode({"Nose": {"x": 1, "y": 2}}, PoseKeypoint.parse, Point.from_json)
        assert result[PoseKeypoint.Nose] == Point(x=1, y=2)

    def test_unknown_key_is_kept_under_fallback(self):
        result = keyed_map.decode({"Wrist": 1, "elbow": 2}, HandKeypoint.parse)
        assert result == {HandKeypoint.Wrist: 1, HandKeypoint.Unknown: 2}

    def test_unknown_keys_collapse_last_wins(self, caplog):
        with caplog.at_level(logging.WARNING, logger="cube_entity.codec.keyed_map"):
            result = keyed_map.decode({"tail": 1, "wing": 2}, HandKeypoint.parse)
        assert result == {HandKeypoint.Unknown: 2}
        assert "wing" in caplog.text


class TestEncode:
    def test_keys_written_by_symbol(self):
        data = keyed_map.encode({PoseKeypoint.LeftEar: 1, PoseKeypoint.LeftEye: 2})
        assert data == {"left_ear": 1, "LeftEye": 2}

    def test_value_dumper(self):
        data = keyed_map.encode({PoseKeypoint.Nose: Point(x=1, y=2)}, Point.to_json)
        assert data == {"Nose": {"x": 1.0, "y": 2.0}}


class TestRoundTrip:
    def test_known_keys_preserved(self):
        document = {"Happy": 3, "Sad": 1, "Neutral": 0}
        decoded = keyed_map.decode(document, SpeechEmotion.parse)
        assert keyed_map.encode(decoded) == document

    def test_map_round_trip(self):
        mapping = {PoseKeypoint.RightHip: 4, PoseKeypoint.Nose: 7}
        assert keyed_map.decode(keyed_map.encode(mapping), PoseKeypoint.parse) == mapping

    def test_unknown_keys_not_preserved(self):
        document = {"Wrist": 1, "tail": 2, "wing": 3}
        encoded = keyed_map.encode(keyed_map.decode(document, HandKeypoint.parse))
        assert set(encoded) == {"Wrist", "Unknown"}
