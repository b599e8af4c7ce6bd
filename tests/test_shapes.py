"""Tests for the full and compact serialization shapes."""

import pytest

from cube_entity.errors import MalformedDocument
from cube_entity.models import (
    AnonymousContact,
    BoundingBox,
    ButtonWidget,
    Contact,
    ContactBehavior,
    ContactZone,
    ContactZoneBundle,
    ContactZoneParticipant,
    Device,
    EmotionRatio,
    ExpressionItem,
    FacialExpressionResult,
    FileLabel,
    FileResource,
    Group,
    HandEstimation,
    HandRecognitionResult,
    Hyperlink,
    HyperlinkResource,
    IceServer,
    KnowledgeArticle,
    ListWidget,
    Point,
    PoseEstimation,
    PoseRecognitionResult,
    Shape,
    SpeakerIndicator,
    SpeechRecognitionInfo,
    SpeechRecognitionResult,
    TextWidget,
    VoiceSegment,
    WidgetResource,
)


def _file() -> FileLabel:
    return FileLabel(
        id=11,
        domain="shixincube.com",
        file_code="fc_11",
        owner_id=100,
        file_name="meeting.wav",
        file_size=1048576,
        completed_time=1700000000000,
        file_type="wav",
        sha1="2fd4e1c67a2d28fced849ee1bb76e7391b93eb12",
        file_url="https://cube.example.com/files/meeting.wav",
        direct_url="http://10.0.0.8:7010/meeting.wav",
        context={"album": "2024"},
    )


def _contact() -> Contact:
    return Contact(
        id=100,
        domain="shixincube.com",
        name="alice",
        devices=[Device(name="Web", platform="Chrome/120", address="10.0.0.2", port=7000)],
    )


def _group() -> Group:
    return Group(
        id=500,
        domain="shixincube.com",
        name="Design Team",
        tag="public",
        owner_id=100,
        creation=1700000000000,
        last_active=1700000500000,
        state=0,
        members=[100, 101],
        member_contacts=[_contact()],
    )


def _zone() -> ContactZone:
    return ContactZone(
        id=77,
        domain="shixincube.com",
        owner=100,
        name="contacts",
        participants=[
            ContactZoneParticipant(id=101, timestamp=1700000000000, linked_contact=_contact()),
            ContactZoneParticipant(id=500, type=2, timestamp=1700000000000, linked_contact=_group()),
        ],
    )


def _samples():
    pose = PoseEstimation(
        keypoints={"Nose": Point(x=50, y=40), "left_ear": Point(x=44, y=38)},
        bbox=BoundingBox(x=0, y=0, width=120, height=300),
        confidence=0.9,
    )
    hand = HandEstimation(keypoints={"Wrist": Point(x=1, y=2)}, handedness="Right", confidence=0.8)
    return [
        _file(),
        _contact(),
        AnonymousContact(id=7, name="guest-7"),
        _group(),
        TextWidget(id=31, text="Hello", font_size=14),
        ButtonWidget(id=32, label="OK", action="confirm", payload={"id": 1}),
        ListWidget(id=33, title="Todo", items=["a", "b"]),
        FileResource(id=41, file=_file()),
        WidgetResource(id=42, widget=ButtonWidget(id=32, label="OK", action="confirm")),
        HyperlinkResource(id=43, link=Hyperlink(url="https://example.com", meta_type="article", path="/tmp/x")),
        PoseRecognitionResult(id=51, file=_file(), poses=[pose], elapsed=120),
        HandRecognitionResult(id=52, file=_file(), hands=[hand], elapsed=80),
        FacialExpressionResult(
            id=53,
            file=_file(),
            items=[ExpressionItem(expression=1, rect=BoundingBox(x=1, y=1, width=9, height=9), confidence=0.7)],
        ),
        SpeechRecognitionResult(
            id=54,
            file=_file(),
            info=SpeechRecognitionInfo(text="hello", segments=[VoiceSegment(start=0, end=1, text="hello")]),
        ),
        SpeakerIndicator(speaker="SPEAKER_00", label="host", emotion_counts={"Happy": 2}),
        _zone(),
        ContactZoneBundle(zone=_zone(), participant=ContactZoneParticipant(id=101, timestamp=1), action=1),
        KnowledgeArticle(
            id=61, contact_id=100, base="document", category="manual", title="Guide",
            content="body", year=2024, month=1, date=2,
        ),
        IceServer(urls=["stun:stun.example.com:3478"]),
        ContactBehavior(id=71, contact=_contact(), behavior="SignIn", device=_contact().devices[0]),
    ]


def _keys(document):
    """Every object key anywhere in a JSON document."""
    if isinstance(document, dict):
        for key, value in document.items():
            yield key
            yield from _keys(value)
    elif isinstance(document, list):
        for item in document:
            yield from _keys(item)


@pytest.mark.parametrize("model", _samples(), ids=lambda model: type(model).__name__)
class TestFullShape:
    def test_round_trip(self, model):
        document = model.to_json()
        parsed = type(model).from_json(document)
        assert type(parsed) is type(model)
        assert parsed.to_json() == document

    def test_dump_selects_shape(self, model):
        assert model.dump() == model.to_json()
        assert model.dump(Shape.COMPACT) == model.to_compact_json()

    def test_compact_is_a_reduction(self, model):
        full = model.to_json()
        compact = model.to_compact_json()
        assert set(compact) <= set(full)

    def test_hashable(self, model):
        assert hash(model) == hash(type(model).from_json(model.to_json()))


class TestContactVariants:
    def test_behavior_keeps_anonymous_contact(self):
        behavior = ContactBehavior(id=72, contact=AnonymousContact(id=7, name="guest"), behavior="SignIn")
        document = behavior.to_json()
        assert document["contact"]["anonymous"] is True
        parsed = ContactBehavior.from_json(document)
        assert type(parsed.contact) is AnonymousContact
        assert parsed.to_json() == document

    def test_group_keeps_anonymous_member(self):
        group = _group()
        group.member_contacts = [_contact(), AnonymousContact(id=7, name="guest")]
        document = group.to_json()
        assert document["memberContacts"][1]["anonymous"] is True
        parsed = Group.from_json(document)
        assert [type(member) for member in parsed.member_contacts] == [Contact, AnonymousContact]
        assert parsed.to_json() == document

    def test_member_must_be_a_contact(self):
        document = _group().to_json()
        document["memberContacts"] = [_group().to_json()]
        with pytest.raises(MalformedDocument) as exc_info:
            Group.from_json(document)
        assert exc_info.value.field.startswith("memberContacts")


class TestValueRecords:
    @pytest.mark.parametrize(
        "record",
        [
            Point(x=1, y=2),
            BoundingBox(x=1, y=2, width=3, height=4),
            Device(name="Web", platform="Chrome/120", address="10.0.0.2"),
            Hyperlink(url="https://example.com", meta_type="article"),
            ExpressionItem(expression=1, rect=BoundingBox(x=1, y=1, width=9, height=9)),
            EmotionRatio(score=1.9, positive=60, negative=20, neutral=20),
            VoiceSegment(start=0, end=1, text="hello"),
            SpeechRecognitionInfo(text="hello", segments=[VoiceSegment(start=0, end=1, text="hello")]),
            SpeakerIndicator(speaker="SPEAKER_00", label="host", emotion_counts={"Happy": 2, "Sad": 1}),
            IceServer(urls=["stun:stun.example.com:3478"]),
            ContactZoneParticipant(id=500, type=2, timestamp=1, linked_contact=_group()),
        ],
        ids=lambda record: type(record).__name__,
    )
    def test_equal_records_hash_equal(self, record):
        twin = type(record).from_json(record.to_json())
        assert twin == record
        assert hash(twin) == hash(record)
        assert len({record, twin}) == 1


class TestCompactShape:
    def test_nested_file_is_compact(self):
        for model in (FileResource(file=_file()), PoseRecognitionResult(file=_file())):
            assert "directURL" in set(_keys(model.to_json()))
            assert "directURL" not in set(_keys(model.to_compact_json()))

    def test_nested_contacts_are_compact(self):
        bundle = ContactZoneBundle(
            zone=_zone(),
            participant=ContactZoneParticipant(id=500, type=2, timestamp=1, linked_contact=_group()),
            action=9,
        )
        full_keys = set(_keys(bundle.to_json()))
        compact_keys = set(_keys(bundle.to_compact_json()))
        assert {"participants", "members", "memberContacts", "devices"} <= full_keys
        assert not compact_keys & {"participants", "members", "memberContacts", "devices", "address", "port"}

    def test_linked_contact_keeps_its_variant(self):
        participant = ContactZoneParticipant(id=500, type=2, timestamp=1, linked_contact=_group())
        compact = participant.to_compact_json()
        assert compact["linkedContact"]["ownerId"] == 100
        assert compact["linkedContact"]["tag"] == "public"

    def test_value_records_compact_equals_full(self):
        for model in (Point(x=1, y=2), BoundingBox(x=1, y=2, width=3, height=4), IceServer(urls="stun:a")):
            assert model.to_compact_json() == model.to_json()

    def test_absent_optionals_are_omitted(self):
        data = AnonymousContact(id=7, name="guest").to_json()
        assert "context" not in data
        assert "externalId" not in data
        assert data["anonymous"] is True
