"""Speech recognition and speaker sentiment indicators."""

from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import Field, field_serializer, field_validator

from cube_entity.codec import keyed_map
from cube_entity.models.base import Entity, ValueModel
from cube_entity.models.enums import Sentiment, SpeechEmotion, lenient
from cube_entity.models.file import FileLabel

# Contribution of each emotion to a speaker's sentiment score. The sign also
# decides whether the emotion counts as positive, negative or neutral.
EMOTION_WEIGHTS: Dict[SpeechEmotion, float] = {
    SpeechEmotion.Angry: -0.2,
    SpeechEmotion.Fearful: -0.3,
    SpeechEmotion.Happy: 0.8,
    SpeechEmotion.Neutral: 0.0,
    SpeechEmotion.Sad: -0.5,
    SpeechEmotion.Surprise: 0.2,
}


class EmotionRatio(ValueModel):
    """Weighted emotion score and the percentage split by polarity."""

    score: float
    positive: int                           # Percent, 0-100
    negative: int
    neutral: int

    @classmethod
    def from_counts(cls, counts: Mapping[SpeechEmotion, int]) -> "EmotionRatio":
        score = 0.0
        positive_counts = negative_counts = neutral_counts = 0
        for emotion, weight in EMOTION_WEIGHTS.items():
            count = counts.get(emotion, 0)
            score += count * weight
            if weight > 0:
                positive_counts += count
            elif weight < 0:
                negative_counts += count
            else:
                neutral_counts += count

        total = positive_counts + negative_counts + neutral_counts
        if total == 0:
            return cls(score=0.0, positive=0, negative=0, neutral=100)
        positive = round(positive_counts * 100 / total)
        negative = round(negative_counts * 100 / total)
        return cls(score=score, positive=positive, negative=negative, neutral=100 - positive - negative)


class VoiceSegment(ValueModel):
    """A span of recognized speech."""

    start: float                            # Seconds from the start of the audio
    end: float
    text: str
    speaker: Optional[str] = None           # Diarization label, e.g. "SPEAKER_00"
    emotion: lenient(SpeechEmotion) = SpeechEmotion.Neutral
    sentiment: lenient(Sentiment) = Sentiment.Undefined

    @property
    def duration(self) -> float:
        return self.end - self.start


class SpeechRecognitionInfo(ValueModel):
    """Transcript of one audio file."""

    lang: str = "zh"
    text: str
    duration: float = 0.0                   # Seconds
    segments: Tuple[VoiceSegment, ...] = ()


class SpeechRecognitionResult(Entity):
    """Speech recognition over one audio file."""

    file: FileLabel
    info: SpeechRecognitionInfo
    elapsed: int = 0                        # Inference time, ms


class SpeakerIndicator(ValueModel):
    """Per-speaker statistics accumulated over a diarized recording."""

    speaker: str
    label: str
    total_duration: float = 0.0             # Seconds
    total_words: int = 0
    emotion_counts: Dict[SpeechEmotion, int] = Field(default_factory=dict)
    duration_ratio: int = 0                 # Percent of the recording
    rhythm: int = 0                         # Words per minute
    emotion_ratio: Optional[EmotionRatio] = None
    sentiment: lenient(Sentiment) = Sentiment.Undefined
    positive_segment_ratio: int = 0
    negative_segment_ratio: int = 0
    neutral_segment_ratio: int = 0

    @field_validator("emotion_counts", mode="before")
    @classmethod
    def _decode_emotion_counts(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return keyed_map.decode(value, SpeechEmotion.parse)
        return value

    @field_serializer("emotion_counts")
    def _encode_emotion_counts(self, value: Dict[SpeechEmotion, int]) -> Dict[str, int]:
        return keyed_map.encode(value)

    def __hash__(self) -> int:
        counts = tuple(sorted((emotion.code, count) for emotion, count in self.emotion_counts.items()))
        return hash((self.speaker, self.label, self.total_duration, self.total_words, counts))
