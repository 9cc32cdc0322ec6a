"""Reading Speed Analyzer - per-sentence words-per-minute and speed bands."""

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, List, Optional, Sequence


class SpeedBand(Enum):
    SLOW = "slow"
    MEDIUM = "medium"
    FAST = "fast"
    VERY_FAST = "very_fast"


@dataclass
class SentenceTiming:
    """Timing record for one sentence; times are milliseconds."""

    sentence_index: int
    display_time: float
    word_count: int
    read_time: Optional[float] = None

    @property
    def is_complete(self) -> bool:
        return self.read_time is not None

    @property
    def duration_ms(self) -> Optional[float]:
        if self.read_time is None:
            return None
        return self.read_time - self.display_time

    @property
    def words_per_minute(self) -> Optional[float]:
        """Speed once the sentence was left; 0 for zero words or zero time."""
        duration = self.duration_ms
        if duration is None:
            return None
        if duration <= 0 or self.word_count <= 0:
            return 0.0
        return self.word_count / (duration / 60000)


@dataclass
class SpeedSummary:
    """End-of-session statistics."""

    timings: List[SentenceTiming]
    average_wpm: float
    bands: Dict[SpeedBand, List[int]] = field(default_factory=dict)

    @property
    def unfamiliar_sentences(self) -> List[int]:
        """Sentence indices flagged for review (the slow band)."""
        return self.bands.get(SpeedBand.SLOW, [])

    @property
    def completed_count(self) -> int:
        return sum(1 for timing in self.timings if timing.is_complete)

    def band_of(self, sentence_index: int) -> Optional[SpeedBand]:
        for band, indices in self.bands.items():
            if sentence_index in indices:
                return band
        return None


def nearest_rank(sorted_values: Sequence[float], fraction: float) -> float:
    """Nearest-rank percentile: the value at 1-based rank ceil(n * fraction)."""
    rank = max(math.ceil(len(sorted_values) * fraction), 1)
    return sorted_values[rank - 1]


def band_speeds(speeds: Dict[int, float]) -> Dict[SpeedBand, List[int]]:
    """
    Partition sentence indices into quartile bands by speed.

    Boundaries are nearest-rank Q1/Q2/Q3 of the sorted speeds:
    slow <= Q1 < medium <= Q2 < fast <= Q3 < very fast. Indices within a
    band are ordered by ascending speed. Small inputs may leave bands empty.
    """
    bands: Dict[SpeedBand, List[int]] = {band: [] for band in SpeedBand}
    if not speeds:
        return bands

    ordered = sorted(speeds.items(), key=lambda item: (item[1], item[0]))
    values = [speed for _, speed in ordered]
    q1 = nearest_rank(values, 0.25)
    q2 = nearest_rank(values, 0.5)
    q3 = nearest_rank(values, 0.75)

    for index, speed in ordered:
        if speed <= q1:
            bands[SpeedBand.SLOW].append(index)
        elif speed <= q2:
            bands[SpeedBand.MEDIUM].append(index)
        elif speed <= q3:
            bands[SpeedBand.FAST].append(index)
        else:
            bands[SpeedBand.VERY_FAST].append(index)
    return bands


class ReadingSpeedAnalyzer:
    """
    Accumulates display/advance events and derives reading speed.

    The summary is recomputed from the full timing history on every call.
    """

    def __init__(self):
        self._timings: Dict[int, SentenceTiming] = {}

    def record_display(self, sentence_index: int, word_count: int, timestamp: float) -> None:
        """Open a timing record when a sentence becomes visible."""
        self._timings[sentence_index] = SentenceTiming(
            sentence_index=sentence_index,
            display_time=timestamp,
            word_count=word_count,
        )

    def record_advance(self, sentence_index: int, timestamp: float) -> None:
        """Close the timing record of a sentence the reader moved past.

        Unknown or already closed sentences are left untouched.
        """
        timing = self._timings.get(sentence_index)
        if timing is None or timing.is_complete:
            return
        timing.read_time = timestamp

    def reset(self) -> None:
        self._timings.clear()

    @property
    def timings(self) -> List[SentenceTiming]:
        return [replace(self._timings[index]) for index in sorted(self._timings)]

    def summarize(self) -> SpeedSummary:
        timings = self.timings
        speeds = {
            timing.sentence_index: timing.words_per_minute
            for timing in timings
            if timing.words_per_minute is not None
        }
        average = sum(speeds.values()) / len(speeds) if speeds else 0.0
        return SpeedSummary(timings=timings, average_wpm=average, bands=band_speeds(speeds))
