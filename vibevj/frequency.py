"""Spectrum data and perceptual frequency bands."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

__all__ = ["FrequencyData", "FrequencyBands"]


@dataclass
class FrequencyData:
    """Magnitudes of FFT bins."""

    magnitudes: list[float] = field(default_factory=list)

    def magnitude_at(self, index: int) -> float:
        """Return the magnitude of a bin, or 0.0 if it does not exist."""
        if 0 <= index < len(self.magnitudes):
            return self.magnitudes[index]
        return 0.0

    def peak_bin(self) -> int:
        """Return the index of the largest magnitude (the last one on ties)."""
        best_index = 0
        best_value = None
        for index, value in enumerate(self.magnitudes):
            if math.isnan(value):
                raise ValueError("magnitudes contain NaN")
            if best_value is None or value >= best_value:
                best_index, best_value = index, value
        return best_index

    def average(self) -> float:
        if not self.magnitudes:
            return 0.0
        return sum(self.magnitudes) / len(self.magnitudes)


_BAND_RANGES = {
    "sub_bass": (20.0, 60.0),
    "bass": (60.0, 250.0),
    "low_mid": (250.0, 500.0),
    "mid": (500.0, 2000.0),
    "high_mid": (2000.0, 4000.0),
    "presence": (4000.0, 6000.0),
    "brilliance": (6000.0, 20000.0),
}


@dataclass
class FrequencyBands:
    """Average magnitude in each of seven frequency bands."""

    sub_bass: float = 0.0
    bass: float = 0.0
    low_mid: float = 0.0
    mid: float = 0.0
    high_mid: float = 0.0
    presence: float = 0.0
    brilliance: float = 0.0

    @classmethod
    def from_frequency_data(
        cls, data: FrequencyData, sample_rate: int, fft_size: int
    ) -> FrequencyBands:
        if sample_rate <= 0 or fft_size <= 0:
            raise ValueError("sample_rate and fft_size must be positive")
        bin_width = sample_rate / fft_size

        def band_average(low_freq: float, high_freq: float) -> float:
            low_bin = int(low_freq / bin_width)
            high_bin = int(high_freq / bin_width)
            total = sum(data.magnitudes[low_bin:high_bin])
            return total / max(high_bin - low_bin, 1)

        return cls(**{name: band_average(*bounds) for name, bounds in _BAND_RANGES.items()})

    def energy(self) -> float:
        return (
            self.sub_bass
            + self.bass
            + self.low_mid
            + self.mid
            + self.high_mid
            + self.presence
            + self.brilliance
        ) / 7.0

    def bass_energy(self) -> float:
        return (self.sub_bass + self.bass) / 2.0

    def treble_energy(self) -> float:
        return (self.presence + self.brilliance) / 2.0