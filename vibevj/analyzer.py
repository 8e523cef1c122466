"""FFT-based audio analysis."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from vibevj.frequency import FrequencyBands, FrequencyData

__all__ = ["hann_window", "AudioAnalyzer"]


def hann_window(size: int) -> np.ndarray:
    """Return a symmetric Hann window of ``size`` points."""
    return np.hanning(size)


class AudioAnalyzer:
    """Windowed FFT analyser for blocks of audio samples."""

    def __init__(self, fft_size: int = 2048) -> None:
        if fft_size < 0:
            raise ValueError("fft_size must not be negative")
        self.fft_size = fft_size
        self.window = hann_window(fft_size)

    def analyze(self, samples: Sequence[float]) -> FrequencyData:
        """Return the magnitude spectrum of the first ``fft_size`` samples."""
        block = np.asarray(samples, dtype=float)[: self.fft_size]
        buffer = np.zeros(self.fft_size, dtype=complex)
        buffer[: block.size] = block * self.window[: block.size]
        spectrum = np.fft.fft(buffer) if self.fft_size else buffer
        magnitudes = np.abs(spectrum[: self.fft_size // 2])
        return FrequencyData(magnitudes.tolist())

    def analyze_bands(self, samples: Sequence[float], sample_rate: int) -> FrequencyBands:
        """Return the band energies of the first ``fft_size`` samples."""
        data = self.analyze(samples)
        return FrequencyBands.from_frequency_data(data, sample_rate, self.fft_size)