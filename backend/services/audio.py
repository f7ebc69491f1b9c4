"""
Audio cues for game events.

Tones are synthesised with numpy and played through pygame.mixer. Each cue
is a short sequence of decaying tones mixed into a single buffer, so a cue
is one fire-and-forget Sound.play() call.

Any audio failure (no device, mixer not initialised, ...) is logged and
swallowed; the game never waits on or fails because of sound.
"""

import logging
from typing import List, Sequence, Tuple

import numpy as np

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100

# (frequency Hz, waveform, duration s, volume, start offset s)
Tone = Tuple[float, str, float, float, float]

START_CUE: List[Tone] = [
    (400, "square", 0.1, 0.1, 0.0),
    (600, "square", 0.1, 0.1, 0.1),
    (800, "square", 0.2, 0.1, 0.2),
]
EAT_CUE: List[Tone] = [
    (600, "sine", 0.1, 0.1, 0.0),
    (800, "sine", 0.1, 0.1, 0.05),
]
LEVEL_UP_CUE: List[Tone] = [
    (523, "sine", 0.12, 0.12, 0.0),
    (659, "sine", 0.12, 0.12, 0.08),
    (784, "sine", 0.12, 0.12, 0.16),
    (1047, "sine", 0.25, 0.12, 0.24),
]
GAME_OVER_CUE: List[Tone] = [
    (200, "sawtooth", 0.5, 0.2, 0.0),
    (150, "sawtooth", 0.5, 0.2, 0.2),
    (100, "sawtooth", 0.8, 0.2, 0.4),
]


def synthesize_tone(
    frequency: float,
    waveform: str,
    duration: float,
    volume: float = 0.1,
    sample_rate: int = SAMPLE_RATE
) -> np.ndarray:
    """
    Return float samples in [-volume, volume] for one tone.

    The gain ramps exponentially from volume down to 0.01 over the duration.
    """
    n_samples = max(1, int(sample_rate * duration))
    t = np.arange(n_samples) / sample_rate
    phase = frequency * t

    if waveform == "sine":
        wave = np.sin(2 * np.pi * phase)
    elif waveform == "square":
        wave = np.sign(np.sin(2 * np.pi * phase))
    elif waveform == "sawtooth":
        wave = 2.0 * (phase - np.floor(phase + 0.5))
    elif waveform == "triangle":
        wave = 2.0 * np.abs(2.0 * (phase - np.floor(phase + 0.5))) - 1.0
    else:
        raise ValueError(f"Unknown waveform: {waveform}")

    end_gain = 0.01
    if volume > end_gain:
        envelope = volume * np.power(end_gain / volume, t / duration)
    else:
        envelope = np.full(n_samples, volume)
    return wave * envelope


def render_cue(tones: Sequence[Tone], sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """Mix a tone sequence into a single int16 mono buffer."""
    total = max(int((offset + duration) * sample_rate) + 1 for _, _, duration, _, offset in tones)
    mix = np.zeros(total, dtype=np.float64)
    for frequency, waveform, duration, volume, offset in tones:
        samples = synthesize_tone(frequency, waveform, duration, volume, sample_rate)
        start = int(offset * sample_rate)
        mix[start:start + len(samples)] += samples
    mix = np.clip(mix, -1.0, 1.0)
    return (mix * 32767).astype(np.int16)


class NullAudioCue:
    """Silent cue set for headless runs and tests."""

    def on_start(self) -> None:
        pass

    def on_eat(self) -> None:
        pass

    def on_level_up(self) -> None:
        pass

    def on_game_over(self) -> None:
        pass


class ToneAudioCue:
    """
    pygame.mixer backed cues.

    The mixer is initialised lazily on the first cue; if that fails the cue
    set disables itself and every later call is a no-op.
    """

    def __init__(self, sample_rate: int = SAMPLE_RATE):
        self.sample_rate = sample_rate
        self.enabled = True
        self._sounds = {}

    def init(self) -> bool:
        if not self.enabled:
            return False
        try:
            import pygame

            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=self.sample_rate, size=-16, channels=1)
            if not self._sounds:
                for name, tones in (
                    ("start", START_CUE),
                    ("eat", EAT_CUE),
                    ("level_up", LEVEL_UP_CUE),
                    ("game_over", GAME_OVER_CUE),
                ):
                    buffer = render_cue(tones, self.sample_rate)
                    self._sounds[name] = pygame.mixer.Sound(buffer=buffer.tobytes())
        except Exception as e:  # noqa: BLE001 - audio is optional
            logger.warning(f"Audio unavailable, continuing without sound: {e}")
            self.enabled = False
            return False
        return True

    def _play(self, name: str) -> None:
        try:
            if not self.init():
                return
            sound = self._sounds.get(name)
            if sound is not None:
                sound.play()
        except Exception as e:  # noqa: BLE001 - never propagate into the game loop
            logger.warning(f"Failed to play '{name}' cue: {e}")

    def on_start(self) -> None:
        self._play("start")

    def on_eat(self) -> None:
        self._play("eat")

    def on_level_up(self) -> None:
        self._play("level_up")

    def on_game_over(self) -> None:
        self._play("game_over")
