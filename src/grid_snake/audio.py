"""Fire-and-forget sound effects for Grid Snake."""

from __future__ import annotations

import logging
import random
from array import array
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Protocol, Tuple

import pygame

from .config import APPLE_CLIP, GAME_OVER_CLIP, SOUND_FINISHED_EVENT, SOUNDS_DIR

logger = logging.getLogger(__name__)


class SoundPlayer(Protocol):
    def play(self, clip_id: str) -> None: ...


class SilentPlayer:
    """Player used when sound is muted."""

    def play(self, clip_id: str) -> None:
        return None


# ===========================
#  Embedded clips
# ===========================


@dataclass(frozen=True)
class SynthPatch:
    freq: float
    duration_ms: int
    harmonics: Tuple[Tuple[float, float], ...] = ((1.0, 1.0),)
    sweep: float = 0.0
    noise: float = 0.0
    attack: float = 0.02
    decay: float = 0.15
    release: float = 0.2
    sustain_level: float = 0.6
    volume: float = 0.5
    bitcrush_levels: int = 0
    pulse_width: float = 0.5


CLIP_PATCHES: Dict[str, SynthPatch] = {
    # short rising blip
    APPLE_CLIP: SynthPatch(
        freq=380,
        duration_ms=140,
        harmonics=((1.0, 1.0), (2.0, 0.3), (3.0, 0.15)),
        sweep=120,
        attack=0.001,
        decay=0.09,
        release=0.09,
        sustain_level=0.25,
        noise=0.06,
        volume=0.8,
        bitcrush_levels=4,
        pulse_width=0.35,
    ),
    # falling growl
    GAME_OVER_CLIP: SynthPatch(
        freq=150,
        duration_ms=520,
        harmonics=((0.5, 1.0), (1.0, 0.6)),
        sweep=-320,
        noise=0.45,
        attack=0.004,
        decay=0.28,
        release=0.55,
        sustain_level=0.42,
        volume=0.7,
        bitcrush_levels=4,
    ),
}


# ===========================
#   Audio Engine
# ===========================


class AudioEngine:
    """Owns the pygame mixer and plays short clips without blocking.

    Each clip id resolves to ``<sounds_dir>/<clip_id>.wav`` when that file
    exists, otherwise to the embedded synth patch of the same id. When the
    mixer cannot start the engine stays disabled and ``play`` does nothing.
    """

    def __init__(
        self,
        sounds_dir: Path = SOUNDS_DIR,
        patches: Dict[str, SynthPatch] | None = None,
        channel_count: int = 8,
    ) -> None:
        self.sounds_dir = Path(sounds_dir)
        self.patches = dict(CLIP_PATCHES if patches is None else patches)
        self.enabled = False
        self.sounds: Dict[str, pygame.mixer.Sound] = {}
        self.sample_rate: int = 32000
        self.master_volume: float = 0.45
        self.channel_count = channel_count
        self._channels: List[pygame.mixer.Channel] = []
        self._playing: List[pygame.mixer.Channel] = []
        self._reported_missing: set[str] = set()

        self._init_audio()

    def _init_audio(self) -> None:
        try:
            pygame.mixer.init(frequency=self.sample_rate, size=-16, channels=1)
        except pygame.error as exc:
            logger.warning("Audio disabled, mixer unavailable: %s", exc)
            return

        mixer_info = pygame.mixer.get_init()
        if mixer_info:
            self.sample_rate = mixer_info[0]
        pygame.mixer.set_num_channels(self.channel_count)
        self._channels = [pygame.mixer.Channel(i) for i in range(self.channel_count)]
        self.enabled = True

        for name, patch in self.patches.items():
            sound = self._load_clip(name, patch)
            if sound is not None:
                self.sounds[name] = sound
        logger.debug("Audio ready with clips: %s", ", ".join(sorted(self.sounds)))

    def _load_clip(self, name: str, patch: SynthPatch | None) -> pygame.mixer.Sound | None:
        wav_path = self.sounds_dir / f"{name}.wav"
        if wav_path.is_file():
            try:
                return pygame.mixer.Sound(str(wav_path))
            except (pygame.error, OSError) as exc:
                logger.warning("Could not load %s, using built-in clip: %s", wav_path, exc)
        if patch is None:
            return None
        return self._render_patch(patch)

    # ===========================
    #   Synthesizer Core
    # ===========================

    def _render_patch(self, patch: SynthPatch) -> pygame.mixer.Sound:
        """Render a pulse-wave tone with an ADSR envelope and coarse bitcrush."""

        sample_rate = self.sample_rate
        sample_count = max(1, int(sample_rate * patch.duration_ms / 1000))
        attack = int(sample_count * patch.attack)
        decay = int(sample_count * patch.decay)
        release = int(sample_count * patch.release)
        sustain_start = min(sample_count, attack + decay)
        sustain_end = max(sustain_start, sample_count - release)
        pulse = max(0.05, min(0.95, patch.pulse_width))

        samples = [0.0] * sample_count
        for idx in range(sample_count):
            t = idx / sample_rate
            freq = patch.freq + patch.sweep * (idx / sample_count)

            value = 0.0
            for mult, weight in patch.harmonics:
                cycle_pos = (freq * mult * t) % 1.0
                value += weight * (1.0 if cycle_pos < pulse else -1.0)
            if patch.noise > 0.0:
                value += patch.noise * (random.random() * 2.0 - 1.0)

            if attack and idx < attack:
                env = idx / attack
            elif decay and idx < sustain_start:
                env = 1.0 - (1.0 - patch.sustain_level) * ((idx - attack) / decay)
            elif idx < sustain_end:
                env = patch.sustain_level
            elif release > 0:
                env = patch.sustain_level * (1.0 - (idx - sustain_end) / release)
            else:
                env = 0.0
            value *= max(0.0, env)

            if patch.bitcrush_levels > 0:
                levels = float(patch.bitcrush_levels)
                value = round(value * levels) / levels
            samples[idx] = value

        peak = max((abs(val) for val in samples), default=1.0) or 1.0
        scale = 32767 * (patch.volume * self.master_volume) / peak
        waveform = array(
            "h",
            (int(max(-32767, min(32767, val * scale))) for val in samples),
        )
        return pygame.mixer.Sound(buffer=waveform)

    def _find_channel(self) -> pygame.mixer.Channel | None:
        if not self._channels:
            return None
        for channel in self._channels:
            if not channel.get_busy():
                return channel
        # Steal the oldest playing channel if all are busy.
        channel = self._playing[0] if self._playing else self._channels[0]
        channel.stop()
        return channel

    # ===========================
    #   Public API
    # ===========================

    def play(self, clip_id: str) -> None:
        """Start ``clip_id`` on a free channel and return immediately."""
        if not self.enabled:
            return
        sound = self.sounds.get(clip_id)
        if sound is None:
            if clip_id not in self._reported_missing:
                self._reported_missing.add(clip_id)
                logger.warning("Sound clip %r not found, skipping", clip_id)
            return

        try:
            channel = self._find_channel()
            if channel is None:
                return
            channel.set_endevent(SOUND_FINISHED_EVENT)
            channel.play(sound)
        except pygame.error as exc:
            logger.warning("Audio playback failed, disabling sound: %s", exc)
            self.enabled = False
            return
        if channel in self._playing:
            self._playing.remove(channel)
        self._playing.append(channel)

    @property
    def playing_count(self) -> int:
        return len(self._playing)

    def release_finished(self) -> None:
        """Forget channels whose clip has stopped (on ``SOUND_FINISHED_EVENT``)."""
        self._playing = [channel for channel in self._playing if channel.get_busy()]

    def shutdown(self) -> None:
        if not self.enabled:
            return
        pygame.mixer.stop()
        self._playing.clear()
        pygame.mixer.quit()
        self.enabled = False
