import logging
import os

import numpy as np
import pygame

from .settings import SOUND_CUES

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100

# cue -> (frequency Hz, duration s)
TONES = {
    "paddle_hit": (460, 0.06),
    "wall_hit": (230, 0.05),
    "score": (150, 0.35),
}


class AssetError(RuntimeError):
    pass


def make_tone(frequency, duration, volume=0.35, sample_rate=SAMPLE_RATE):
    n = int(sample_rate * duration)
    t = np.linspace(0, duration, n, endpoint=False, dtype=np.float32)
    wave = np.sign(np.sin(2 * np.pi * frequency * t))
    # short linear fade-out to avoid clicks
    fade = min(n, int(0.01 * sample_rate))
    if fade:
        wave[-fade:] *= np.linspace(1, 0, fade, dtype=np.float32)
    return (wave * volume * 32767).astype(np.int16)


class NullSoundBank:
    def play(self, cue):
        pass


class SoundBank:
    def __init__(self, asset_dir=None):
        self.sounds = {}
        if asset_dir:
            self._load(asset_dir)
        else:
            self._synthesize()

    def _load(self, asset_dir):
        for cue in SOUND_CUES:
            path = os.path.join(asset_dir, "sounds", f"{cue}.wav")
            if not os.path.isfile(path):
                raise AssetError(f"missing sound asset: {path}")
            try:
                self.sounds[cue] = pygame.mixer.Sound(path)
            except pygame.error as e:
                raise AssetError(f"cannot load {path}: {e}") from e
        logger.debug("Loaded sounds from %s", asset_dir)

    def _synthesize(self):
        if not pygame.mixer.get_init():
            try:
                pygame.mixer.init()
            except pygame.error as e:
                raise AssetError(f"audio unavailable: {e}") from e
        rate, _, channels = pygame.mixer.get_init()
        for cue, (freq, dur) in TONES.items():
            mono = make_tone(freq, dur, sample_rate=rate)
            buf = np.ascontiguousarray(np.column_stack([mono] * channels)) if channels > 1 else mono
            self.sounds[cue] = pygame.sndarray.make_sound(buf)

    def play(self, cue):
        self.sounds[cue].play()
