
"""
Sound cues for the game.

The core only knows about ``Cue`` values and an object with ``play(cue)``
and a ``muted`` flag. ``ToneAudio`` synthesizes short chiptune-style tones
into pygame.mixer Sounds once at startup, so ``play`` is a fire-and-forget
``Sound.play()`` that never stalls a frame.
"""
from __future__ import annotations
import logging
from enum import Enum
from typing import Dict, List, Optional, Tuple

import numpy as np
import pygame
from tetris_config import CONFIG

log = logging.getLogger(__name__)

SAMPLE_RATE = 44100


class Cue(Enum):
    MOVE = "move"
    ROTATE = "rotate"
    LOCK = "lock"
    LINE_CLEAR = "lineClear"
    GAME_OVER = "gameOver"


# (frequencies played in sequence, waveform, seconds per note)
TONES: Dict[Cue, Tuple[List[int], str, float]] = {
    Cue.MOVE: ([200], "square", 0.05),
    Cue.ROTATE: ([300], "triangle", 0.05),
    Cue.LOCK: ([100], "sawtooth", 0.1),
    Cue.LINE_CLEAR: ([440, 554, 659], "sine", 0.1),
    Cue.GAME_OVER: ([300, 250, 200, 150], "sawtooth", 0.3),
}


def waveform(kind: str, phase: np.ndarray) -> np.ndarray:
    """Unit waveform sampled at ``phase`` values in [0, 1)."""
    if kind == "square":
        return np.where(phase < 0.5, 1.0, -1.0)
    if kind == "triangle":
        return 4.0 * np.abs(phase - 0.5) - 1.0
    if kind == "sawtooth":
        return 2.0 * phase - 1.0
    return np.sin(2 * np.pi * phase)


def synth_note(freq: float, kind: str, duration: float, rate: int = SAMPLE_RATE, channels: int = 1) -> np.ndarray:
    """Signed 16-bit samples of one note with an exponential fade to 10%.

    Mono gives a flat array, more channels give one column per channel,
    which is the layout ``pygame.sndarray.make_sound`` expects.
    """
    t = np.linspace(0, duration, int(rate * duration), False)
    wave = 0.1 ** (t / duration) * waveform(kind, (freq * t) % 1.0)
    if channels > 1:
        wave = np.column_stack([wave] * channels)
    return (wave * 32767).astype(np.int16)


def synth_tone(freqs: List[int], kind: str, duration: float, rate: int = SAMPLE_RATE, channels: int = 1) -> np.ndarray:
    """Notes of ``freqs`` played back to back."""
    return np.concatenate([synth_note(f, kind, duration, rate, channels) for f in freqs])


class NullAudio:
    """Silent sink; keeps the mute flag so the HUD still reflects it."""
    def __init__(self, muted: bool = False):
        self.muted = muted

    def play(self, cue: Cue):
        pass


class ToneAudio:
    def __init__(self, muted: Optional[bool] = None, volume: Optional[float] = None):
        self.muted = not CONFIG["SOUND_ON"] if muted is None else muted
        volume = CONFIG["VOLUME"] if volume is None else volume
        self.sounds: Dict[Cue, pygame.mixer.Sound] = {}
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(SAMPLE_RATE, -16, 1, 512)
        except pygame.error as e:
            log.warning("audio unavailable, running silent: %s", e)
            return
        rate, _, channels = pygame.mixer.get_init()
        for cue, (freqs, kind, dur) in TONES.items():
            snd = pygame.sndarray.make_sound(synth_tone(freqs, kind, dur, rate, channels))
            snd.set_volume(volume)
            self.sounds[cue] = snd

    def play(self, cue: Cue):
        if self.muted:
            return
        snd = self.sounds.get(cue)
        if snd:
            snd.play()
