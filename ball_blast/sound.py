"""
sound.py - Synthesized sound effects
Beeps and noise bursts are generated with numpy at startup, so the game
ships without audio assets. Audio is best-effort: without a mixer the
game stays silent.
"""

import logging

import numpy as np
import pygame

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100

# event kind -> (generator, args, base volume)
_EFFECTS = {
    "fire":      ("beep", (660, 0.03), 0.08),
    "hit":       ("beep", (220, 0.02), 0.05),
    "break":     ("noise", (0.12,), 0.2),
    "powerup":   ("beep", (880, 0.15), 0.25),
    "wave":      ("beep", (520, 0.2), 0.2),
    "game_over": ("noise", (0.5,), 0.3),
}


def generate_beep(freq, duration, sample_rate=SAMPLE_RATE):
    """Stereo int16 sine tone with a linear fade-out."""
    t = np.linspace(0, duration, int(sample_rate * duration), endpoint=False)
    wave = (np.sin(2 * np.pi * freq * t) * 16000).astype(np.int16)
    fade = np.linspace(1, 0, len(wave))
    wave = (wave * fade).astype(np.int16)
    return np.column_stack((wave, wave))


def generate_noise(duration, sample_rate=SAMPLE_RATE, rng=None):
    """Stereo int16 white-noise burst with a linear fade-out."""
    rng = rng or np.random.default_rng()
    samples = int(sample_rate * duration)
    noise = rng.integers(-8000, 8000, samples).astype(np.int16)
    fade = np.linspace(1, 0, samples)
    noise = (noise * fade).astype(np.int16)
    return np.column_stack((noise, noise))


class SoundBank:
    """Plays one effect per simulation event kind."""

    def __init__(self, volume=0.5):
        self.sounds = {}
        self.volume = volume
        if not pygame.mixer.get_init():
            logger.info("Mixer unavailable; sound disabled")
            return
        for kind, (gen, args, base_volume) in _EFFECTS.items():
            samples = generate_beep(*args) if gen == "beep" else generate_noise(*args)
            try:
                sound = pygame.sndarray.make_sound(samples)
            except (pygame.error, ValueError) as exc:
                logger.warning("Could not build %s sound: %s", kind, exc)
                continue
            sound.set_volume(base_volume * volume)
            self.sounds[kind] = sound

    def play(self, kind):
        sound = self.sounds.get(kind)
        if sound is None:
            return
        try:
            sound.play()
        except pygame.error as exc:
            logger.debug("Sound %s failed: %s", kind, exc)
