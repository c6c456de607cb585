import numpy as np
import pygame

SAMPLE_RATE = 44100


def _envelope(n, attack, release, sample_rate=SAMPLE_RATE):
    env = np.ones(n)
    a = min(n, int(attack * sample_rate))
    r = min(n - a, int(release * sample_rate))
    if a:
        env[:a] = np.linspace(0, 1, a)
    if r:
        env[-r:] = np.linspace(1, 0, r)
    return env


def _to_sound(wave, volume):
    wave = np.clip(wave * volume, -1.0, 1.0)
    samples = (wave * (2**15 - 1)).astype(np.int16)
    channels = (pygame.mixer.get_init() or (0, 0, 2))[2]
    if channels == 1:
        return pygame.sndarray.make_sound(samples)
    return pygame.sndarray.make_sound(np.column_stack([samples] * channels))


def make_tone(freq=440, duration=0.12, volume=0.2, sweep=0.0, sample_rate=SAMPLE_RATE):
    """Sine tone; ``sweep`` bends the pitch by that many Hz over the clip."""
    t = np.linspace(0, duration, int(sample_rate * duration), False)
    phase = 2 * np.pi * (freq * t + 0.5 * (sweep / duration) * t * t)
    wave = np.sin(phase) * _envelope(len(t), 0.01, 0.03, sample_rate)
    return _to_sound(wave, volume)


def make_crash(duration=0.5, volume=0.35, sample_rate=SAMPLE_RATE):
    """Decaying noise burst with a low thump, for the explosion."""
    n = int(sample_rate * duration)
    t = np.linspace(0, duration, n, False)
    noise = np.random.uniform(-1.0, 1.0, n)
    thump = np.sin(2 * np.pi * 70 * t)
    decay = np.exp(-6.0 * t / duration)
    wave = (0.6 * noise + 0.4 * thump) * decay * _envelope(n, 0.005, 0.05, sample_rate)
    return _to_sound(wave, volume)


def load_sounds():
    """Build the sound effects. Needs an initialised mixer."""
    if not pygame.mixer.get_init():
        pygame.mixer.init()
    return {
        'start': make_tone(freq=660, duration=0.12, volume=0.25, sweep=220),
        'eat': make_tone(freq=880, duration=0.10, volume=0.22),
        'die': make_crash(),
    }
