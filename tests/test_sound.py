import numpy as np

from ball_blast.sound import generate_beep, generate_noise, SAMPLE_RATE


def test_beep_is_stereo_and_fades_out():
    samples = generate_beep(440, 0.1)
    assert samples.shape == (int(SAMPLE_RATE * 0.1), 2)
    assert samples.dtype == np.int16
    assert np.array_equal(samples[:, 0], samples[:, 1])
    assert abs(int(samples[-1, 0])) < 100


def test_noise_is_bounded():
    samples = generate_noise(0.05, rng=np.random.default_rng(1))
    assert samples.shape == (int(SAMPLE_RATE * 0.05), 2)
    assert samples.max() < 8000
    assert samples.min() >= -8000
