import numpy as np
import pytest

from firstsound.sinewave import SineWave, SineWaveChannel


def test_process_without_prepare_raises():
    wave = SineWave()
    with pytest.raises(RuntimeError):
        wave.process(np.zeros((2, 8), dtype=np.float32))


def test_channel_mismatch_raises():
    wave = SineWave()
    wave.prepare(48000.0, 2)
    with pytest.raises(ValueError):
        wave.process(np.zeros((1, 8), dtype=np.float32))


@pytest.mark.parametrize("amplitude", [-0.1, 1.5])
def test_amplitude_out_of_range_raises(amplitude):
    wave = SineWave(amplitude=amplitude)
    wave.prepare(48000.0, 1)
    with pytest.raises(ValueError):
        wave.process(np.zeros((1, 8), dtype=np.float32))


def test_defaults_match_source():
    wave = SineWave()
    assert wave.frequency == 440.0
    assert wave.amplitude == pytest.approx(0.02)


def test_quarter_period_samples():
    wave = SineWave(frequency=1.0, amplitude=1.0)
    wave.prepare(4.0, 1)
    buffer = np.zeros((1, 4), dtype=np.float32)
    wave.process(buffer)
    assert buffer[0] == pytest.approx([0.0, 1.0, 0.0, -1.0], abs=1e-6)
    assert wave.current_time[0] == pytest.approx(0.0, abs=1e-9)


def test_output_bounded_by_amplitude_and_starts_at_zero():
    wave = SineWave(frequency=1000.0, amplitude=0.5)
    wave.prepare(44100.0, 2)
    buffer = np.ones((2, 512), dtype=np.float32)
    wave.process(buffer)
    assert buffer[0, 0] == 0.0
    assert np.max(np.abs(buffer)) <= 0.5 + 1e-6
    np.testing.assert_allclose(buffer[0], buffer[1])


def test_blocks_are_continuous():
    one = SineWave(frequency=300.0)
    two = SineWave(frequency=300.0)
    one.prepare(48000.0, 1)
    two.prepare(48000.0, 1)
    whole = np.zeros((1, 512), dtype=np.float32)
    one.process(whole)
    first = np.zeros((1, 256), dtype=np.float32)
    second = np.zeros((1, 256), dtype=np.float32)
    two.process(first)
    two.process(second)
    np.testing.assert_allclose(np.concatenate([first[0], second[0]]), whole[0], atol=1e-5)


def test_time_stays_below_one():
    wave = SineWave()
    wave.prepare(100.0, 1)
    wave.process(np.zeros((1, 250), dtype=np.float32))
    assert 0.0 <= wave.current_time[0] < 1.0


def test_prepare_resizes_keeping_existing_time():
    wave = SineWave()
    wave.prepare(100.0, 1)
    wave.process(np.zeros((1, 10), dtype=np.float32))
    kept = wave.current_time[0]
    wave.prepare(100.0, 3)
    assert wave.current_time[0] == kept
    assert wave.current_time[1:] == [0.0, 0.0]


def test_channel_defaults_and_length():
    channel = SineWaveChannel()
    assert channel.amplitude == pytest.approx(0.2)
    channel.prepare(48000.0)
    out = channel.process(64)
    assert out.shape == (64,)
    assert out.dtype == np.float32
    assert out[0] == 0.0
    assert np.max(np.abs(out)) <= 0.2 + 1e-6


def test_channel_without_prepare_stays_silent():
    channel = SineWaveChannel()
    out = channel.process(16)
    assert out.shape == (16,)
    assert out.tolist() == [0.0] * 16
    assert channel.current_time == 0.0


def test_channel_blocks_are_continuous_and_time_not_wrapped():
    a = SineWaveChannel(frequency=250.0)
    b = SineWaveChannel(frequency=250.0)
    a.prepare(1000.0)
    b.prepare(1000.0)
    whole = a.process(2000)
    parts = np.concatenate([b.process(1000), b.process(1000)])
    np.testing.assert_allclose(parts, whole, atol=1e-5)
    assert b.current_time > 1.0


def test_channel_negative_samples_raises():
    with pytest.raises(ValueError):
        SineWaveChannel().process(-1)