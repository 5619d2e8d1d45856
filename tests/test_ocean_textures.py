import numpy as np
import pytest

from panda3d.core import SamplerState, Texture

from oceanfft.ocean.ocean_config import OceanConfig
from oceanfft.ocean.ocean_errors import OceanInvariantError
from oceanfft.ocean.ocean_simulation import initialize, step_frame
from oceanfft.ocean.ocean_textures import OceanFieldTexture, OceanFieldTextures


def test_height_texture_layout():
    field = OceanFieldTexture("height", 64, channels=1)
    tex = field.texture
    assert tex.get_x_size() == 64
    assert tex.get_y_size() == 64
    assert tex.get_format() == Texture.F_r32
    assert tex.get_component_type() == Texture.T_float
    assert tex.get_wrap_u() == SamplerState.WM_repeat
    assert tex.get_wrap_v() == SamplerState.WM_repeat
    field.release()


def test_publish_and_read_back_scalar(rng):
    field = OceanFieldTexture("height", 64, channels=1)
    data = rng.standard_normal((64, 64)).astype(np.float32)
    field.publish(data)

    assert field.texture.has_ram_image()
    np.testing.assert_array_equal(field.read()[..., 0], data)
    field.release()


def test_rgba_texture_keeps_channel_order(rng):
    field = OceanFieldTexture("normal", 64, channels=4)
    assert field.texture.get_format() == Texture.F_rgba32

    data = rng.standard_normal((64, 64, 3)).astype(np.float32)
    field.publish(data)
    back = field.read()
    np.testing.assert_array_equal(back[..., :3], data)
    np.testing.assert_array_equal(back[..., 3], 0.0)
    field.release()


def test_publish_overwrites(rng):
    field = OceanFieldTexture("height", 64, channels=1)
    field.publish(np.ones((64, 64)))
    field.publish(np.full((64, 64), 2.0))
    np.testing.assert_array_equal(field.read()[..., 0], 2.0)
    field.release()


def test_publish_rejects_wrong_size():
    field = OceanFieldTexture("height", 64, channels=1)
    with pytest.raises(OceanInvariantError):
        field.publish(np.zeros((128, 128)))
    with pytest.raises(OceanInvariantError):
        field.publish(np.zeros((64, 64, 2)))
    field.release()


def test_release_exactly_once():
    field = OceanFieldTexture("height", 64, channels=1)
    field.publish(np.zeros((64, 64)))
    field.release()
    assert field.released
    assert not field.texture.has_ram_image()

    with pytest.raises(OceanInvariantError):
        field.release()
    with pytest.raises(OceanInvariantError):
        field.publish(np.zeros((64, 64)))


def test_unsupported_channel_count():
    with pytest.raises(OceanInvariantError):
        OceanFieldTexture("uv", 64, channels=2)


def test_publish_frame(small_config):
    frame = step_frame(initialize(small_config), 1.0)
    textures = OceanFieldTextures(64)
    textures.publish(frame)

    disp = textures.displacement_map.read()
    np.testing.assert_allclose(disp[..., 0], frame.displacement[..., 0].astype(np.float32))
    np.testing.assert_allclose(disp[..., 1], frame.height.astype(np.float32))
    np.testing.assert_allclose(disp[..., 2], frame.displacement[..., 1].astype(np.float32))

    textures.release()
    assert all(tex.released for tex in textures.all())
