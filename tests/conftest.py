import pytest
import numpy as np
from debugcam import (
    App, DebugCameraPlugin, DebugCameraOptions, DebugCamera, Camera, Window,
    Transform, PerspectiveProjection, PRIMARY_WINDOW,
)

@pytest.fixture
def options():
    """Enabled options with the default key layout."""
    return DebugCameraOptions.default_with_keybindings(enabled=True)

@pytest.fixture
def make_app():
    """Builds an app with the plugin installed and a primary window with id 0."""
    def _make(options=None, primary=True):
        options = options if options is not None else DebugCameraOptions.default_with_keybindings(enabled=True)
        app = App().add_plugins(DebugCameraPlugin(options))
        app.world.add_window(Window(0, primary=primary))
        return app
    return _make

@pytest.fixture
def app(make_app):
    return make_app()

@pytest.fixture
def spawn_camera():
    """Spawns a debug camera at the origin looking down -Z."""
    def _spawn(app, transform=None, projection=None, target=PRIMARY_WINDOW, marker=None):
        return app.world.spawn(
            transform=transform if transform is not None else Transform(),
            camera=Camera(projection if projection is not None else PerspectiveProjection(), target=target),
            debug_camera=marker if marker is not None else DebugCamera(),
        )
    return _spawn

def _snapshot(entity):
    state = {
        'translation': entity.transform.translation.copy(),
        'rotation': entity.transform.rotation.copy(),
        'magnification': entity.debug_camera.magnification,
    }
    if entity.camera is not None:
        projection = entity.camera.projection
        state['zoom'] = projection.fov if hasattr(projection, 'fov') else projection.scale
    return state

@pytest.fixture
def snapshot():
    """Copies the mutable state of a camera entity for later comparison."""
    return _snapshot

@pytest.fixture
def assert_unchanged():
    """Asserts a camera entity is bit-for-bit identical to an earlier snapshot."""
    def _asserter(entity, before):
        after = _snapshot(entity)
        assert np.array_equal(after['translation'], before['translation'])
        assert np.array_equal(after['rotation'], before['rotation'])
        assert after['magnification'] == before['magnification']
        assert after.get('zoom') == before.get('zoom')
    return _asserter
