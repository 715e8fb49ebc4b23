"""
Tests for layout settings loading and the logging helpers.
"""
import json
import logging
import pytest
from unittest.mock import MagicMock

from utils import logger
from utils.config import LayoutSettings, DEFAULT_SETTINGS, load_settings, default_config_path


@pytest.fixture
def main_window():
    window = MagicMock()
    logger.set_main_window(window)
    yield window
    logger.set_main_window(None)


class TestLayoutSettings:

    def test_defaults(self):
        s = LayoutSettings()
        assert (s.margin, s.spacing, s.right_padding, s.bottom_padding) == (5, 5, 10, 10)
        assert (s.container_name, s.container_width, s.container_height) == ('Colors', 600, 600)

    def test_missing_file(self, tmp_path):
        assert load_settings(str(tmp_path / 'missing.json')) == DEFAULT_SETTINGS

    def test_overrides(self, tmp_path):
        path = tmp_path / 'settings.json'
        path.write_text(json.dumps({'margin': 8, 'container_name': 'Swatches'}), encoding='utf-8')
        s = load_settings(str(path))
        assert s.margin == 8
        assert s.container_name == 'Swatches'
        assert s.spacing == 5

    def test_unknown_keys_ignored(self, tmp_path, caplog):
        path = tmp_path / 'settings.json'
        path.write_text(json.dumps({'gutter': 3}), encoding='utf-8')
        with caplog.at_level(logging.WARNING):
            s = load_settings(str(path))
        assert s == DEFAULT_SETTINGS
        assert 'gutter' in caplog.text

    def test_numeric_strings_coerced(self, tmp_path):
        path = tmp_path / 'settings.json'
        path.write_text(json.dumps({'margin': '5', 'container_width': 320}), encoding='utf-8')
        s = load_settings(str(path))
        assert s.margin == 5.0
        assert isinstance(s.margin, float)
        assert s.container_width == 320.0

    @pytest.mark.parametrize("payload", [
        {'margin': 'wide'},
        {'spacing': [5]},
        {'right_padding': None},
        {'bottom_padding': True},
        {'container_name': 42},
    ])
    def test_bad_values_raise(self, tmp_path, payload):
        path = tmp_path / 'settings.json'
        path.write_text(json.dumps(payload), encoding='utf-8')
        with pytest.raises((TypeError, ValueError)):
            load_settings(str(path))

    def test_loaded_settings_drive_layout(self, tmp_path):
        from conftest import RED, make_swatch
        from models.frame import Frame
        from models.layer import Layer
        from services.layout import layout_layers

        path = tmp_path / 'settings.json'
        path.write_text(json.dumps({'margin': '10'}), encoding='utf-8')
        board = Layer.new_artboard('board', Frame(0, 0, 100, 100))
        layer = make_swatch(RED)
        layout_layers(board, [layer], load_settings(str(path)))
        assert (layer.frame.left, layer.frame.top) == (10, 10)

    def test_malformed_json_raises(self, tmp_path):
        path = tmp_path / 'settings.json'
        path.write_text('{not json', encoding='utf-8')
        with pytest.raises(ValueError):
            load_settings(str(path))

    def test_non_object_raises(self, tmp_path):
        path = tmp_path / 'settings.json'
        path.write_text('[1, 2]', encoding='utf-8')
        with pytest.raises(ValueError):
            load_settings(str(path))

    def test_default_config_path(self, tmp_path):
        assert default_config_path(str(tmp_path)).startswith(str(tmp_path))
        assert default_config_path(str(tmp_path)).endswith('sort_background_colors.json')


class TestLogger:

    def test_status_message_without_window(self, caplog):
        with caplog.at_level(logging.INFO, logger='SortBackgroundColors'):
            logger.show_status_message('Sorted!')
        assert 'Sorted!' in caplog.text

    def test_status_message_with_window(self, main_window):
        logger.show_status_message('Sorted!', 1000)
        main_window.statusBar.return_value.showMessage.assert_called_once_with('Sorted!', 1000)

    def test_logger_raise_debug_mode(self, monkeypatch):
        monkeypatch.setattr(logger, 'DEBUG_MODE', True)
        with pytest.raises(KeyError):
            logger.loggerRaise(KeyError('x'))

    def test_logger_raise_release_mode_logs(self, monkeypatch, caplog):
        monkeypatch.setattr(logger, 'DEBUG_MODE', False)
        with caplog.at_level(logging.ERROR, logger='SortBackgroundColors'):
            with pytest.raises(RuntimeError):
                logger.loggerRaise(RuntimeError('broken'), 'Something went wrong')
        assert 'Something went wrong' in caplog.text

    def test_configure_logging(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, 'basicConfig', lambda **kw: calls.append(kw))
        logger.configure_logging(verbose=True)
        assert calls[0]['level'] == logging.DEBUG
        assert calls[0]['format'] == logger.LOG_FORMAT
