import importlib

from finance_tracker import config


def test_environment_overrides_paths(tmp_path, monkeypatch):
    monkeypatch.setenv('FINTRACK_DATA_DIR', str(tmp_path / 'data'))
    monkeypatch.setenv('FINTRACK_PREFERENCES_PATH', str(tmp_path / 'prefs' / 'p.json'))
    monkeypatch.setenv('FINTRACK_LOG_LEVEL', 'debug')
    try:
        reloaded = importlib.reload(config)
        assert reloaded.DATA_DIR == tmp_path / 'data'
        assert reloaded.EXPORTS_DIR == tmp_path / 'data' / 'exports'
        assert reloaded.PREFERENCES_PATH == (tmp_path / 'prefs' / 'p.json').resolve()
        assert reloaded.LOG_LEVEL == 'DEBUG'

        reloaded.ensure_data_directories()
        assert reloaded.EXPORTS_DIR.is_dir()
        assert reloaded.PREFERENCES_PATH.parent.is_dir()
    finally:
        monkeypatch.undo()
        importlib.reload(config)
