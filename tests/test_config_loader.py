from pathlib import Path
import textwrap

import pytest
from yjump.config import (
    coerce_scalar,
    config_file_candidates,
    deep_merge,
    load_config,
    load_config_file,
    load_typed_config,
    parse_key_values,
)


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch):
    home = tmp_path / 'home'
    home.mkdir()
    monkeypatch.setenv('HOME', str(home))
    monkeypatch.delenv('XDG_CONFIG_HOME', raising=False)
    monkeypatch.delenv('YJUMP_CONFIG_FILE', raising=False)
    monkeypatch.delenv('YJUMP_ENABLE_DOTENV', raising=False)
    monkeypatch.delenv('YJUMP__MATCHING__MAX_RESULTS', raising=False)
    monkeypatch.delenv('YJUMP__MATCHING__CASE_SENSITIVE', raising=False)
    monkeypatch.chdir(tmp_path)
    return home


def test_deep_merge_simple():
    a = {'a': 1, 'b': {'x': 1, 'y': 2}}
    b = {'b': {'y': 99, 'z': 5}, 'c': 3}
    merged = deep_merge(a, b)
    assert merged == {'a': 1, 'b': {'x': 1, 'y': 99, 'z': 5}, 'c': 3}
    assert a['b']['y'] == 2


def test_coerce_scalar():
    assert coerce_scalar('true') is True
    assert coerce_scalar('False') is False
    assert coerce_scalar('10') == 10
    assert coerce_scalar('-3') == -3
    assert coerce_scalar('1') == 1 and coerce_scalar('1') is not True
    assert isinstance(coerce_scalar('2.5'), float)
    assert coerce_scalar('["a", "b"]') == ['a', 'b']
    assert coerce_scalar('[not json') == '[not json'
    assert coerce_scalar('center') == 'center'


def test_parse_key_values_skips_comments_blank_and_malformed():
    text = textwrap.dedent('''\
    # comment
    max_results = 15

    not a pair
    font_name = "Menlo"   # inline comment
    position = 'top'
    background_color = #24273A
    ''')
    assert parse_key_values(text) == {
        'max_results': '15',
        'font_name': 'Menlo',
        'position': 'top',
        'background_color': '#24273A',
    }


def test_defaults(isolated_home):
    cfg = load_config()
    assert cfg['matching'] == {'case_sensitive': False, 'max_results': 10}
    assert cfg['cache'] == {'enabled': True, 'timeout_seconds': 2.0}
    assert cfg['log_level'] == 'INFO'


def test_defaults_not_mutated_between_calls(isolated_home):
    cfg = load_config()
    cfg['matching']['max_results'] = 99
    assert load_config()['matching']['max_results'] == 10


def test_env_override(isolated_home, monkeypatch):
    monkeypatch.setenv('YJUMP__MATCHING__MAX_RESULTS', '5')
    monkeypatch.setenv('YJUMP__MATCHING__CASE_SENSITIVE', 'true')
    cfg = load_config()
    assert cfg['matching']['max_results'] == 5
    assert cfg['matching']['case_sensitive'] is True


def test_explicit_conf_file(isolated_home, tmp_path: Path):
    conf = tmp_path / 'custom.conf'
    conf.write_text(textwrap.dedent('''\
    # yjump configuration
    max_results = 20
    case_sensitive = TRUE
    cache_window_list = false
    cache_timeout_seconds = 0.5
    font_size = 18
    background_color = #24273A
    '''), encoding='utf-8')
    cfg = load_config(explicit_file=str(conf))
    assert cfg['matching'] == {'case_sensitive': True, 'max_results': 20}
    assert cfg['cache'] == {'enabled': False, 'timeout_seconds': 0.5}
    assert 'font_size' not in cfg


def test_env_beats_conf_file(isolated_home, tmp_path: Path, monkeypatch):
    conf = tmp_path / 'custom.conf'
    conf.write_text('max_results = 20\n', encoding='utf-8')
    monkeypatch.setenv('YJUMP__MATCHING__MAX_RESULTS', '3')
    assert load_config(explicit_file=str(conf))['matching']['max_results'] == 3


def test_overrides_win(isolated_home, monkeypatch):
    monkeypatch.setenv('YJUMP__MATCHING__MAX_RESULTS', '3')
    cfg = load_config(overrides={'matching': {'max_results': 7}})
    assert cfg['matching']['max_results'] == 7
    assert cfg['matching']['case_sensitive'] is False


def test_xdg_conf_file_and_dotenv_when_enabled(isolated_home, tmp_path: Path, monkeypatch):
    xdg = tmp_path / 'xdg'
    (xdg / 'yjump').mkdir(parents=True)
    (xdg / 'yjump' / 'yjump.conf').write_text('max_results = 4\ncase_sensitive = true\n', encoding='utf-8')
    (tmp_path / '.env').write_text('YJUMP__MATCHING__MAX_RESULTS=8\n', encoding='utf-8')
    monkeypatch.setenv('XDG_CONFIG_HOME', str(xdg))
    monkeypatch.setenv('YJUMP_ENABLE_DOTENV', '1')
    cfg = load_config()
    # .env applied over the config file
    assert cfg['matching']['max_results'] == 8
    assert cfg['matching']['case_sensitive'] is True


def test_user_files_skipped_during_tests(isolated_home, tmp_path: Path):
    (isolated_home / '.yjump.conf').write_text('max_results = 4\n', encoding='utf-8')
    (tmp_path / '.env').write_text('YJUMP__MATCHING__MAX_RESULTS=8\n', encoding='utf-8')
    assert load_config()['matching']['max_results'] == 10


def test_config_file_candidates_order(isolated_home, tmp_path: Path, monkeypatch):
    monkeypatch.setenv('XDG_CONFIG_HOME', str(tmp_path / 'xdg'))
    monkeypatch.setenv('YJUMP_CONFIG_FILE', str(tmp_path / 'explicit.conf'))
    assert config_file_candidates() == [
        tmp_path / 'explicit.conf',
        tmp_path / 'xdg' / 'yjump' / 'yjump.conf',
        isolated_home / '.config' / 'yjump' / 'yjump.conf',
        isolated_home / '.yjump.conf',
    ]


def test_home_dotfile_used_when_no_xdg(isolated_home):
    (isolated_home / '.yjump.conf').write_text('max_results = 4\n', encoding='utf-8')
    assert load_config_file() == {'matching': {'max_results': 4}}


def test_load_config_file_missing_everywhere(isolated_home):
    assert load_config_file() == {}


def test_typed_config_rejects_bad_values(isolated_home, monkeypatch):
    monkeypatch.setenv('YJUMP__MATCHING__MAX_RESULTS', 'lots')
    with pytest.raises(ValueError, match='max_results'):
        load_typed_config()


@pytest.mark.parametrize('line', [
    'max_results = abc',
    'max_results = 10.0',
    'cache_timeout_seconds = soon',
    'cache_timeout_seconds = -1',
    'log_level = chatty',
])
def test_unparseable_conf_values_keep_defaults(isolated_home, tmp_path: Path, line):
    conf = tmp_path / 'custom.conf'
    conf.write_text(line + '\n', encoding='utf-8')
    cfg = load_typed_config(explicit_file=str(conf))
    assert cfg.matching.max_results == 10
    assert cfg.cache.timeout_seconds == 2.0
    assert cfg.log_level == 'INFO'


@pytest.mark.parametrize('value,expected', [('true', True), ('True', True), ('1', False), ('yes', False), ('off', False)])
def test_conf_booleans_only_true_enables(isolated_home, tmp_path: Path, value, expected):
    conf = tmp_path / 'custom.conf'
    conf.write_text(f'case_sensitive = {value}\ncache_window_list = {value}\n', encoding='utf-8')
    cfg = load_typed_config(explicit_file=str(conf))
    assert cfg.matching.case_sensitive is expected
    assert cfg.cache.enabled is expected


def test_bad_conf_line_does_not_hide_good_ones(isolated_home, tmp_path: Path):
    conf = tmp_path / 'custom.conf'
    conf.write_text('max_results = many\ncache_timeout_seconds = 3\n', encoding='utf-8')
    assert load_config_file(str(conf)) == {'cache': {'timeout_seconds': 3.0}}
